"""Command groups of the todolists CLI."""
