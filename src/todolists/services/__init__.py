"""Services layer - Business logic on top of the todo store."""
