"""Session-scoped todo lists with in-memory and SQLite storage."""

__version__ = "0.3.0"
