"""Database connection management for the SQLite todo store.

This module provides a singleton connection manager, ensuring one
connection per process with foreign key enforcement (needed for the
cascading delete of todos) and an up-to-date schema.
"""

from __future__ import annotations

import atexit
import os
import sqlite3
from pathlib import Path

from platformdirs import user_data_dir

from todolists.adapters.sqlite.schema import initialize_schema

DEFAULT_DB_NAME = "todolists.db"


def default_db_path() -> Path:
    """Default database location inside the user data directory."""
    return Path(user_data_dir("todolists")) / DEFAULT_DB_NAME


class DatabaseConnection:
    """Singleton connection manager for the SQLite database.

    Provides:
    - Single connection per process (connection reuse)
    - WAL mode for file databases
    - Foreign key constraint enforcement
    - Automatic directory creation
    - Owner-only file permissions
    """

    _instance: DatabaseConnection | None = None
    _connection: sqlite3.Connection | None = None
    _db_path: Path | None = None

    def __new__(cls) -> DatabaseConnection:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_connection(cls, db_path: str | Path | None = None) -> sqlite3.Connection:
        """Get or create the database connection.

        Args:
            db_path: Path to database file. If None, uses default location.

        Returns:
            sqlite3.Connection configured for todolists
        """
        instance = cls()
        db_path = Path(db_path) if db_path is not None else default_db_path()

        if instance._connection is not None and instance._db_path == db_path:
            return instance._connection

        if instance._connection is not None:
            instance._connection.close()

        db_path.parent.mkdir(parents=True, exist_ok=True)
        is_new_database = not db_path.exists()

        # Worker threads share this connection; stores serialize access.
        connection = sqlite3.connect(
            str(db_path),
            check_same_thread=False,
            timeout=30.0,
        )
        configure_connection(connection)
        connection.execute("PRAGMA journal_mode = WAL")

        if is_new_database:
            os.chmod(db_path, 0o600)

        initialize_schema(connection)

        instance._connection = connection
        instance._db_path = db_path
        atexit.register(cls.close_connection)

        return connection

    @classmethod
    def close_connection(cls) -> None:
        """Close the database connection."""
        instance = cls()
        if instance._connection is not None:
            try:
                instance._connection.commit()
                instance._connection.close()
            finally:
                instance._connection = None
                instance._db_path = None


def configure_connection(connection: sqlite3.Connection) -> None:
    """Apply row access by column name and foreign key enforcement."""
    connection.row_factory = sqlite3.Row
    connection.execute("PRAGMA foreign_keys = ON")


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Helper function to get the database connection.

    Args:
        db_path: Optional path to database file

    Returns:
        Configured sqlite3.Connection
    """
    return DatabaseConnection.get_connection(db_path)
