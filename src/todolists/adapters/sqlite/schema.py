"""Database schema definitions for the relational todo store.

Tables are created idempotently; there is no versioned migration step.
Every list and todo row carries its owner's username so that each query can
be scoped to one user.
"""

from __future__ import annotations

# Users table - credentials only
CREATE_USERS_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    username TEXT PRIMARY KEY,
    password_hash TEXT NOT NULL
)
"""

# Todo lists table
CREATE_TODOLISTS_TABLE = """
CREATE TABLE IF NOT EXISTS todolists (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    username TEXT NOT NULL,
    FOREIGN KEY (username) REFERENCES users(username) ON DELETE CASCADE
)
"""

# Todos table - deleted together with their list
CREATE_TODOS_TABLE = """
CREATE TABLE IF NOT EXISTS todos (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    done BOOLEAN NOT NULL DEFAULT 0,
    todolist_id INTEGER NOT NULL,
    username TEXT NOT NULL,
    FOREIGN KEY (todolist_id) REFERENCES todolists(id) ON DELETE CASCADE,
    FOREIGN KEY (username) REFERENCES users(username) ON DELETE CASCADE
)
"""

ALL_TABLES = [
    CREATE_USERS_TABLE,
    CREATE_TODOLISTS_TABLE,
    CREATE_TODOS_TABLE,
]

ALL_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_todolists_username ON todolists(username)",
    "CREATE INDEX IF NOT EXISTS idx_todos_list_user ON todos(todolist_id, username)",
]


def initialize_schema(connection) -> None:
    """Create all tables and indexes if they do not exist yet.

    Args:
        connection: sqlite3.Connection object
    """
    cursor = connection.cursor()

    for create_statement in ALL_TABLES:
        cursor.execute(create_statement)

    for index_statement in ALL_INDEXES:
        cursor.execute(index_statement)

    connection.commit()
