"""User management for the SQLite todo store.

Users are created here, outside the store: the store only verifies
credentials.
"""

from __future__ import annotations

import sqlite3

import bcrypt

from todolists.adapters.sqlite.utils import row_to_dict
from todolists.models import User


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a fresh bcrypt salt."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash.

    A malformed hash counts as a failed check.
    """
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        return False


def create_user(
    connection: sqlite3.Connection, username: str, password: str, rounds: int = 12
) -> User:
    """Create a user with a bcrypt-hashed password.

    Args:
        connection: Database connection
        username: Unique username
        password: Plain-text password
        rounds: bcrypt cost factor

    Returns:
        The created User

    Raises:
        ValueError: If the username is blank or already taken
    """
    username = username.strip()
    if not username:
        raise ValueError("Username is required.")

    user = User(username=username, password_hash=hash_password(password, rounds))
    try:
        connection.execute(
            "INSERT INTO users (username, password_hash) VALUES (?, ?)",
            (user.username, user.password_hash),
        )
    except sqlite3.IntegrityError as e:
        connection.rollback()
        raise ValueError(f"User already exists: {username}") from e
    connection.commit()
    return user


def get_user(connection: sqlite3.Connection, username: str) -> User | None:
    """Fetch a user row by username, or None if absent."""
    cursor = connection.execute(
        "SELECT username, password_hash FROM users WHERE username = ?",
        (username,),
    )
    row = cursor.fetchone()
    if row is None:
        return None
    return User(**row_to_dict(row))
