"""Shared test fixtures and configuration.

Provides real in-memory SQLite databases and isolates CLI tests from the
real config, data and log directories.
"""

from __future__ import annotations

import logging
import sqlite3
from unittest.mock import patch

import pytest

from todolists.adapters.sqlite.connection import DatabaseConnection, configure_connection
from todolists.adapters.sqlite.schema import initialize_schema
from todolists.adapters.sqlite.todo_store import SqliteTodoStore
from todolists.adapters.sqlite.user_manager import create_user
from todolists.utils.id_generator import SequentialIdGenerator

# Low bcrypt cost keeps the suite fast.
TEST_ROUNDS = 4


# ---------------------------------------------------------------------------
# SQLite helpers
# ---------------------------------------------------------------------------


def _create_in_memory_db() -> sqlite3.Connection:
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    configure_connection(conn)
    initialize_schema(conn)
    return conn


@pytest.fixture
def db():
    """In-memory database with users alice/secret and bob/hunter2."""
    conn = _create_in_memory_db()
    create_user(conn, "alice", "secret", rounds=TEST_ROUNDS)
    create_user(conn, "bob", "hunter2", rounds=TEST_ROUNDS)
    yield conn
    conn.close()


@pytest.fixture
def alice_store(db):
    return SqliteTodoStore(db, "alice")


@pytest.fixture
def bob_store(db):
    return SqliteTodoStore(db, "bob")


# ---------------------------------------------------------------------------
# Memory helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def id_generator():
    return SequentialIdGenerator(start=100)


# ---------------------------------------------------------------------------
# CLI isolation
# ---------------------------------------------------------------------------


def _clear_caches() -> None:
    from todolists.services.config_service import get_config_service
    from todolists.services.context_manager import get_context_manager

    get_config_service.cache_clear()
    get_context_manager.cache_clear()


@pytest.fixture
def cli_env(tmp_path):
    """Point config, session, database and log locations at *tmp_path*.

    Clears the service caches and the connection singleton around the test.
    """
    tmpdir = str(tmp_path)
    _clear_caches()
    DatabaseConnection.close_connection()
    with (
        patch("todolists.services.config_service.user_config_dir", return_value=tmpdir),
        patch("todolists.services.config_service.user_data_dir", return_value=tmpdir),
        patch("todolists.services.session_service.user_data_dir", return_value=tmpdir),
        patch("todolists.adapters.sqlite.connection.user_data_dir", return_value=tmpdir),
        patch(
            "todolists.commands.decorators.get_logger",
            return_value=logging.getLogger("todolists.tests"),
        ),
    ):
        yield tmp_path
    DatabaseConnection.close_connection()
    _clear_caches()
