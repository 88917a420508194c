"""Unit tests for SessionService."""

from __future__ import annotations

import stat
from unittest.mock import patch

import pytest

from todolists.services.session_service import SessionService


@pytest.fixture()
def service(tmp_path):
    return SessionService(tmp_path / "session.json")


def test_missing_file_gives_empty_session(service):
    assert service.load() == {}


def test_round_trip(service):
    session = {"username": "alice", "signed_in": True, "todo_lists": []}
    service.save(session)
    assert service.load() == session


def test_file_is_owner_only(service):
    service.save({})
    assert stat.S_IMODE(service.session_path.stat().st_mode) == 0o600


def test_corrupt_file(service):
    service.session_path.write_text("[1, 2")
    with pytest.raises(RuntimeError, match="Corrupt session file"):
        service.load()


def test_non_object_file(service):
    service.session_path.write_text("[]")
    with pytest.raises(RuntimeError, match="Corrupt session file"):
        service.load()


def test_default_location(tmp_path):
    with patch(
        "todolists.services.session_service.user_data_dir", return_value=str(tmp_path)
    ):
        assert SessionService().session_path == tmp_path / "session.json"
