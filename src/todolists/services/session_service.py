"""Session persistence for todolists.

The session is a plain mapping saved as JSON between command invocations.
It holds the signed-in username and, for the memory backend, the todo lists
themselves.
"""

from __future__ import annotations

import json
from json import JSONDecodeError
from pathlib import Path
from typing import Any

from platformdirs import user_data_dir

SESSION_FILE = "session.json"


class SessionService:
    """Load and save the session mapping."""

    def __init__(self, session_path: str | Path | None = None):
        if session_path is None:
            session_path = Path(user_data_dir("todolists")) / SESSION_FILE
        self.session_path = Path(session_path)

    def load(self) -> dict[str, Any]:
        """Load the saved session, or an empty one if there is none.

        Raises:
            RuntimeError: If the session file exists but cannot be parsed
        """
        try:
            with open(self.session_path, encoding="utf-8") as f:
                session = json.load(f)
        except FileNotFoundError:
            return {}
        except JSONDecodeError as e:
            raise RuntimeError(
                f"Corrupt session file {self.session_path}: {e}"
            ) from e

        if not isinstance(session, dict):
            raise RuntimeError(f"Corrupt session file {self.session_path}")
        return session

    def save(self, session: dict[str, Any]) -> None:
        """Write the session to disk (owner read/write only)."""
        self.session_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.session_path, "w", encoding="utf-8") as f:
            json.dump(session, f, indent=2)
        self.session_path.chmod(0o600)
