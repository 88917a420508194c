"""Service for handling sign-in and sign-out against the session."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from todolists.models import AuthenticationError
from todolists.repositories import TodoStore


class AuthService:
    """Service for handling authentication-related operations."""

    def __init__(self, store: TodoStore, session: MutableMapping[str, Any]):
        self.store = store
        self.session = session

    async def sign_in(self, username: str, password: str) -> None:
        """Verify credentials and mark the session as signed in.

        The username is trimmed before the lookup.

        Raises:
            AuthenticationError: If the credentials are not valid
        """
        username = username.strip()
        if not await self.store.existing_user(username, password):
            raise AuthenticationError("Invalid Credentials.")
        self.session["username"] = username
        self.session["signed_in"] = True

    def sign_out(self) -> None:
        """Drop the signed-in user from the session."""
        self.session.pop("username", None)
        self.session.pop("signed_in", None)

    @staticmethod
    def is_authenticated(session: Mapping[str, Any]) -> bool:
        """Check if the session belongs to a signed-in user."""
        return bool(session.get("signed_in")) and bool(session.get("username"))
