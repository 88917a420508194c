"""Context and strategy management for todolists.

This module bootstraps the Strategy Pattern for one command invocation:
it reads the configuration, loads the session, and builds the
StrategyContext whose store every service uses.

Usage Pattern:
    from todolists.services.context_manager import get_context_manager

    manager = get_context_manager()
    store = manager.get_strategy_context().todo_store
    ...
    manager.save_session()
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from todolists.adapters.memory import LAST_ID_KEY, SESSION_KEY
from todolists.models.strategy import MemoryStrategy, SqliteStrategy, StrategyContext
from todolists.services.config_service import ConfigService, get_config_service
from todolists.services.session_service import SessionService
from todolists.utils.id_generator import generator_after


class ContextManager:
    """Owns the session and the strategy context of one invocation."""

    def __init__(
        self,
        config_service: ConfigService | None = None,
        session_service: SessionService | None = None,
    ):
        self.config_service = config_service or get_config_service()
        self.session_service = session_service or SessionService()
        self._session: dict[str, Any] | None = None
        self._strategy_context: StrategyContext | None = None

    @property
    def session(self) -> dict[str, Any]:
        """The session mapping, loaded on first access."""
        if self._session is None:
            self._session = self.session_service.load()
        return self._session

    def get_strategy_context(self) -> StrategyContext:
        """Build (once) the strategy selected by the configured persistence mode."""
        if self._strategy_context is not None:
            return self._strategy_context

        config = self.config_service.config
        if config.persistence == "sqlite":
            strategy = SqliteStrategy(
                db_path=self.config_service.database_path,
                username=self.session.get("username"),
            )
        else:
            next_id = generator_after(
                self.session.get(SESSION_KEY) or [],
                high_water=self.session.get(LAST_ID_KEY, 0),
            )
            strategy = MemoryStrategy(self.session, next_id=next_id)

        self._strategy_context = StrategyContext(strategy)
        return self._strategy_context

    def save_session(self) -> None:
        """Persist the session if it was loaded during this invocation."""
        if self._session is not None:
            self.session_service.save(self._session)

    def reset(self) -> None:
        """Forget the cached strategy so the next access rebuilds it."""
        self._strategy_context = None


@lru_cache(maxsize=1)
def get_context_manager() -> ContextManager:
    """Get the process-wide ContextManager."""
    return ContextManager()
