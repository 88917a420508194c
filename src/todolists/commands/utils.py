"""Helpers shared by command modules."""

from __future__ import annotations

from todolists.models import NotFoundError
from todolists.services.context_manager import get_context_manager
from todolists.services.todo_service import TodoService


def parse_id(value: str) -> int:
    """Coerce an identifier given on the command line to an integer.

    Raises:
        NotFoundError: If the value is not a whole number
    """
    try:
        return int(value.strip())
    except (AttributeError, ValueError) as e:
        raise NotFoundError() from e


def get_todo_service() -> TodoService:
    """TodoService bound to the configured store and title limit."""
    manager = get_context_manager()
    return TodoService(
        manager.get_strategy_context().todo_store,
        title_max_length=manager.config_service.config.title_max_length,
    )
