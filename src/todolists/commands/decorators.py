"""Decorators for command functions."""

import asyncio
import functools
import inspect
import logging
import time
import traceback
from collections.abc import Callable

import typer

from todolists.models import TitleValidationError, TodoListsError
from todolists.services.auth_service import AuthService
from todolists.services.context_manager import get_context_manager
from todolists.utils.logger import get_logger
from todolists.utils.ui.formatters import format_error


def _require_auth() -> None:
    """Require a signed-in session.

    Note: the memory backend doesn't require authentication.
    """
    manager = get_context_manager()
    if not manager.get_strategy_context().requires_authentication:
        return

    if not AuthService.is_authenticated(manager.session):
        format_error("Not signed in. Use 'todolists auth signin' to authenticate.")
        raise typer.Exit(1)


def _command_logger() -> logging.Logger:
    """Logger at the configured level, INFO while the config is unreadable."""
    try:
        level = get_context_manager().config_service.config.log_level
    except RuntimeError:
        level = "INFO"
    return get_logger(level)


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(_func: Callable | None = None, *, auth_required: bool = True):
    """Decorator to wrap command functions with common functionality."""

    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = _command_logger()
            cmd = func.__name__
            start = time.monotonic()
            logger.info("command started: %s", cmd)
            try:
                # 1. Handle Auth
                if auth_required:
                    _require_auth()

                # 2. Run Sync or Async
                if inspect.iscoroutinefunction(func):
                    result = asyncio.run(func(*args, **kwargs))
                else:
                    result = func(*args, **kwargs)

                # 3. Keep session changes (sign-in, memory store state)
                get_context_manager().save_session()

                elapsed = time.monotonic() - start
                logger.info("command completed: %s (%.3fs)", cmd, elapsed)
                return result

            except TitleValidationError as e:
                logger.warning("command rejected: %s - %s", cmd, str(e))
                for message in e.messages:
                    format_error(message)
                raise typer.Exit(code=1) from e

            except (AppError, TodoListsError) as e:
                elapsed = time.monotonic() - start
                logger.error(
                    "command failed: %s (%.3fs) - %s",
                    cmd,
                    elapsed,
                    str(e),
                )
                format_error(str(e))
                raise typer.Exit(code=getattr(e, "exit_code", 1)) from e

            except typer.Exit:
                raise

            except Exception as e:
                elapsed = time.monotonic() - start
                logger.error(
                    "command failed: %s (%.3fs) - %s\n%s",
                    cmd,
                    elapsed,
                    str(e),
                    traceback.format_exc(),
                )
                format_error(f"An unexpected error occurred: {str(e)}")
                raise typer.Exit(code=1) from e

        return wrapper

    if _func is None:
        return decorator
    return decorator(_func)
