"""Custom exceptions for todolists."""


class TodoListsError(Exception):
    """Base exception for all user-facing todolists errors."""


class NotFoundError(TodoListsError):
    """Raised when a list or todo does not exist or belongs to another user."""

    def __init__(self, message: str = "Not found."):
        super().__init__(message)


class TitleValidationError(TodoListsError):
    """Raised when a list or todo title is rejected.

    Carries every failed check so all of them can be reported at once.
    """

    def __init__(self, messages: list[str]):
        super().__init__("; ".join(messages))
        self.messages = list(messages)


class AuthenticationError(TodoListsError):
    """Raised when sign-in fails or a command needs a signed-in session."""
