"""Custom exception hierarchy for todosync.

Actions on the controller never raise; these exceptions travel inside
``ActionResult.error`` or surface from configuration loading, where the
host CLI turns them into exit codes.
"""

from typing import Any


class TodosyncError(Exception):
    """Base exception for all todosync-specific errors.

    Attributes:
        message: The error message.
        context: Arbitrary keyword arguments providing additional error context.

    Example:
        >>> raise TodosyncError("Bad payload", url="http://localhost:8080/api/todos")
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        parts = [f"message={self.message!r}"]

        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            parts.append(f"context={{{ctx_str}}}")

        return f"{self.__class__.__name__}({', '.join(parts)})"


class TodosyncConfigError(TodosyncError):
    """Exception raised for configuration-related errors.

    Use this for:
    - Malformed values in ~/.todosync/config.yaml
    - An API base that is empty once normalized
    """


class TodoParseError(TodosyncError):
    """Exception raised when a todo payload cannot be decoded.

    Use this for:
    - Bodies that are not valid JSON
    - JSON that is not an array of objects
    - Records missing ``id``, ``title`` or ``done``
    """
