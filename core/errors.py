"""Error taxonomy shared by the task access layer and its callers."""
from __future__ import annotations


class TaskError(Exception):
    """Base class for every failure an access-layer operation can report."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthenticated(TaskError):
    kind = "unauthenticated"

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class InvalidInput(TaskError, ValueError):
    kind = "invalid_input"


class NotFound(TaskError, LookupError):
    kind = "not_found"

    def __init__(self, message: str = "Task not found"):
        super().__init__(message)


class Forbidden(TaskError):
    kind = "forbidden"

    def __init__(self, message: str = "Not authorized to access this task"):
        super().__init__(message)


__all__ = ["TaskError", "Unauthenticated", "InvalidInput", "NotFound", "Forbidden"]
