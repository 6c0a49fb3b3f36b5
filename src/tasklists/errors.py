"""Domain errors raised by the service layer.

Two kinds matter to callers: ``InvalidInputError`` for caller data that
violates a precondition and ``ResourceNotFoundError`` for lookups that do
not resolve. The API maps them to 400 and 404 respectively.
"""

from typing import Any


class TaskListsError(Exception):
    """Base class for all task list domain errors."""


class InvalidInputError(TaskListsError, ValueError):
    """Raised when caller-supplied data violates a precondition."""


class ResourceNotFoundError(TaskListsError, LookupError):
    """Raised when a task list or task does not exist."""

    def __init__(self, resource: str, identifier: Any, message: str | None = None):
        """Initialize with the missing resource context."""
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} with ID {identifier} not found")


__all__ = ["InvalidInputError", "ResourceNotFoundError", "TaskListsError"]
