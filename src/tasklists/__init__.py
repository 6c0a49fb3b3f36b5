"""Task Lists - task tracking backend.

Clients organise tasks into named task lists. The package is layered as:

- schemas: business models, SQLModel entities and wire DTOs
- repositories: persistence gateway over SQLModel sessions
- services: validation, partial updates and derived progress
- api: FastAPI endpoints
- cli: command-line entry point
"""

__version__ = "0.1.0"

from .errors import InvalidInputError, ResourceNotFoundError, TaskListsError
from .schemas import (
    TaskCore,
    TaskListCore,
    TaskListPatch,
    TaskPatch,
    TaskPriority,
    TaskStatus,
)

__all__ = [
    "InvalidInputError",
    "ResourceNotFoundError",
    "TaskCore",
    "TaskListCore",
    "TaskListPatch",
    "TaskListsError",
    "TaskPatch",
    "TaskPriority",
    "TaskStatus",
    "__version__",
]
