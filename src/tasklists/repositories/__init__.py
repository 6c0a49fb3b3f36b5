"""Repository implementations forming the persistence gateway.

This module provides the repository layer that bridges the services with
database persistence.
"""

from .base import BaseRepository
from .task_repository import TaskListRepository, TaskRepository


__all__ = ["BaseRepository", "TaskListRepository", "TaskRepository"]
