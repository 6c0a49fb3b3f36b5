"""Service layer enforcing the task list and task rules.

This module provides the services that sit between the translation layer
and the repositories.
"""

from .base import BaseTaskListService, BaseTaskService
from .task_list_service import TaskListService
from .task_service import TaskService

__all__ = ["BaseTaskListService", "BaseTaskService", "TaskListService", "TaskService"]
