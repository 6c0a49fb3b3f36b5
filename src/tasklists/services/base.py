"""Service contracts.

Each contract has a single implementation backed by the repositories; the
abstract bases exist so callers and tests can substitute fakes.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from ..schemas.unified_models import TaskCore, TaskListCore, TaskListPatch, TaskPatch


class BaseTaskListService(ABC):
    """Lifecycle and validation rules for task lists."""

    @abstractmethod
    def list_task_lists(self) -> list[TaskListCore]:
        """Return every task list."""

    @abstractmethod
    def create_task_list(self, candidate: TaskListCore) -> TaskListCore:
        """Validate and persist a new task list."""

    @abstractmethod
    def get_task_list(self, task_list_id: UUID) -> TaskListCore | None:
        """Return the task list or ``None`` when it does not exist."""

    @abstractmethod
    def update_task_list(
        self, task_list_id: UUID, patch: TaskListPatch
    ) -> TaskListCore:
        """Apply a partial update to an existing task list."""

    @abstractmethod
    def delete_task_list(self, task_list_id: UUID) -> None:
        """Delete an existing task list."""

    @abstractmethod
    def get_progress(self, task_list_id: UUID) -> float | None:
        """Return the fraction of the list's tasks that are closed."""


class BaseTaskService(ABC):
    """Lifecycle and validation rules for tasks within a task list."""

    @abstractmethod
    def list_tasks(self, task_list_id: UUID) -> list[TaskCore]:
        """Return the tasks of a task list."""

    @abstractmethod
    def create_task(self, task_list_id: UUID, candidate: TaskCore) -> TaskCore:
        """Validate and persist a new task under a task list."""

    @abstractmethod
    def get_task(self, task_list_id: UUID, task_id: UUID) -> TaskCore | None:
        """Return the task if it belongs to the task list."""

    @abstractmethod
    def update_task(
        self, task_list_id: UUID, task_id: UUID, patch: TaskPatch
    ) -> TaskCore:
        """Apply a partial update to an existing task."""

    @abstractmethod
    def delete_task(self, task_list_id: UUID, task_id: UUID) -> None:
        """Delete an existing task."""
