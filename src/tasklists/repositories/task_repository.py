"""Task and task list repositories.

These are the persistence gateway used by the services: point lookups,
existence checks, listing by owning list and save/delete.
"""

from uuid import UUID

from sqlalchemy.orm import selectinload
from sqlmodel import select

from ..schemas.database import Task, TaskList
from .base import BaseRepository


class TaskListRepository(BaseRepository[TaskList]):
    """Repository for task list aggregates."""

    def get_entity_class(self) -> type[TaskList]:
        """Return the database entity class for this repository."""
        return TaskList

    def list_all(self) -> list[TaskList]:
        """Get all task lists with their tasks eagerly loaded."""
        statement = select(TaskList).options(selectinload(TaskList.tasks))
        return list(self.session.exec(statement).all())


class TaskRepository(BaseRepository[Task]):
    """Repository for tasks, scoped by their owning task list."""

    def get_entity_class(self) -> type[Task]:
        """Return the database entity class for this repository."""
        return Task

    def find_by_task_list_id(self, task_list_id: UUID) -> list[Task]:
        """Get all tasks that belong to a task list."""
        statement = select(Task).where(Task.task_list_id == task_list_id)
        return list(self.session.exec(statement).all())

    def find_by_task_list_id_and_id(
        self, task_list_id: UUID, task_id: UUID
    ) -> Task | None:
        """Get a task only if it belongs to the given task list."""
        statement = select(Task).where(
            Task.task_list_id == task_list_id, Task.id == task_id
        )
        return self.session.exec(statement).first()

    def exists_by_task_list_id_and_id(self, task_list_id: UUID, task_id: UUID) -> bool:
        """Whether the (task list, task) pair resolves."""
        return self.find_by_task_list_id_and_id(task_list_id, task_id) is not None

    def delete_by_task_list_id_and_id(self, task_list_id: UUID, task_id: UUID) -> bool:
        """Delete a task scoped by its owning task list."""
        task = self.find_by_task_list_id_and_id(task_list_id, task_id)
        if task:
            self.session.delete(task)
            self.session.flush()
            return True
        return False
