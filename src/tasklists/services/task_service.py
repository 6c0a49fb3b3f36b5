"""Task service.

Coordinates the task and task list repositories: membership validation on
create, default status and priority, partial updates with the due-date
rule, and deletion scoped by the owning list.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from sqlmodel import Session

from ..errors import InvalidInputError, ResourceNotFoundError
from ..repositories import TaskListRepository, TaskRepository
from ..schemas.database import Task
from ..schemas.unified_models import (
    DEFAULT_TASK_PRIORITY,
    DEFAULT_TASK_STATUS,
    TaskCore,
    TaskPatch,
    is_blank,
    to_naive_local,
)
from .base import BaseTaskService


logger = logging.getLogger(__name__)


class TaskService(BaseTaskService):
    """Task operations backed by the task and task list repositories.

    A task is always addressed through its owning list: an ID that exists
    under a different list does not resolve.
    """

    def __init__(
        self,
        session: Session,
        task_repo: TaskRepository | None = None,
        task_list_repo: TaskListRepository | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the service on a caller-owned session.

        Args:
            session: SQLModel session owned by the caller.
            task_repo: Task persistence gateway. If None, built on ``session``.
            task_list_repo: Task list persistence gateway. If None, built on ``session``.
            clock: Source of "now" for timestamps and the due-date check.

        """
        self.session = session
        self.task_repo = task_repo or TaskRepository(session)
        self.task_list_repo = task_list_repo or TaskListRepository(session)
        self.clock = clock

    def list_tasks(self, task_list_id: UUID) -> list[TaskCore]:
        """Get the tasks of a task list.

        The list itself is not checked; an unknown ID yields an empty result.
        """
        tasks = self.task_repo.find_by_task_list_id(task_list_id)
        return [task.to_core_model() for task in tasks]

    def create_task(self, task_list_id: UUID, candidate: TaskCore) -> TaskCore:
        """Create a task under an existing task list.

        A missing task list is a caller error here, not a failed lookup, so
        it raises ``InvalidInputError``.
        """
        if candidate.id is not None:
            logger.warning(f"Rejected task create with preset id {candidate.id}")
            raise InvalidInputError("Task already has an ID!")

        if is_blank(candidate.title):
            logger.warning(f"Rejected task create without a title in {task_list_id}")
            raise InvalidInputError("A task must have a title")

        priority = candidate.priority or DEFAULT_TASK_PRIORITY
        status = candidate.status or DEFAULT_TASK_STATUS

        task_list = self.task_list_repo.get_by_id(task_list_id)
        if task_list is None:
            logger.warning(f"Rejected task create for unknown task list {task_list_id}")
            raise InvalidInputError("Invalid task list ID provided")

        now = self.clock()
        task = self.task_repo.save(
            Task(
                title=candidate.title,
                description=candidate.description,
                due_date=to_naive_local(candidate.due_date)
                if candidate.due_date
                else None,
                status=status,
                priority=priority,
                task_list_id=task_list.id,
                task_list=task_list,
                created_at=now,
                updated_at=now,
            )
        )
        self.session.commit()

        logger.info(f"Created task {task.id} in task list {task_list_id}")
        return task.to_core_model()

    def get_task(self, task_list_id: UUID, task_id: UUID) -> TaskCore | None:
        """Get a task by its (task list, task) pair, or None."""
        task = self.task_repo.find_by_task_list_id_and_id(task_list_id, task_id)
        if task is None:
            return None
        return task.to_core_model()

    def update_task(
        self, task_list_id: UUID, task_id: UUID, patch: TaskPatch
    ) -> TaskCore:
        """Apply a partial update.

        Title and description change only when non-blank values are
        supplied; status, priority and due date whenever they are supplied.
        A due date before now is rejected before anything is modified.
        """
        task = self.task_repo.find_by_task_list_id_and_id(task_list_id, task_id)
        if task is None:
            raise ResourceNotFoundError(
                "Task", task_id, f"Task {task_id} not found in task list {task_list_id}"
            )

        now = self.clock()
        due_date = None
        if patch.provided("due_date"):
            due_date = to_naive_local(patch.due_date)
            if due_date < now:
                logger.warning(f"Rejected past due date {due_date} for task {task_id}")
                raise InvalidInputError("Due date cannot be in the past.")

        if patch.provided_text("title"):
            task.title = patch.title
        if patch.provided_text("description"):
            task.description = patch.description
        if due_date is not None:
            task.due_date = due_date
        if patch.provided("status"):
            task.status = patch.status
        if patch.provided("priority"):
            task.priority = patch.priority
        task.updated_at = now

        task = self.task_repo.save(task)
        self.session.commit()

        logger.info(f"Updated task {task_id} in task list {task_list_id}")
        return task.to_core_model()

    def delete_task(self, task_list_id: UUID, task_id: UUID) -> None:
        """Delete a task scoped by its owning task list."""
        if not self.task_repo.exists_by_task_list_id_and_id(task_list_id, task_id):
            raise ResourceNotFoundError(
                "Task", task_id, f"Task {task_id} not found in task list {task_list_id}"
            )

        self.task_repo.delete_by_task_list_id_and_id(task_list_id, task_id)
        self.session.commit()
        logger.info(f"Deleted task {task_id} from task list {task_list_id}")
