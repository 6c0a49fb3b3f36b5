"""Task list service.

Owns creation, partial update and deletion of task lists and computes their
derived progress. Lookups that fail for an update or delete raise
``ResourceNotFoundError``; a plain ``get`` reports absence as ``None``.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from sqlmodel import Session

from ..errors import InvalidInputError, ResourceNotFoundError
from ..repositories import TaskListRepository
from ..schemas.database import TaskList
from ..schemas.unified_models import TaskListCore, TaskListPatch, is_blank
from ..utils.task_calculations import TaskCalculations
from .base import BaseTaskListService


logger = logging.getLogger(__name__)


class TaskListService(BaseTaskListService):
    """Task list operations backed by ``TaskListRepository``."""

    def __init__(
        self,
        session: Session,
        task_list_repo: TaskListRepository | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the service on a caller-owned session.

        Args:
            session: SQLModel session owned by the caller.
            task_list_repo: Persistence gateway. If None, one is built on ``session``.
            clock: Source of "now" for timestamps.

        """
        self.session = session
        self.task_list_repo = task_list_repo or TaskListRepository(session)
        self.clock = clock

    def list_task_lists(self) -> list[TaskListCore]:
        """Get all task lists."""
        return [entity.to_core_model() for entity in self.task_list_repo.list_all()]

    def create_task_list(self, candidate: TaskListCore) -> TaskListCore:
        """Create a task list.

        Only the title and description of the candidate are kept; nested
        tasks and timestamps are never taken from the caller.
        """
        if candidate.id is not None:
            logger.warning(f"Rejected task list create with preset id {candidate.id}")
            raise InvalidInputError("Task list already has an ID!")

        if is_blank(candidate.title):
            logger.warning("Rejected task list create without a title")
            raise InvalidInputError("Title is required")

        now = self.clock()
        entity = self.task_list_repo.save(
            TaskList(
                title=candidate.title,
                description=candidate.description,
                created_at=now,
                updated_at=now,
            )
        )
        self.session.commit()

        logger.info(f"Created task list {entity.id}")
        return entity.to_core_model()

    def get_task_list(self, task_list_id: UUID) -> TaskListCore | None:
        """Get a task list by ID, or None when it does not exist."""
        entity = self.task_list_repo.get_by_id(task_list_id)
        if entity is None:
            return None
        return entity.to_core_model()

    def update_task_list(
        self, task_list_id: UUID, patch: TaskListPatch
    ) -> TaskListCore:
        """Apply a partial update.

        The title changes only when a non-blank one is supplied; the
        description changes whenever one is supplied. ``updated_at`` is
        refreshed even if nothing else changed.
        """
        entity = self._require(task_list_id)

        if patch.provided_text("title"):
            entity.title = patch.title
        if patch.provided("description"):
            entity.description = patch.description
        entity.updated_at = self.clock()

        entity = self.task_list_repo.save(entity)
        self.session.commit()

        logger.info(f"Updated task list {task_list_id}")
        return entity.to_core_model()

    def delete_task_list(self, task_list_id: UUID) -> None:
        """Delete a task list together with its tasks."""
        if not self.task_list_repo.exists_by_id(task_list_id):
            raise ResourceNotFoundError("Task list", task_list_id)

        self.task_list_repo.delete_by_id(task_list_id)
        self.session.commit()
        logger.info(f"Deleted task list {task_list_id}")

    def get_progress(self, task_list_id: UUID) -> float | None:
        """Fraction of the list's tasks that are CLOSED."""
        task_list = self._require(task_list_id).to_core_model()
        return TaskCalculations.progress(task_list.tasks)

    def _require(self, task_list_id: UUID) -> TaskList:
        entity = self.task_list_repo.get_by_id(task_list_id)
        if entity is None:
            raise ResourceNotFoundError("Task list", task_list_id)
        return entity
