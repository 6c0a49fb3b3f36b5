"""Task calculation utilities for derived task list metrics.

Progress is never stored; it is recomputed from the task collection each
time a list is presented.
"""

from collections.abc import Sequence

from ..schemas.unified_models import TaskCore, TaskStatus


class TaskCalculations:
    """Utility class for task-list calculations."""

    @staticmethod
    def task_count(tasks: Sequence[TaskCore] | None) -> int:
        """Number of tasks, 0 when the collection is absent."""
        return len(tasks) if tasks is not None else 0

    @staticmethod
    def closed_count(tasks: Sequence[TaskCore] | None) -> int:
        """Number of tasks whose status is CLOSED."""
        if not tasks:
            return 0
        return sum(1 for task in tasks if task.status == TaskStatus.CLOSED)

    @staticmethod
    def progress(tasks: Sequence[TaskCore] | None) -> float | None:
        """Fraction of CLOSED tasks in [0, 1].

        ``None`` when the collection itself is absent; 0.0 for an empty
        collection.
        """
        if tasks is None:
            return None
        if not tasks:
            return 0.0
        return TaskCalculations.closed_count(tasks) / len(tasks)
