"""Schema package for the task lists backend.

This package provides:
- Business models, patch models and enums (``unified_models``)
- Database entity models (``database``)

Wire DTOs and their transformations live in ``schemas.transformations`` and
are imported from there directly.

Quick usage:
    from tasklists.schemas import TaskCore, TaskStatus, TaskPatch
    from tasklists.schemas.transformations import SchemaTransformer, TaskDto
"""

from .database import Task, TaskList
from .unified_models import (
    DEFAULT_TASK_PRIORITY,
    DEFAULT_TASK_STATUS,
    BaseBusinessModel,
    BaseEntityModel,
    BasePatchModel,
    TaskCore,
    TaskListCore,
    TaskListPatch,
    TaskPatch,
    TaskPriority,
    TaskStatus,
    UnifiedConfig,
    is_blank,
    to_naive_local,
)


__all__ = [
    "DEFAULT_TASK_PRIORITY",
    "DEFAULT_TASK_STATUS",
    "BaseBusinessModel",
    "BaseEntityModel",
    "BasePatchModel",
    "Task",
    "TaskCore",
    "TaskList",
    "TaskListCore",
    "TaskListPatch",
    "TaskPatch",
    "TaskPriority",
    "TaskStatus",
    "UnifiedConfig",
    "is_blank",
    "to_naive_local",
]
