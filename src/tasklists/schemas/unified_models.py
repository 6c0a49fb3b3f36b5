"""Business models shared by the service, translation and persistence layers.

Enums are StrEnums so the same members serialize on the wire, persist in
SQLModel columns and compare in business logic without conversion.
"""

from datetime import datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

# ============================================================================
# ENUMS
# ============================================================================


class TaskStatus(StrEnum):
    """Lifecycle status of a task."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    CLOSED = "CLOSED"


class TaskPriority(StrEnum):
    """Task priority."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


DEFAULT_TASK_STATUS = TaskStatus.OPEN
DEFAULT_TASK_PRIORITY = TaskPriority.MEDIUM


# ============================================================================
# CONFIGURATION
# ============================================================================


class UnifiedConfig:
    """Centralized pydantic configuration for business models."""

    PYDANTIC_CONFIG = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        use_enum_values=False,
        from_attributes=True,
    )


# ============================================================================
# BASE MODELS
# ============================================================================


class BaseBusinessModel(BaseModel):
    """Base for pure business logic models."""

    model_config = UnifiedConfig.PYDANTIC_CONFIG


class BaseEntityModel(SQLModel):
    """Base for database entity models with automatic timestamps.

    Timestamps are naive local time, stored in plain ``DateTime`` columns.
    """

    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime)


class BasePatchModel(BaseBusinessModel):
    """Partial update payload with explicit field presence.

    Every field defaults to ``None``; pydantic records the fields the caller
    actually supplied in ``model_fields_set``, which is what ``provided``
    consults. An omitted field and a field explicitly sent as ``None`` both
    leave the stored value untouched.
    """

    def provided(self, field_name: str) -> bool:
        """Whether ``field_name`` was supplied with a non-None value."""
        return (
            field_name in self.model_fields_set
            and getattr(self, field_name) is not None
        )

    def provided_text(self, field_name: str) -> bool:
        """Whether ``field_name`` was supplied with non-blank text."""
        return self.provided(field_name) and not is_blank(getattr(self, field_name))


# ============================================================================
# BUSINESS MODELS
# ============================================================================


class TaskCore(BaseBusinessModel):
    """A unit of work belonging to exactly one task list.

    Doubles as the creation candidate, so ``title``, ``status`` and
    ``priority`` may be absent here; the task service enforces the title and
    fills in the defaults.
    """

    id: UUID | None = None
    title: str | None = None
    description: str | None = None
    due_date: datetime | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    task_list_id: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TaskListCore(BaseBusinessModel):
    """A named collection of tasks.

    ``tasks`` is ``None`` when the collection was not supplied, which is
    distinct from an empty list.
    """

    id: UUID | None = None
    title: str | None = None
    description: str | None = None
    tasks: list[TaskCore] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TaskListPatch(BasePatchModel):
    """Fields a task list update may overwrite."""

    title: str | None = None
    description: str | None = None


class TaskPatch(BasePatchModel):
    """Fields a task update may overwrite."""

    title: str | None = None
    description: str | None = None
    due_date: datetime | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================


def is_blank(value: str | None) -> bool:
    """True for ``None``, the empty string and whitespace-only strings."""
    return value is None or not value.strip()


def to_naive_local(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
