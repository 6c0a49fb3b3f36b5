"""Wire shapes and the transformations between them and business models.

The DTOs are frozen pydantic models with camelCase aliases. Transformations
here are pure; business rules live in the services.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..utils.task_calculations import TaskCalculations
from .unified_models import (
    TaskCore,
    TaskListCore,
    TaskListPatch,
    TaskPatch,
    TaskPriority,
    TaskStatus,
)


class BaseDto(BaseModel):
    """Immutable wire record with structural equality."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


class TaskDto(BaseDto):
    """Task as sent and received over HTTP."""

    id: UUID | None = None
    title: str | None = None
    description: str | None = None
    due_date: datetime | None = None
    priority: TaskPriority | None = None
    status: TaskStatus | None = None


class TaskListDto(BaseDto):
    """Task list as sent and received over HTTP.

    ``count`` and ``progress`` are derived on the way out and ignored on
    the way in.
    """

    id: UUID | None = None
    title: str | None = None
    description: str | None = None
    count: int | None = None
    progress: float | None = None
    tasks: list[TaskDto] | None = None


class ErrorResponse(BaseDto):
    """Error body returned by the API."""

    status: int
    message: str
    details: str


class SchemaTransformer:
    """Central hub for DTO <-> business model conversion."""

    @staticmethod
    def task_dto_to_core(dto: TaskDto) -> TaskCore:
        """Convert TaskDto to a TaskCore creation candidate."""
        return TaskCore(
            id=dto.id,
            title=dto.title,
            description=dto.description,
            due_date=dto.due_date,
            status=dto.status,
            priority=dto.priority,
        )

    @staticmethod
    def task_core_to_dto(core_model: TaskCore) -> TaskDto:
        """Convert TaskCore to TaskDto."""
        return TaskDto(
            id=core_model.id,
            title=core_model.title,
            description=core_model.description,
            due_date=core_model.due_date,
            priority=core_model.priority,
            status=core_model.status,
        )

    @staticmethod
    def task_dto_to_patch(dto: TaskDto) -> TaskPatch:
        """Convert TaskDto to a TaskPatch of the fields the client sent."""
        fields = dto.model_fields_set & set(TaskPatch.model_fields)
        return TaskPatch(**{name: getattr(dto, name) for name in fields})

    @staticmethod
    def task_list_dto_to_core(dto: TaskListDto) -> TaskListCore:
        """Convert TaskListDto to a TaskListCore creation candidate."""
        return TaskListCore(
            id=dto.id,
            title=dto.title,
            description=dto.description,
            tasks=[SchemaTransformer.task_dto_to_core(task) for task in dto.tasks]
            if dto.tasks is not None
            else None,
        )

    @staticmethod
    def task_list_core_to_dto(core_model: TaskListCore) -> TaskListDto:
        """Convert TaskListCore to TaskListDto with derived count and progress."""
        tasks = core_model.tasks
        return TaskListDto(
            id=core_model.id,
            title=core_model.title,
            description=core_model.description,
            count=TaskCalculations.task_count(tasks),
            progress=TaskCalculations.progress(tasks),
            tasks=[SchemaTransformer.task_core_to_dto(task) for task in tasks]
            if tasks is not None
            else None,
        )

    @staticmethod
    def task_list_dto_to_patch(dto: TaskListDto) -> TaskListPatch:
        """Convert TaskListDto to a TaskListPatch of the fields the client sent."""
        fields = dto.model_fields_set & set(TaskListPatch.model_fields)
        return TaskListPatch(**{name: getattr(dto, name) for name in fields})


class BatchTransformer:
    """Utilities for list conversions."""

    @staticmethod
    def tasks_core_to_dto_list(core_models: list[TaskCore]) -> list[TaskDto]:
        """Convert a list of TaskCore to TaskDto."""
        return [SchemaTransformer.task_core_to_dto(core) for core in core_models]

    @staticmethod
    def task_lists_core_to_dto_list(
        core_models: list[TaskListCore],
    ) -> list[TaskListDto]:
        """Convert a list of TaskListCore to TaskListDto."""
        return [SchemaTransformer.task_list_core_to_dto(core) for core in core_models]

