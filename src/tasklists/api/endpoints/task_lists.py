"""API endpoints for task lists."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from ...errors import ResourceNotFoundError
from ...schemas.transformations import BatchTransformer, SchemaTransformer, TaskListDto
from ...services import BaseTaskListService
from ..dependencies import get_task_list_service


router = APIRouter(prefix="/task-lists", tags=["task-lists"])


@router.get("", response_model=list[TaskListDto], summary="List task lists")
def list_task_lists(
    service: BaseTaskListService = Depends(get_task_list_service),
) -> list[TaskListDto]:
    return BatchTransformer.task_lists_core_to_dto_list(service.list_task_lists())


@router.post("", response_model=TaskListDto, summary="Create a task list")
def create_task_list(
    task_list_dto: TaskListDto,
    service: BaseTaskListService = Depends(get_task_list_service),
) -> TaskListDto:
    """Create a task list.

    The body must not carry an ``id`` and needs a non-blank ``title``; any
    nested ``tasks`` are ignored.
    """
    created = service.create_task_list(
        SchemaTransformer.task_list_dto_to_core(task_list_dto)
    )
    return SchemaTransformer.task_list_core_to_dto(created)


@router.get("/{task_list_id}", response_model=TaskListDto, summary="Get a task list")
def get_task_list(
    task_list_id: UUID,
    service: BaseTaskListService = Depends(get_task_list_service),
) -> TaskListDto:
    task_list = service.get_task_list(task_list_id)
    if task_list is None:
        raise ResourceNotFoundError("Task list", task_list_id)
    return SchemaTransformer.task_list_core_to_dto(task_list)


@router.put("/{task_list_id}", response_model=TaskListDto, summary="Update a task list")
def update_task_list(
    task_list_id: UUID,
    task_list_dto: TaskListDto,
    service: BaseTaskListService = Depends(get_task_list_service),
) -> TaskListDto:
    """Apply the supplied ``title`` and ``description``; omitted fields are kept."""
    updated = service.update_task_list(
        task_list_id, SchemaTransformer.task_list_dto_to_patch(task_list_dto)
    )
    return SchemaTransformer.task_list_core_to_dto(updated)


@router.delete(
    "/{task_list_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task list",
)
def delete_task_list(
    task_list_id: UUID,
    service: BaseTaskListService = Depends(get_task_list_service),
) -> Response:
    service.delete_task_list(task_list_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
