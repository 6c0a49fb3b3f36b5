"""API endpoints for tasks, always addressed through their task list."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from ...errors import ResourceNotFoundError
from ...schemas.transformations import BatchTransformer, SchemaTransformer, TaskDto
from ...services import BaseTaskService
from ..dependencies import get_task_service


router = APIRouter(prefix="/task-lists/{task_list_id}/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskDto], summary="List the tasks of a task list")
def list_tasks(
    task_list_id: UUID,
    service: BaseTaskService = Depends(get_task_service),
) -> list[TaskDto]:
    return BatchTransformer.tasks_core_to_dto_list(service.list_tasks(task_list_id))


@router.post("", response_model=TaskDto, summary="Create a task")
def create_task(
    task_list_id: UUID,
    task_dto: TaskDto,
    service: BaseTaskService = Depends(get_task_service),
) -> TaskDto:
    """Create a task; status defaults to OPEN and priority to MEDIUM."""
    created = service.create_task(
        task_list_id, SchemaTransformer.task_dto_to_core(task_dto)
    )
    return SchemaTransformer.task_core_to_dto(created)


@router.get("/{task_id}", response_model=TaskDto, summary="Get a task")
def get_task(
    task_list_id: UUID,
    task_id: UUID,
    service: BaseTaskService = Depends(get_task_service),
) -> TaskDto:
    task = service.get_task(task_list_id, task_id)
    if task is None:
        raise ResourceNotFoundError(
            "Task", task_id, f"Task {task_id} not found in task list {task_list_id}"
        )
    return SchemaTransformer.task_core_to_dto(task)


@router.put("/{task_id}", response_model=TaskDto, summary="Update a task")
def update_task(
    task_list_id: UUID,
    task_id: UUID,
    task_dto: TaskDto,
    service: BaseTaskService = Depends(get_task_service),
) -> TaskDto:
    """Apply the supplied fields; a ``dueDate`` in the past is rejected."""
    updated = service.update_task(
        task_list_id, task_id, SchemaTransformer.task_dto_to_patch(task_dto)
    )
    return SchemaTransformer.task_core_to_dto(updated)


@router.delete(
    "/{task_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a task"
)
def delete_task(
    task_list_id: UUID,
    task_id: UUID,
    service: BaseTaskService = Depends(get_task_service),
) -> Response:
    service.delete_task(task_list_id, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
