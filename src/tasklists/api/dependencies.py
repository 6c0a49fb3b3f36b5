"""FastAPI dependencies: one session and one set of services per request."""

from collections.abc import Generator

from fastapi import Depends
from sqlmodel import Session

from ..database import get_sync_session
from ..services import BaseTaskListService, BaseTaskService, TaskListService, TaskService


def get_session() -> Generator[Session, None, None]:
    """Yield a session that is closed when the request finishes."""
    with get_sync_session() as session:
        yield session


def get_task_list_service(
    session: Session = Depends(get_session),
) -> BaseTaskListService:
    return TaskListService(session=session)


def get_task_service(session: Session = Depends(get_session)) -> BaseTaskService:
    return TaskService(session=session)
