"""Pytest configuration and fixtures for task lists tests."""

from contextlib import contextmanager
from unittest.mock import Mock
from uuid import uuid4

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from tasklists.repositories import TaskListRepository, TaskRepository
from tasklists.services import TaskListService, TaskService
from tests.utils.factories import FIXED_NOW


def _assign_id(entity):
    if entity.id is None:
        entity.id = uuid4()
    return entity


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads for the whole test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Database session bound to the in-memory engine."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def session_context(session):
    """Drop-in replacement for ``get_session_context`` using the test session."""

    @contextmanager
    def _context():
        yield session
        session.commit()

    return _context


@pytest.fixture
def task_list_service(session):
    """TaskListService on the test database."""
    return TaskListService(session=session)


@pytest.fixture
def task_service(session):
    """TaskService on the test database."""
    return TaskService(session=session)


# ============================================================================
# MOCKED COLLABORATORS
# ============================================================================


@pytest.fixture
def fixed_clock():
    """Clock that always reports ``FIXED_NOW``."""
    return Mock(return_value=FIXED_NOW)


@pytest.fixture
def mock_session():
    """Mock SQLModel session."""
    return Mock(spec=Session)


@pytest.fixture
def mock_task_list_repo():
    """Mock task list repository whose ``save`` assigns IDs like the real one."""
    repo = Mock(spec=TaskListRepository)
    repo.save.side_effect = _assign_id
    return repo


@pytest.fixture
def mock_task_repo():
    """Mock task repository whose ``save`` assigns IDs like the real one."""
    repo = Mock(spec=TaskRepository)
    repo.save.side_effect = _assign_id
    return repo
