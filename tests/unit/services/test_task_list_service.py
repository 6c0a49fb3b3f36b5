"""Unit tests for TaskListService with mocked repositories.

Covers creation preconditions, partial updates, deletion and the derived
progress metric without touching a database.
"""

from datetime import datetime
from uuid import uuid4

import pytest

from tasklists.errors import InvalidInputError, ResourceNotFoundError
from tasklists.schemas.database import TaskList
from tasklists.schemas.unified_models import (
    TaskListCore,
    TaskListPatch,
    TaskStatus,
)
from tasklists.services import TaskListService
from tests.utils.factories import (
    FIXED_NOW,
    create_task_core,
    create_task_entity,
    create_task_list_entity,
)


LATER = datetime(2025, 6, 2, 8, 30, 0)


@pytest.fixture
def service(mock_session, mock_task_list_repo, fixed_clock):
    """TaskListService wired to mocks and a fixed clock."""
    return TaskListService(
        session=mock_session, task_list_repo=mock_task_list_repo, clock=fixed_clock
    )


class TestCreateTaskList:
    """Test suite for TaskListService.create_task_list."""

    def test_create_assigns_id_and_timestamps(self, service, mock_session):
        """A valid candidate is saved with one timestamp for both fields."""
        created = service.create_task_list(
            TaskListCore(title="Groceries", description="Weekly shop")
        )

        assert created.id is not None
        assert created.title == "Groceries"
        assert created.description == "Weekly shop"
        assert created.created_at == FIXED_NOW
        assert created.updated_at == FIXED_NOW
        assert created.tasks == []
        mock_session.commit.assert_called_once()

    def test_create_ignores_nested_tasks(self, service, mock_task_list_repo):
        """Tasks supplied with the candidate are not persisted."""
        created = service.create_task_list(
            TaskListCore(title="Trip", tasks=[create_task_core(id=None)])
        )

        saved = mock_task_list_repo.save.call_args.args[0]
        assert saved.tasks == []
        assert created.tasks == []

    def test_create_rejects_preset_id(self, service, mock_task_list_repo, mock_session):
        """A candidate that already has an ID is rejected without saving."""
        with pytest.raises(InvalidInputError, match="Task list already has an ID!"):
            service.create_task_list(TaskListCore(id=uuid4(), title="Groceries"))

        mock_task_list_repo.save.assert_not_called()
        mock_session.commit.assert_not_called()

    @pytest.mark.parametrize("title", [None, "", "   ", "\t\n"])
    def test_create_rejects_blank_title(self, service, mock_task_list_repo, title):
        """Missing and whitespace-only titles are rejected."""
        with pytest.raises(InvalidInputError, match="Title is required"):
            service.create_task_list(TaskListCore(title=title))

        mock_task_list_repo.save.assert_not_called()

    def test_preset_id_checked_before_title(self, service):
        """The ID check wins when both preconditions fail."""
        with pytest.raises(InvalidInputError, match="already has an ID"):
            service.create_task_list(TaskListCore(id=uuid4(), title=" "))


class TestReadTaskLists:
    """Test suite for listing and single lookups."""

    def test_list_task_lists_converts_entities(self, service, mock_task_list_repo):
        """Every stored entity is returned as a business model."""
        first = create_task_list_entity(title="A")
        second = create_task_list_entity(title="B")
        mock_task_list_repo.list_all.return_value = [first, second]

        result = service.list_task_lists()

        assert [task_list.title for task_list in result] == ["A", "B"]
        assert [task_list.id for task_list in result] == [first.id, second.id]

    def test_list_task_lists_empty(self, service, mock_task_list_repo):
        """No stored lists yields an empty sequence."""
        mock_task_list_repo.list_all.return_value = []

        assert service.list_task_lists() == []

    def test_get_task_list_absent_returns_none(self, service, mock_task_list_repo):
        """Absence is reported as None rather than an error."""
        mock_task_list_repo.get_by_id.return_value = None

        assert service.get_task_list(uuid4()) is None

    def test_get_task_list_includes_tasks(self, service, mock_task_list_repo):
        """The returned list carries its tasks."""
        entity = create_task_list_entity(title="Home")
        create_task_entity(entity, title="Clean")
        mock_task_list_repo.get_by_id.return_value = entity

        result = service.get_task_list(entity.id)

        assert result.title == "Home"
        assert [task.title for task in result.tasks] == ["Clean"]


class TestUpdateTaskList:
    """Test suite for TaskListService.update_task_list."""

    @pytest.fixture
    def stored(self, mock_task_list_repo):
        entity = create_task_list_entity(
            title="Old title",
            description="Old description",
            created_at=FIXED_NOW,
            updated_at=FIXED_NOW,
        )
        mock_task_list_repo.get_by_id.return_value = entity
        return entity

    def test_update_missing_raises_not_found(
        self, service, mock_task_list_repo, mock_session
    ):
        """Updating an unknown list raises and saves nothing."""
        mock_task_list_repo.get_by_id.return_value = None

        with pytest.raises(ResourceNotFoundError):
            service.update_task_list(uuid4(), TaskListPatch(title="New"))

        mock_task_list_repo.save.assert_not_called()
        mock_session.commit.assert_not_called()

    def test_update_description_only(self, service, stored, fixed_clock):
        """Omitted fields keep their stored values."""
        fixed_clock.return_value = LATER

        updated = service.update_task_list(
            stored.id, TaskListPatch(description="New description")
        )

        assert updated.title == "Old title"
        assert updated.description == "New description"
        assert updated.created_at == FIXED_NOW
        assert updated.updated_at == LATER

    @pytest.mark.parametrize("title", ["", "   "])
    def test_update_ignores_blank_title(self, service, stored, title):
        """A blank title is treated like an omitted one."""
        updated = service.update_task_list(stored.id, TaskListPatch(title=title))

        assert updated.title == "Old title"

    def test_update_explicit_none_keeps_values(self, service, stored):
        """Fields explicitly sent as None are left untouched."""
        updated = service.update_task_list(
            stored.id, TaskListPatch(title=None, description=None)
        )

        assert updated.title == "Old title"
        assert updated.description == "Old description"

    def test_empty_update_refreshes_timestamp(
        self, service, stored, fixed_clock, mock_session
    ):
        """An update that changes nothing still moves updated_at."""
        fixed_clock.return_value = LATER

        updated = service.update_task_list(stored.id, TaskListPatch())

        assert updated.updated_at == LATER
        mock_session.commit.assert_called_once()


class TestDeleteTaskList:
    """Test suite for TaskListService.delete_task_list."""

    def test_delete_existing(self, service, mock_task_list_repo, mock_session):
        """An existing list is deleted and the deletion committed."""
        task_list_id = uuid4()
        mock_task_list_repo.exists_by_id.return_value = True

        service.delete_task_list(task_list_id)

        mock_task_list_repo.delete_by_id.assert_called_once_with(task_list_id)
        mock_session.commit.assert_called_once()

    def test_delete_missing_raises_not_found(self, service, mock_task_list_repo):
        """Deleting an unknown list raises ResourceNotFoundError."""
        mock_task_list_repo.exists_by_id.return_value = False

        with pytest.raises(ResourceNotFoundError, match="not found"):
            service.delete_task_list(uuid4())

        mock_task_list_repo.delete_by_id.assert_not_called()


class TestGetProgress:
    """Test suite for TaskListService.get_progress."""

    def test_progress_fraction_of_closed(self, service, mock_task_list_repo):
        """Four tasks with one CLOSED gives 0.25."""
        entity = create_task_list_entity()
        for status in (
            TaskStatus.CLOSED,
            TaskStatus.OPEN,
            TaskStatus.IN_PROGRESS,
            TaskStatus.OPEN,
        ):
            create_task_entity(entity, status=status)
        mock_task_list_repo.get_by_id.return_value = entity

        assert service.get_progress(entity.id) == pytest.approx(0.25)

    def test_progress_of_empty_list_is_zero(self, service, mock_task_list_repo):
        """A list without tasks reports 0.0."""
        mock_task_list_repo.get_by_id.return_value = TaskList(
            id=uuid4(), title="Empty"
        )

        assert service.get_progress(uuid4()) == 0.0

    def test_progress_missing_list_raises(self, service, mock_task_list_repo):
        """Progress of an unknown list is a failed lookup."""
        mock_task_list_repo.get_by_id.return_value = None

        with pytest.raises(ResourceNotFoundError):
            service.get_progress(uuid4())
