"""Integration tests for engine construction and session management."""

from unittest.mock import patch
from uuid import uuid4

import pytest
from sqlalchemy import inspect
from sqlmodel import select

from tasklists.config import DatabaseSettings, TaskListsSettings
from tasklists.database import (
    build_engine,
    create_db_and_tables,
    get_engine,
    get_session_context,
    get_sync_session,
    verify_database,
)
from tasklists.schemas.database import TaskList


@pytest.fixture
def file_engine(tmp_path):
    """Engine backed by a temporary SQLite file without tables."""
    engine = build_engine(f"sqlite:///{tmp_path / 'tasks.db'}")
    yield engine
    engine.dispose()


class TestDatabaseInitialization:
    """Test engine construction and table creation."""

    def test_create_db_and_tables_creates_schema(self, file_engine):
        create_db_and_tables(file_engine)

        tables = set(inspect(file_engine).get_table_names())
        assert {"task_lists", "tasks"} <= tables

    def test_create_db_and_tables_is_idempotent(self, file_engine):
        create_db_and_tables(file_engine)
        create_db_and_tables(file_engine)

        assert "tasks" in inspect(file_engine).get_table_names()

    def test_create_db_and_tables_uses_cached_engine(self, file_engine):
        with patch("tasklists.database.get_engine", return_value=file_engine):
            create_db_and_tables()

        assert "task_lists" in inspect(file_engine).get_table_names()

    def test_build_engine_passes_pool_timeout_to_server_databases(self):
        with patch("tasklists.database.create_engine") as mock_create:
            build_engine("postgresql://localhost/tasks", pool_timeout=12)

        assert mock_create.call_args.kwargs["pool_timeout"] == 12

    def test_build_engine_sqlite_skips_pool_timeout(self):
        with patch("tasklists.database.create_engine") as mock_create:
            build_engine("sqlite:///tasks.db", pool_timeout=12)

        kwargs = mock_create.call_args.kwargs
        assert "pool_timeout" not in kwargs
        assert kwargs["connect_args"] == {"check_same_thread": False}

    def test_get_engine_uses_database_settings(self):
        settings = TaskListsSettings(
            database=DatabaseSettings(url="postgresql://db/tasks", pool_timeout=7)
        )
        get_engine.cache_clear()
        try:
            with (
                patch("tasklists.database.get_settings", return_value=settings),
                patch("tasklists.database.build_engine") as mock_build,
            ):
                get_engine()
        finally:
            get_engine.cache_clear()

        mock_build.assert_called_once_with(
            "postgresql://db/tasks", echo=False, pool_timeout=7
        )

    def test_build_engine_for_sqlite_file(self, file_engine):
        assert file_engine.dialect.name == "sqlite"
        assert file_engine.url.database.endswith("tasks.db")


class TestSessionContextManager:
    """Test get_session_context commit and rollback behaviour."""

    @pytest.fixture
    def ready_engine(self, file_engine):
        create_db_and_tables(file_engine)
        with patch("tasklists.database.get_engine", return_value=file_engine):
            yield file_engine

    def test_auto_commit(self, ready_engine):
        with get_session_context() as session:
            session.add(TaskList(id=uuid4(), title="Home"))
            session.flush()

        with get_session_context() as session:
            titles = [task_list.title for task_list in session.exec(select(TaskList))]
        assert titles == ["Home"]

    def test_rollback_on_exception(self, ready_engine):
        with pytest.raises(RuntimeError):
            with get_session_context() as session:
                session.add(TaskList(id=uuid4(), title="Doomed"))
                raise RuntimeError("boom")

        with get_session_context() as session:
            assert session.exec(select(TaskList)).all() == []

    def test_get_sync_session_returns_new_sessions(self, ready_engine):
        first = get_sync_session()
        second = get_sync_session()

        assert first is not second
        first.close()
        second.close()


class TestDatabaseVerification:
    """Test verify_database."""

    def test_verify_database_success(self, file_engine):
        create_db_and_tables(file_engine)

        with patch("tasklists.database.get_engine", return_value=file_engine):
            assert verify_database() is True

    def test_verify_database_missing_tables(self, file_engine):
        with patch("tasklists.database.get_engine", return_value=file_engine):
            assert verify_database() is False
