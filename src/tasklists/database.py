"""Database initialization and session management.

Provides engine construction, table creation and session helpers for the
persistence gateway.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine, select

from .config import get_settings
from .schemas.database import Task, TaskList


logger = logging.getLogger(__name__)


def build_engine(url: str, echo: bool = False, pool_timeout: int = 30) -> Engine:
    """Create an engine for ``url``.

    SQLite connections are shared across FastAPI's worker threads, so the
    same-thread check is disabled for them. Other backends get a connection
    pool that waits at most ``pool_timeout`` seconds for a connection.
    """
    if url.startswith("sqlite"):
        return create_engine(
            url, echo=echo, connect_args={"check_same_thread": False}
        )
    return create_engine(url, echo=echo, pool_timeout=pool_timeout)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Get the cached engine built from settings."""
    settings = get_settings()
    return build_engine(
        settings.database.url,
        echo=settings.database.echo_sql,
        pool_timeout=settings.database.pool_timeout,
    )


def create_db_and_tables(engine: Engine | None = None) -> None:
    """Create all tables.

    Safe to call multiple times - only creates tables that don't exist.
    """
    engine = engine or get_engine()
    SQLModel.metadata.create_all(engine)
    logger.info(f"Database initialized at: {engine.url}")


def get_sync_session() -> Session:
    """Get a synchronous database session.

    Returns:
        SQLModel Session for database operations

    """
    return Session(get_engine())


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Usage:
        with get_session_context() as session:
            # Use session here
            pass

    Raises:
        Exception: If there is an error during session operations

    """
    session = Session(get_engine())
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def verify_database() -> bool:
    """Verify the tables are reachable.

    Returns:
        True if database is healthy, False otherwise

    """
    try:
        with get_session_context() as session:
            list_count = len(session.exec(select(TaskList)).all())
            task_count = len(session.exec(select(Task)).all())
            logger.info(
                f"Database verification successful: {list_count} task lists, "
                f"{task_count} tasks"
            )
            return True
    except Exception as e:
        logger.error(f"Database verification failed: {e}")
        return False


__all__ = [
    "build_engine",
    "create_db_and_tables",
    "get_engine",
    "get_session_context",
    "get_sync_session",
    "verify_database",
]
