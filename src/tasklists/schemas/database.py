"""SQLModel database entity models with Pydantic integration.

This module provides the table definitions the persistence gateway stores
and the conversions between them and the business models.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Index
from sqlmodel import Field, Relationship

from .unified_models import (
    DEFAULT_TASK_PRIORITY,
    DEFAULT_TASK_STATUS,
    BaseEntityModel,
    TaskCore,
    TaskListCore,
    TaskPriority,
    TaskStatus,
)


class TaskList(BaseEntityModel, table=True):
    """SQLModel task list table.

    The id stays ``None`` until the repository saves the entity; owned tasks
    are removed together with the list.
    """

    __tablename__ = "task_lists"

    id: UUID | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=2000)

    tasks: list["Task"] = Relationship(
        back_populates="task_list",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )

    def to_core_model(self) -> TaskListCore:
        """Convert to TaskListCore business model."""
        return TaskListCore(
            id=self.id,
            title=self.title,
            description=self.description,
            tasks=[task.to_core_model() for task in self.tasks],
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class Task(BaseEntityModel, table=True):
    """SQLModel task table bound to its owning task list."""

    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_task_list_id", "task_list_id"),
        Index("ix_tasks_status", "status"),
    )

    id: UUID | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    due_date: datetime | None = Field(default=None, sa_type=DateTime)
    status: TaskStatus = DEFAULT_TASK_STATUS
    priority: TaskPriority = DEFAULT_TASK_PRIORITY
    task_list_id: UUID = Field(foreign_key="task_lists.id")

    task_list: TaskList | None = Relationship(back_populates="tasks")

    def to_core_model(self) -> TaskCore:
        """Convert to TaskCore business model."""
        return TaskCore(
            id=self.id,
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            status=self.status,
            priority=self.priority,
            task_list_id=self.task_list_id,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

