"""Routers exposed by the API."""

from . import task_lists, tasks

__all__ = ["task_lists", "tasks"]
