"""Utility modules for the task lists backend."""

from .task_calculations import TaskCalculations

__all__ = ["TaskCalculations"]
