"""ORM models exposed by the Taskpad application."""
from .task import Priority, Task, TaskFilter, TaskPatch, TaskStats, UNSET

__all__ = ["Priority", "Task", "TaskFilter", "TaskPatch", "TaskStats", "UNSET"]
