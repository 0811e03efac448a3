# taskpad/models/task.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from utils.datetime_utils import now_ms


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskFilter(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


class Task(SQLModel, table=True):
    __table_args__ = (
        Index("ix_task_owner", "owner_id"),
        Index("ix_task_owner_completed", "owner_id", "completed"),
        Index("ix_task_owner_priority", "owner_id", "priority"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    completed: bool = False
    owner_id: str
    due_date: Optional[int] = None       # epoch milliseconds
    priority: str = Priority.MEDIUM.value
    created_at: int = Field(default_factory=now_ms)

    @property
    def status(self) -> str:
        return TaskFilter.COMPLETED.value if self.completed else TaskFilter.PENDING.value


class _Unset:
    """Marker for a patch field that was not supplied."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class TaskPatch:
    """Partial update. Only fields that are not ``UNSET`` are applied."""

    title: Any = UNSET
    description: Any = UNSET
    due_date: Any = UNSET
    priority: Any = UNSET

    def supplied(self) -> dict[str, Any]:
        fields = {
            "title": self.title,
            "description": self.description,
            "due_date": self.due_date,
            "priority": self.priority,
        }
        return {key: value for key, value in fields.items() if value is not UNSET}

    def is_empty(self) -> bool:
        return not self.supplied()


@dataclass(frozen=True)
class TaskStats:
    total: int = 0
    completed: int = 0
    pending: int = 0

    @property
    def completion_rate(self) -> int:
        """Completed share of all tasks, as a rounded percentage."""
        if self.total <= 0:
            return 0
        return int(self.completed * 100 / self.total + 0.5)


__all__ = ["Priority", "TaskFilter", "Task", "TaskPatch", "TaskStats", "UNSET"]
