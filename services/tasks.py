# taskpad/services/tasks.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Set

from sqlmodel import Session, select

from core.errors import Forbidden, InvalidInput, NotFound
from core.priorities import normalize_priority
from models.task import Priority, Task, TaskFilter, TaskPatch, TaskStats
from services.identity import require_identity
from storage.db import get_session
from utils.datetime_utils import now_ms

logger = logging.getLogger("taskpad.tasks")

EVENTS = ("after_create", "after_update", "after_delete")


@dataclass(frozen=True)
class TaskChange:
    event: str
    owner_id: str
    task_id: int


Listener = Callable[[TaskChange], None]


def _clean_title(title: Optional[str]) -> str:
    if not isinstance(title, str):
        raise InvalidInput(f"Task title must be text (got {title!r})")
    cleaned = title.strip()
    if not cleaned:
        raise InvalidInput("Task title cannot be empty")
    return cleaned


def _clean_description(description: Optional[str]) -> Optional[str]:
    if description is not None and not isinstance(description, str):
        raise InvalidInput(f"Task description must be text (got {description!r})")
    cleaned = (description or "").strip()
    return cleaned or None


def normalize_filter(value: TaskFilter | str | None) -> TaskFilter:
    if value is None:
        return TaskFilter.ALL
    try:
        return TaskFilter(value)
    except ValueError:
        raise InvalidInput(f"Unknown filter: {value!r}") from None


def _normalize_due_date(value) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"Due date must be epoch milliseconds (got {value!r})")
    return int(value)


def _matches(task: Task, needle: str) -> bool:
    if needle in task.title.casefold():
        return True
    return bool(task.description) and needle in task.description.casefold()


class TaskService:
    """Owner-scoped access to the ``task`` table.

    Every operation takes the resolved caller identity as its first argument
    and re-checks ownership itself; the table holds every user's tasks.
    """

    def __init__(self, session_factory: Callable[[], Session] = get_session):
        self._session_factory = session_factory
        self._listeners: Dict[str, Set[Listener]] = {event: set() for event in EVENTS}

    # ---------- events ----------
    def subscribe(self, event: str, callback: Listener) -> None:
        if event not in self._listeners:
            raise ValueError(f"Unsupported event: {event}")
        self._listeners[event].add(callback)

    def unsubscribe(self, event: str, callback: Listener) -> None:
        if event not in self._listeners:
            return
        self._listeners[event].discard(callback)

    def _emit(self, event: str, owner_id: str, task_id: int) -> None:
        change = TaskChange(event=event, owner_id=owner_id, task_id=task_id)
        for listener in list(self._listeners.get(event, ())):
            try:
                listener(change)
            except Exception:
                logger.exception("Listener %r failed on %s for task %s", listener, event, task_id)

    # ---------- queries ----------
    def list(
        self,
        caller: Optional[str],
        filter: TaskFilter | str | None = TaskFilter.ALL,
        search: Optional[str] = None,
        *,
        priority: Priority | str | None = None,
    ) -> List[Task]:
        owner = require_identity(caller)
        mode = normalize_filter(filter)

        stmt = select(Task).where(Task.owner_id == owner)
        if mode is TaskFilter.COMPLETED:
            stmt = stmt.where(Task.completed == True)  # noqa: E712
        elif mode is TaskFilter.PENDING:
            stmt = stmt.where(Task.completed == False)  # noqa: E712
        if priority is not None:
            stmt = stmt.where(Task.priority == normalize_priority(priority).value)
        stmt = stmt.order_by(Task.created_at.desc(), Task.id.desc())

        with self._session_factory() as s:
            tasks = list(s.exec(stmt))

        needle = (search or "").strip().casefold()
        if needle:
            tasks = [t for t in tasks if _matches(t, needle)]
        logger.debug(
            "Listed %d task(s) owner=%s filter=%s search=%r", len(tasks), owner, mode.value, needle
        )
        return tasks

    def stats(self, caller: Optional[str]) -> TaskStats:
        owner = require_identity(caller)
        with self._session_factory() as s:
            tasks = list(s.exec(select(Task).where(Task.owner_id == owner)))
        completed = sum(1 for t in tasks if t.completed)
        return TaskStats(total=len(tasks), completed=completed, pending=len(tasks) - completed)

    def get(self, caller: Optional[str], task_id: int) -> Task:
        owner = require_identity(caller)
        with self._session_factory() as s:
            return self._owned(s, owner, task_id)

    # ---------- mutations ----------
    def create(
        self,
        caller: Optional[str],
        title: str,
        description: Optional[str] = None,
        due_date: Optional[int] = None,
        *,
        priority: Priority | str,
    ) -> int:
        owner = require_identity(caller)
        task = Task(
            title=_clean_title(title),
            description=_clean_description(description),
            completed=False,
            owner_id=owner,
            due_date=_normalize_due_date(due_date),
            priority=normalize_priority(priority).value,
            created_at=now_ms(),
        )
        with self._session_factory() as s:
            s.add(task)
            s.commit()
            s.refresh(task)
            task_id = task.id
        logger.info("Task %s created by %s", task_id, owner)
        self._emit("after_create", owner, task_id)
        return task_id

    def update(self, caller: Optional[str], task_id: int, patch: TaskPatch) -> None:
        owner = require_identity(caller)
        with self._session_factory() as s:
            task = self._owned(s, owner, task_id)
            fields = patch.supplied()
            if not fields:
                return
            if "title" in fields:
                task.title = _clean_title(fields["title"])
            if "description" in fields:
                task.description = _clean_description(fields["description"])
            if "due_date" in fields:
                task.due_date = _normalize_due_date(fields["due_date"])
            if "priority" in fields:
                task.priority = normalize_priority(fields["priority"]).value
            s.add(task)
            s.commit()
        logger.info("Task %s updated by %s: %s", task_id, owner, ", ".join(sorted(fields)))
        self._emit("after_update", owner, task_id)

    def toggle(self, caller: Optional[str], task_id: int) -> None:
        owner = require_identity(caller)
        with self._session_factory() as s:
            task = self._owned(s, owner, task_id)
            task.completed = not task.completed
            completed = task.completed
            s.add(task)
            s.commit()
        logger.info("Task %s toggled by %s: completed=%s", task_id, owner, completed)
        self._emit("after_update", owner, task_id)

    def delete(self, caller: Optional[str], task_id: int) -> None:
        owner = require_identity(caller)
        with self._session_factory() as s:
            task = self._owned(s, owner, task_id)
            s.delete(task)
            s.commit()
        logger.info("Task %s deleted by %s", task_id, owner)
        self._emit("after_delete", owner, task_id)

    # ---------- helpers ----------
    def _owned(self, s: Session, owner: str, task_id: int) -> Task:
        task = s.get(Task, task_id)
        if task is None:
            raise NotFound()
        if task.owner_id != owner:
            logger.warning("User %s denied access to task %s", owner, task_id)
            raise Forbidden()
        return task


__all__ = ["EVENTS", "TaskChange", "TaskService", "normalize_filter"]
