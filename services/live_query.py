"""Re-run owner-scoped queries whenever that owner's tasks change."""
from __future__ import annotations

import logging
from typing import Callable, Generic, List, Optional, TypeVar

from models.task import Task, TaskFilter, TaskStats
from services.identity import require_identity
from services.tasks import EVENTS, TaskChange, TaskService, normalize_filter

logger = logging.getLogger("taskpad.live")

T = TypeVar("T")


class _LiveBase(Generic[T]):
    def __init__(self, service: TaskService, caller: Optional[str], on_result: Callable[[T], None]):
        self.service = service
        self.caller = require_identity(caller)
        self.on_result = on_result
        self.result: Optional[T] = None
        self._active = False

    def start(self) -> T:
        if not self._active:
            for event in EVENTS:
                self.service.subscribe(event, self._on_change)
            self._active = True
        return self.refresh()

    def stop(self) -> None:
        if not self._active:
            return
        for event in EVENTS:
            self.service.unsubscribe(event, self._on_change)
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def refresh(self) -> T:
        self.result = self._fetch()
        self.on_result(self.result)
        return self.result

    def _on_change(self, change: TaskChange) -> None:
        if change.owner_id != self.caller:
            return
        logger.debug("Refreshing %s after %s of task %s", type(self).__name__, change.event, change.task_id)
        self.refresh()

    def _fetch(self) -> T:
        raise NotImplementedError


class LiveQuery(_LiveBase[List[Task]]):
    """Keeps the result of ``TaskService.list`` fresh for one caller."""

    def __init__(
        self,
        service: TaskService,
        caller: Optional[str],
        *,
        filter: TaskFilter | str = TaskFilter.ALL,
        search: str = "",
        on_result: Callable[[List[Task]], None],
    ):
        super().__init__(service, caller, on_result)
        self.filter = normalize_filter(filter)
        self.search = search

    def update_params(
        self,
        *,
        filter: TaskFilter | str | None = None,
        search: Optional[str] = None,
    ) -> List[Task]:
        if filter is not None:
            self.filter = normalize_filter(filter)
        if search is not None:
            self.search = search
        return self.refresh()

    def _fetch(self) -> List[Task]:
        return self.service.list(self.caller, self.filter, self.search)


class LiveStats(_LiveBase[TaskStats]):
    """Keeps ``TaskService.stats`` fresh for one caller."""

    def _fetch(self) -> TaskStats:
        return self.service.stats(self.caller)


__all__ = ["LiveQuery", "LiveStats"]
