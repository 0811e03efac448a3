# taskpad/ui/view_model.py
"""State and actions behind the task page, kept free of any flet import."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from core.errors import InvalidInput, TaskError
from models.task import Priority, Task, TaskFilter, TaskPatch, TaskStats, UNSET
from services.live_query import LiveQuery, LiveStats
from services.tasks import TaskService, normalize_filter
from storage.config import load_config, remember_filter
from ui.formatting import parse_due_date

logger = logging.getLogger("taskpad.ui")


@dataclass(frozen=True)
class Notification:
    kind: str  # success / error
    message: str


class TodoViewModel:
    def __init__(
        self,
        service: TaskService,
        caller: Optional[str],
        *,
        config_path: Optional[Path] = None,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.service = service
        self.config_path = config_path
        self.on_change = on_change

        cfg = load_config(config_path)
        self.filter = TaskFilter(cfg.last_filter)
        self.default_priority = Priority(cfg.default_priority)
        self.search = ""
        self.tasks: List[Task] = []
        self.stats = TaskStats()
        self.form_visible = False
        self.editing_id: Optional[int] = None
        self.pending_delete_id: Optional[int] = None
        self.notifications: List[Notification] = []

        self._query = LiveQuery(
            service, caller, filter=self.filter, search=self.search, on_result=self._set_tasks
        )
        self._stats = LiveStats(service, caller, on_result=self._set_stats)
        self.caller = self._query.caller

    # ---------- lifecycle ----------
    def start(self) -> None:
        self._query.start()
        self._stats.start()

    def stop(self) -> None:
        self._query.stop()
        self._stats.stop()

    def _set_tasks(self, tasks: List[Task]) -> None:
        self.tasks = tasks
        self._changed()

    def _set_stats(self, stats: TaskStats) -> None:
        self.stats = stats
        self._changed()

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()

    def _notify(self, kind: str, message: str) -> None:
        self.notifications.append(Notification(kind, message))
        self._changed()

    def drain_notifications(self) -> List[Notification]:
        pending, self.notifications = self.notifications, []
        return pending

    def _fail(self, message: str, exc: Exception) -> bool:
        logger.warning("%s: %s", message, exc)
        self._notify("error", message)
        return False

    # ---------- filters ----------
    def set_filter(self, value: TaskFilter | str) -> bool:
        try:
            self.filter = normalize_filter(value)
        except InvalidInput as exc:
            logger.warning("Ignoring filter change: %s", exc)
            return False
        try:
            remember_filter(self.filter, self.config_path)
        except OSError as exc:
            logger.warning("Could not persist filter: %s", exc)
        self._query.update_params(filter=self.filter)
        return True

    def set_search(self, text: Optional[str]) -> None:
        self.search = text or ""
        self._query.update_params(search=self.search)

    # ---------- form ----------
    def show_form(self) -> None:
        self.form_visible = True
        self._changed()

    def hide_form(self) -> None:
        self.form_visible = False
        self._changed()

    def start_edit(self, task_id: int) -> None:
        self.editing_id = task_id
        self._changed()

    def cancel_edit(self) -> None:
        self.editing_id = None
        self._changed()

    # ---------- actions ----------
    def create_task(
        self,
        title: str,
        description: Optional[str] = None,
        due_date_text: Optional[str] = None,
        priority: Priority | str | None = None,
    ) -> bool:
        if not (title or "").strip():
            return False
        try:
            self.service.create(
                self.caller,
                title,
                description,
                parse_due_date(due_date_text),
                priority=priority or self.default_priority,
            )
        except TaskError as exc:
            return self._fail("Failed to create task", exc)
        self.form_visible = False
        self._notify("success", "Task created successfully!")
        return True

    def save_edit(
        self,
        task_id: int,
        *,
        title=UNSET,
        description=UNSET,
        due_date_text=UNSET,
        priority=UNSET,
    ) -> bool:
        if title is not UNSET and not (title or "").strip():
            return False
        try:
            due_date = UNSET if due_date_text is UNSET else parse_due_date(due_date_text)
            patch = TaskPatch(
                title=title, description=description, due_date=due_date, priority=priority
            )
            self.service.update(self.caller, task_id, patch)
        except TaskError as exc:
            return self._fail("Failed to update task", exc)
        self.editing_id = None
        self._notify("success", "Task updated successfully!")
        return True

    def toggle(self, task_id: int) -> bool:
        try:
            self.service.toggle(self.caller, task_id)
        except TaskError as exc:
            return self._fail("Failed to update task", exc)
        self._notify("success", "Task status updated!")
        return True

    def request_delete(self, task_id: int) -> None:
        self.pending_delete_id = task_id
        self._changed()

    def cancel_delete(self) -> None:
        self.pending_delete_id = None
        self._changed()

    def confirm_delete(self) -> bool:
        task_id = self.pending_delete_id
        if task_id is None:
            return False
        self.pending_delete_id = None
        try:
            self.service.delete(self.caller, task_id)
        except TaskError as exc:
            return self._fail("Failed to delete task", exc)
        self._notify("success", "Task deleted successfully!")
        return True

    # ---------- display ----------
    def empty_message(self) -> str:
        if self.search.strip():
            return "Try adjusting your search or filters"
        return "Get started by creating your first task"


__all__ = ["Notification", "TodoViewModel"]
