"""Display helpers shared by the task page and its view model."""
from __future__ import annotations

import re
from datetime import date
from typing import Optional

from core.errors import InvalidInput
from models.task import Task
from utils.datetime_utils import local_midnight_ms, ms_to_datetime, now_ms

_ISO_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:T.*)?$")
_DOTTED_RE = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$")


def is_overdue(task: Task, now: Optional[int] = None) -> bool:
    if task.completed or task.due_date is None:
        return False
    return task.due_date < (now if now is not None else now_ms())


def format_date(value: Optional[int]) -> str:
    dt = ms_to_datetime(value)
    return dt.strftime("%Y-%m-%d") if dt else ""


def due_label(task: Task, now: Optional[int] = None) -> str:
    if task.due_date is None:
        return ""
    label = f"Due: {format_date(task.due_date)}"
    if is_overdue(task, now):
        label += " (Overdue)"
    return label


def created_label(task: Task) -> str:
    return f"Created: {format_date(task.created_at)}"


def parse_due_date(text: Optional[str]) -> Optional[int]:
    """Parse ``YYYY-MM-DD`` or ``DD.MM.YYYY`` into epoch ms at local midnight."""

    s = (text or "").strip()
    if not s:
        return None
    m = _ISO_RE.match(s)
    if m:
        y, mth, d = int(m.group(1)), int(m.group(2)), int(m.group(3))
    else:
        m = _DOTTED_RE.match(s)
        if not m:
            raise InvalidInput(f"Unrecognised date: {s!r}")
        d, mth, y = int(m.group(1)), int(m.group(2)), int(m.group(3))
    try:
        return local_midnight_ms(date(y, mth, d))
    except ValueError:
        raise InvalidInput(f"Unrecognised date: {s!r}") from None


def due_date_input(value: Optional[int]) -> str:
    """Inverse of :func:`parse_due_date` for pre-filling the edit form."""
    return format_date(value)


__all__ = [
    "created_label",
    "due_date_input",
    "due_label",
    "format_date",
    "is_overdue",
    "parse_due_date",
]
