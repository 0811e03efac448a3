"""Utility helpers for task priorities."""
from __future__ import annotations

from typing import Dict

from core.errors import InvalidInput
from models.task import Priority

# Three fixed levels; the order here is the order shown in dropdowns.
PRIORITY_META: Dict[Priority, Dict[str, str]] = {
    Priority.LOW: {
        "label": "Low",
        "icon": "🟢",
        "color": "#166534",    # green-800
        "bgcolor": "#DCFCE7",  # green-100
    },
    Priority.MEDIUM: {
        "label": "Medium",
        "icon": "🟡",
        "color": "#854D0E",    # yellow-800
        "bgcolor": "#FEF9C3",  # yellow-100
    },
    Priority.HIGH: {
        "label": "High",
        "icon": "🔴",
        "color": "#991B1B",    # red-800
        "bgcolor": "#FEE2E2",  # red-100
    },
}

DEFAULT_PRIORITY = Priority.MEDIUM


def normalize_priority(value: Priority | str | None) -> Priority:
    """Coerce an exact priority value into a :class:`Priority`, rejecting anything else."""
    if isinstance(value, Priority):
        return value
    if isinstance(value, str):
        try:
            return Priority(value)
        except ValueError:
            pass
    raise InvalidInput(f"Priority must be one of low, medium, high (got {value!r})")


def priority_label(value: Priority | str) -> str:
    return PRIORITY_META[normalize_priority(value)]["label"]


def priority_icon(value: Priority | str) -> str:
    return PRIORITY_META[normalize_priority(value)]["icon"]


def priority_color(value: Priority | str) -> str:
    return PRIORITY_META[normalize_priority(value)]["color"]


def priority_bgcolor(value: Priority | str) -> str:
    return PRIORITY_META[normalize_priority(value)]["bgcolor"]


def priority_options() -> Dict[str, str]:
    """Return mapping of dropdown values -> labels."""
    return {level.value: meta["label"] for level, meta in PRIORITY_META.items()}
