"""JSON-backed user preferences."""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any, Optional

from core.settings import CONFIG_PATH
from models.task import Priority, TaskFilter
from utils.fs import write_text_atomic

logger = logging.getLogger("taskpad.config")


@dataclass(frozen=True)
class AppConfig:
    """User preferences persisted to ``config.json``."""

    last_filter: str = TaskFilter.ALL.value
    default_priority: str = Priority.MEDIUM.value


def _one_of(value: Any, allowed: set[str], default: str) -> str:
    return value if isinstance(value, str) and value in allowed else default


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Read the config file; a missing or unreadable file yields the defaults."""
    target = path or CONFIG_PATH
    data: Any = {}
    if target.exists():
        try:
            data = json.loads(target.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", target, exc)
    if not isinstance(data, dict):
        data = {}
    defaults = AppConfig()
    return AppConfig(
        last_filter=_one_of(data.get("last_filter"), {f.value for f in TaskFilter}, defaults.last_filter),
        default_priority=_one_of(
            data.get("default_priority"), {p.value for p in Priority}, defaults.default_priority
        ),
    )


def save_config(config: AppConfig, path: Optional[Path] = None) -> None:
    write_text_atomic(path or CONFIG_PATH, json.dumps(asdict(config), indent=2, sort_keys=True))


def remember_filter(value: TaskFilter | str, path: Optional[Path] = None) -> AppConfig:
    target = path or CONFIG_PATH
    cfg = replace(load_config(target), last_filter=TaskFilter(value).value)
    save_config(cfg, target)
    return cfg


__all__ = ["AppConfig", "load_config", "remember_filter", "save_config"]
