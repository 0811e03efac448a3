"""Centralized application configuration."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
import logging
import os
import sys


DATA_DIR_ENV = "TASKPAD_DATA_DIR"


def get_default_data_dir(
    app_name: str,
    *,
    platform: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """Return an OS-specific user data directory for ``app_name``.

    ``TASKPAD_DATA_DIR`` in the environment wins over the platform default.
    """

    platform_id = (platform or sys.platform).lower()
    environ = dict(os.environ if env is None else env)
    override = (environ.get(DATA_DIR_ENV) or "").strip()
    if override:
        return Path(override).expanduser()

    home_dir = Path(home or Path.home())
    sanitized = app_name.strip() or "app"
    sanitized = sanitized.replace("/", "-").replace("\\", "-")

    if platform_id.startswith("win"):
        base = Path(environ.get("APPDATA") or home_dir / "AppData" / "Roaming")
    elif platform_id == "darwin":
        base = home_dir / "Library" / "Application Support"
    else:
        base = Path(environ.get("XDG_DATA_HOME") or home_dir / ".local" / "share")

    return (base.expanduser() / sanitized)


APP_NAME = "Taskpad"


DATA_DIR = get_default_data_dir(APP_NAME)
BACKUP_DIR = DATA_DIR / "backups"
LOG_DIR = DATA_DIR / "logs"

DB_PATH = DATA_DIR / "tasks.db"
IDENTITY_PATH = DATA_DIR / "identity.txt"
CONFIG_PATH = DATA_DIR / "config.json"
LOG_PATH = LOG_DIR / "taskpad.log"


@dataclass(frozen=True)
class ThemeColors:
    surface_bg: str = "#F8FAFC"
    card_bg: str = "#FFFFFF"
    outline: str = "#E5E7EB"
    text_subtle: str = "#6B7280"
    text_muted: str = "#9CA3AF"
    overdue: str = "#DC2626"
    completed: str = "#22C55E"
    accent: str = "#2563EB"


@dataclass(frozen=True)
class StatsColors:
    total: str = "#2563EB"
    completed: str = "#16A34A"
    pending: str = "#EA580C"
    progress: str = "#9333EA"


@dataclass(frozen=True)
class UISettings:
    app_title: str = APP_NAME
    theme_mode: str = "light"
    color_scheme_seed: str = "#2563EB"
    window_min_width: int = 720
    window_min_height: int = 560
    content_max_width: int = 960
    theme: ThemeColors = ThemeColors()
    stats: StatsColors = StatsColors()


UI = UISettings()


@dataclass(frozen=True)
class BackupSettings:
    enabled: bool = True
    directory: Path = BACKUP_DIR
    keep_days: int = 7


BACKUP = BackupSettings()


@dataclass(frozen=True)
class LoggingSettings:
    path: Path = LOG_PATH
    level: int = logging.INFO
    max_bytes: int = 1_000_000
    backup_count: int = 3


LOGGING = LoggingSettings()


__all__ = [
    "APP_NAME",
    "DATA_DIR",
    "DATA_DIR_ENV",
    "BACKUP_DIR",
    "LOG_DIR",
    "DB_PATH",
    "IDENTITY_PATH",
    "CONFIG_PATH",
    "LOG_PATH",
    "UI",
    "BACKUP",
    "LOGGING",
    "get_default_data_dir",
]
