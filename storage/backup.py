"""Daily copies of the SQLite task database."""
from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from pathlib import Path
from shutil import copy2
from typing import List

logger = logging.getLogger("taskpad.backup")


def _backup_date(path: Path, prefix: str) -> date | None:
    stem = path.stem
    if not stem.startswith(prefix):
        return None
    try:
        return datetime.strptime(stem[len(prefix) :], "%Y-%m-%d").date()
    except ValueError:
        return None


def prune_backups(db_file: Path, backup_dir: Path, *, today: date, keep_days: int) -> List[Path]:
    """Delete dated copies older than ``keep_days`` and return the removed paths."""

    removed: List[Path] = []
    if keep_days <= 0:
        return removed

    prefix = f"{db_file.stem}_"
    cutoff = today - timedelta(days=keep_days - 1)
    for candidate in backup_dir.glob(f"{prefix}*{db_file.suffix}"):
        taken_on = _backup_date(candidate, prefix)
        if taken_on is None or taken_on >= cutoff:
            continue
        try:
            candidate.unlink()
        except OSError as exc:
            logger.warning("Could not remove old backup %s: %s", candidate, exc)
            continue
        removed.append(candidate)
    return removed


def ensure_daily_backup(
    db_path: str | Path,
    backup_dir: str | Path,
    *,
    keep_days: int = 7,
) -> Path | None:
    """Copy the database once per day and rotate old copies.

    Returns the path of the copy made by this call, or ``None`` when today's
    copy already exists or there is no database yet.
    """

    db_file = Path(db_path)
    if not db_file.exists():
        return None

    backups = Path(backup_dir)
    backups.mkdir(parents=True, exist_ok=True)

    today = datetime.now().date()
    destination = backups / f"{db_file.stem}_{today.isoformat()}{db_file.suffix}"

    created: Path | None = None
    if not destination.exists():
        copy2(db_file, destination)
        created = destination
        logger.info("Database backup written to %s", destination)

    prune_backups(db_file, backups, today=today, keep_days=keep_days)
    return created


__all__ = ["ensure_daily_backup", "prune_backups"]
