# taskpad/storage/db.py
from typing import Callable

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

from core.settings import DB_PATH, BACKUP
from storage.backup import ensure_daily_backup

# Ensure SQLModel metadata is populated
import models.task  # noqa: F401
from storage import migrations


_engine = create_engine(f"sqlite:///{DB_PATH.as_posix()}", echo=False)


def init_db(engine: Engine | None = None):
    actual = engine or _engine
    if engine is None:
        DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(actual)
    migrations.run_all(actual)
    if engine is None and BACKUP.enabled:
        ensure_daily_backup(DB_PATH, BACKUP.directory, keep_days=BACKUP.keep_days)


def get_engine():
    return _engine


def get_session() -> Session:
    return Session(_engine)


def make_session_factory(engine: Engine) -> Callable[[], Session]:
    """Return a session factory bound to ``engine`` instead of the default database."""

    def factory() -> Session:
        return Session(engine)

    return factory


__all__ = ["init_db", "get_engine", "get_session", "make_session_factory"]
