from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from sqlmodel import SQLModel, create_engine

from services.tasks import TaskService
from storage.db import make_session_factory


@pytest.fixture()
def engine():
    engine = create_engine("sqlite:///:memory:")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture()
def service(session_factory):
    return TaskService(session_factory=session_factory)


@pytest.fixture()
def clock(monkeypatch):
    """Deterministic creation timestamps: each call advances by one second."""

    import services.tasks as tasks_module

    state = {"now": 1_700_000_000_000}

    def fake_now_ms():
        state["now"] += 1000
        return state["now"]

    monkeypatch.setattr(tasks_module, "now_ms", fake_now_ms)
    return state
