import pytest

from core.errors import InvalidInput, Unauthenticated
from models.task import TaskPatch
from services.live_query import LiveQuery, LiveStats

ALICE = "user-alice"
BOB = "user-bob"


def test_live_query_refreshes_on_own_changes(service, clock):
    results = []
    live = LiveQuery(service, ALICE, on_result=results.append)

    assert live.start() == []
    task_id = service.create(ALICE, "Buy milk", priority="low")
    service.update(ALICE, task_id, TaskPatch(title="Buy oat milk"))

    assert [[t.title for t in r] for r in results] == [[], ["Buy milk"], ["Buy oat milk"]]


def test_live_query_ignores_other_owners(service):
    results = []
    live = LiveQuery(service, ALICE, on_result=results.append)
    live.start()

    service.create(BOB, "Not yours", priority="low")

    assert len(results) == 1


def test_live_query_params_and_stop(service, clock):
    done = service.create(ALICE, "Done", priority="low")
    service.create(ALICE, "Open", priority="low")
    service.toggle(ALICE, done)

    results = []
    live = LiveQuery(service, ALICE, filter="pending", on_result=results.append)
    assert [t.title for t in live.start()] == ["Open"]

    assert [t.title for t in live.update_params(filter="completed")] == ["Done"]
    assert live.update_params(filter="all", search="nothing") == []

    live.stop()
    assert not live.active
    service.create(ALICE, "After stop", priority="low")
    assert len(results) == 3


def test_live_stats_tracks_toggle(service):
    snapshots = []
    live = LiveStats(service, ALICE, on_result=snapshots.append)
    live.start()

    task_id = service.create(ALICE, "Count me", priority="low")
    service.toggle(ALICE, task_id)

    assert [(s.total, s.completed, s.pending) for s in snapshots] == [
        (0, 0, 0),
        (1, 0, 1),
        (1, 1, 0),
    ]


def test_live_query_requires_identity(service):
    with pytest.raises(Unauthenticated):
        LiveQuery(service, None, on_result=lambda tasks: None)


def test_live_query_rejects_unknown_filter(service):
    with pytest.raises(InvalidInput):
        LiveQuery(service, ALICE, filter="archived", on_result=lambda tasks: None)

    live = LiveQuery(service, ALICE, filter="pending", on_result=lambda tasks: None)
    with pytest.raises(InvalidInput):
        live.update_params(filter="archived")
    assert live.filter.value == "pending"
