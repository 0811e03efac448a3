from datetime import date, datetime, timezone

import pytest

from core.errors import InvalidInput
from core.priorities import normalize_priority, priority_label, priority_options
from models.task import Priority, Task
from ui.formatting import due_label, format_date, is_overdue, parse_due_date
from utils.datetime_utils import datetime_to_ms, local_midnight_ms, ms_to_datetime, now_ms


def _task(**fields):
    base = {"title": "T", "owner_id": "u1", "created_at": 0}
    base.update(fields)
    return Task(**base)


def test_ms_conversions_roundtrip_utc():
    dt = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)
    ms = datetime_to_ms(dt)
    assert ms == 1_709_296_200_000
    assert ms_to_datetime(ms, tz=timezone.utc) == dt
    assert ms_to_datetime(None) is None


def test_now_ms_is_current():
    before = int(datetime.now(timezone.utc).timestamp() * 1000)
    assert abs(now_ms() - before) < 5_000


def test_parse_due_date_formats():
    expected = local_midnight_ms(date(2025, 10, 10))
    assert parse_due_date("2025-10-10") == expected
    assert parse_due_date("10.10.2025") == expected
    assert parse_due_date(" 2025-10-10T00:00:00 ") == expected
    assert parse_due_date("") is None
    assert parse_due_date(None) is None
    assert format_date(expected) == "2025-10-10"


@pytest.mark.parametrize("text", ["tomorrow", "2025-13-01", "31.02.2025"])
def test_parse_due_date_rejects_garbage(text):
    with pytest.raises(InvalidInput):
        parse_due_date(text)


def test_overdue_only_for_open_tasks_with_past_due_date():
    now = 1_000_000
    assert is_overdue(_task(due_date=now - 1), now) is True
    assert is_overdue(_task(due_date=now - 1, completed=True), now) is False
    assert is_overdue(_task(due_date=now + 1), now) is False
    assert is_overdue(_task(), now) is False


def test_due_label():
    due = local_midnight_ms(date(2024, 1, 2))
    assert due_label(_task(due_date=due), due + 1) == "Due: 2024-01-02 (Overdue)"
    assert due_label(_task(due_date=due), due - 1) == "Due: 2024-01-02"
    assert due_label(_task(), 0) == ""


def test_normalize_priority_accepts_exact_values_only():
    assert normalize_priority("high") is Priority.HIGH
    assert normalize_priority(Priority.LOW) is Priority.LOW
    for bad in ("urgent", "HIGH", " low ", "", None, 3):
        with pytest.raises(InvalidInput):
            normalize_priority(bad)


def test_priority_options_order_and_labels():
    assert list(priority_options()) == ["low", "medium", "high"]
    assert priority_label("medium") == "Medium"
