import pytest

from storage.config import load_config
from ui.view_model import TodoViewModel

ALICE = "user-alice"
BOB = "user-bob"


@pytest.fixture()
def vm(service, tmp_path, clock):
    model = TodoViewModel(service, ALICE, config_path=tmp_path / "config.json")
    model.start()
    yield model
    model.stop()


def _messages(vm):
    return [(n.kind, n.message) for n in vm.drain_notifications()]


def test_create_updates_tasks_stats_and_notifies(vm):
    vm.show_form()
    assert vm.create_task("  Buy milk ", "", "2030-01-15", "high") is True

    assert [t.title for t in vm.tasks] == ["Buy milk"]
    assert vm.tasks[0].due_date is not None
    assert (vm.stats.total, vm.stats.pending) == (1, 1)
    assert vm.form_visible is False
    assert _messages(vm) == [("success", "Task created successfully!")]


def test_blank_title_is_caught_before_submission(vm, service):
    assert vm.create_task("   ") is False
    assert service.stats(ALICE).total == 0
    assert vm.drain_notifications() == []


def test_bad_due_date_reports_generic_failure(vm):
    assert vm.create_task("Task", due_date_text="next tuesday") is False
    assert _messages(vm) == [("error", "Failed to create task")]


def test_default_priority_is_used(vm):
    vm.create_task("No explicit priority")
    assert vm.tasks[0].priority == "medium"


def test_toggle_and_filter(vm, tmp_path):
    vm.create_task("One")
    vm.create_task("Two")
    two = vm.tasks[0].id
    vm.drain_notifications()

    assert vm.toggle(two) is True
    assert _messages(vm) == [("success", "Task status updated!")]
    assert (vm.stats.completed, vm.stats.pending) == (1, 1)

    vm.set_filter("completed")
    assert [t.title for t in vm.tasks] == ["Two"]
    assert load_config(tmp_path / "config.json").last_filter == "completed"

    vm.set_filter("pending")
    assert [t.title for t in vm.tasks] == ["One"]


def test_unknown_filter_is_ignored(vm, tmp_path):
    vm.create_task("Only")
    vm.set_filter("pending")

    assert vm.set_filter("archived") is False
    assert vm.filter.value == "pending"
    assert [t.title for t in vm.tasks] == ["Only"]
    assert load_config(tmp_path / "config.json").last_filter == "pending"


def test_filter_is_restored_from_config(service, tmp_path):
    path = tmp_path / "config.json"
    first = TodoViewModel(service, ALICE, config_path=path)
    first.set_filter("pending")
    second = TodoViewModel(service, ALICE, config_path=path)
    assert second.filter.value == "pending"


def test_search_and_empty_message(vm):
    vm.create_task("Buy milk")
    vm.create_task("Walk dog")

    vm.set_search("MILK")
    assert [t.title for t in vm.tasks] == ["Buy milk"]

    vm.set_search("zebra")
    assert vm.tasks == []
    assert vm.empty_message() == "Try adjusting your search or filters"

    vm.set_search("")
    assert vm.empty_message() == "Get started by creating your first task"


def test_save_edit_applies_partial_patch(vm):
    vm.create_task("Draft", "keep me", "", "low")
    task_id = vm.tasks[0].id
    vm.start_edit(task_id)
    vm.drain_notifications()

    assert vm.save_edit(task_id, title="Final") is True

    task = vm.tasks[0]
    assert (task.title, task.description, task.priority) == ("Final", "keep me", "low")
    assert vm.editing_id is None
    assert _messages(vm) == [("success", "Task updated successfully!")]


def test_delete_requires_confirmation(vm):
    vm.create_task("Temporary")
    task_id = vm.tasks[0].id
    vm.drain_notifications()

    vm.request_delete(task_id)
    vm.cancel_delete()
    assert vm.confirm_delete() is False
    assert len(vm.tasks) == 1

    vm.request_delete(task_id)
    assert vm.confirm_delete() is True
    assert vm.tasks == []
    assert vm.stats.total == 0
    assert _messages(vm) == [("success", "Task deleted successfully!")]


def test_foreign_task_surfaces_generic_failure(vm, service):
    foreign = service.create(BOB, "Bob's", priority="low")

    assert vm.toggle(foreign) is False
    vm.request_delete(foreign)
    assert vm.confirm_delete() is False
    assert _messages(vm) == [
        ("error", "Failed to update task"),
        ("error", "Failed to delete task"),
    ]
    assert service.get(BOB, foreign).completed is False


def test_on_change_is_called(service, tmp_path):
    calls = []
    model = TodoViewModel(
        service, ALICE, config_path=tmp_path / "config.json", on_change=lambda: calls.append(1)
    )
    model.start()
    before = len(calls)
    model.create_task("Ping")
    assert len(calls) > before
    model.stop()
