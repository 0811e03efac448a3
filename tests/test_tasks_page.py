from types import SimpleNamespace

from ui.pages.tasks import TasksPage

ALICE = "user-alice"


class _Page:
    def __init__(self):
        self.updates = 0

    def update(self):
        self.updates += 1


def _count_lists(monkeypatch, service):
    calls = []
    original = service.list

    def counting_list(*args, **kwargs):
        calls.append(args)
        return original(*args, **kwargs)

    monkeypatch.setattr(service, "list", counting_list)
    return calls


def test_page_fetches_once_when_mounted(monkeypatch, service):
    service.create(ALICE, "Buy milk", priority="low")
    calls = _count_lists(monkeypatch, service)
    app = SimpleNamespace(page=_Page())

    page = TasksPage(app, service, ALICE)
    assert calls == []
    assert app.page.updates == 0

    page.activate_from_menu()
    assert len(calls) == 1
    assert [t.title for t in page.vm.tasks] == ["Buy milk"]
    assert page.total_txt.value == "1"

    page.dispose()
    service.create(ALICE, "After close", priority="low")
    assert len(calls) == 1
