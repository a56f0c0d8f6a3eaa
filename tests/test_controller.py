# tests/test_controller.py

from __future__ import annotations

import asyncio

import pytest

from todo_client.controller import TaskListController
from todo_client.core.state import EditingTask, NoActiveEdit
from todo_client.tasks.task_models import Task, TaskFilter

from .fakes import FakeTaskStore


@pytest.mark.asyncio
async def test_load_replaces_collection(controller: TaskListController) -> None:
    assert controller.state.tasks == []
    assert await controller.load() is True
    assert controller.state.tasks == [Task(id=1, title="milk", completed=False)]


@pytest.mark.asyncio
async def test_load_failure_keeps_stale_list(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    milk_store.list_error = True

    assert await controller.refresh() is False
    assert [t.title for t in controller.state.tasks] == ["milk"]


@pytest.mark.asyncio
async def test_load_failure_on_mount_leaves_empty_list() -> None:
    store = FakeTaskStore(list_error=True)
    ctrl = TaskListController(store)

    assert await ctrl.load() is False
    assert ctrl.state.tasks == []
    assert ctrl.visible_tasks() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("draft", ["", "   ", "\t\n"])
async def test_blank_draft_issues_no_request(
    controller: TaskListController, milk_store: FakeTaskStore, draft: str
) -> None:
    await controller.load()
    milk_store.calls.clear()
    before = list(controller.state.tasks)

    controller.set_draft(draft)
    assert await controller.submit_draft() is False

    assert milk_store.calls == []
    assert controller.state.draft == draft
    assert controller.state.tasks == before


@pytest.mark.asyncio
async def test_create_posts_then_refreshes_and_clears_draft(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    milk_store.calls.clear()

    controller.set_draft("bread")
    assert await controller.submit_draft() is True

    assert milk_store.ops() == ["create", "list"]
    assert milk_store.calls[0].body == {"title": "bread", "completed": False}
    assert controller.state.draft == ""
    assert [t.title for t in controller.state.tasks] == ["milk", "bread"]
    assert controller.state.tasks[1].id == 2


@pytest.mark.asyncio
async def test_rejected_create_keeps_draft_and_skips_refresh(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    milk_store.calls.clear()
    milk_store.reject["create"] = 422

    controller.set_draft("bread")
    assert await controller.submit_draft() is False

    assert milk_store.ops() == ["create"]
    assert controller.state.draft == "bread"
    assert [t.title for t in controller.state.tasks] == ["milk"]


@pytest.mark.asyncio
async def test_toggle_complete_scenario(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    milk_store.calls.clear()

    assert await controller.toggle_complete(1) is True

    assert milk_store.ops() == ["update", "list"]
    body = milk_store.calls[0].body or {}
    assert body["title"] == "milk"
    assert body["completed"] is True
    assert controller.state.tasks == [Task(id=1, title="milk", completed=True)]

    controller.set_filter("pending")
    assert controller.visible_tasks() == []


@pytest.mark.asyncio
async def test_toggle_twice_restores_original(controller: TaskListController) -> None:
    await controller.load()

    await controller.toggle_complete(1)
    await controller.toggle_complete(1)

    assert controller.state.tasks == [Task(id=1, title="milk", completed=False)]


@pytest.mark.asyncio
async def test_toggle_round_trips_unknown_fields() -> None:
    store = FakeTaskStore.with_tasks(
        {"id": 7, "title": "call mom", "completed": False, "priority": 3}
    )
    ctrl = TaskListController(store)
    await ctrl.load()

    await ctrl.toggle_complete(7)

    assert store.calls[1].body == {"id": 7, "title": "call mom", "completed": True, "priority": 3}


@pytest.mark.asyncio
async def test_toggle_unknown_id_is_noop(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    milk_store.calls.clear()

    assert await controller.toggle_complete(99) is False
    assert milk_store.calls == []


@pytest.mark.asyncio
async def test_delete_scenario(controller: TaskListController, milk_store: FakeTaskStore) -> None:
    await controller.load()
    milk_store.calls.clear()

    assert await controller.delete(1) is True

    assert milk_store.ops() == ["delete", "list"]
    assert controller.state.tasks == []
    for f in TaskFilter:
        controller.set_filter(f)
        assert controller.visible_tasks() == []


@pytest.mark.asyncio
async def test_rejected_delete_does_not_refresh(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    milk_store.calls.clear()
    milk_store.reject["delete"] = 500

    assert await controller.delete(1) is False
    assert milk_store.ops() == ["delete"]
    assert len(controller.state.tasks) == 1


@pytest.mark.asyncio
async def test_delete_accepts_id_typed_as_text(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    milk_store.calls.clear()

    assert await controller.delete("1") is True
    assert milk_store.calls[0].task_id == 1


def test_begin_edit_seeds_buffer_without_network(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    controller.state.tasks = [Task(id=1, title="milk")]

    assert controller.begin_edit(1) is True

    assert controller.state.edit == EditingTask(task_id=1, buffer="milk")
    assert controller.state.editing_id == 1
    assert milk_store.calls == []


def test_begin_edit_on_another_task_replaces_edit(controller: TaskListController) -> None:
    controller.state.tasks = [Task(id=1, title="milk"), Task(id=2, title="eggs")]
    controller.begin_edit(1)
    controller.set_edit_text("oat milk")

    controller.begin_edit(2)

    assert controller.state.edit == EditingTask(task_id=2, buffer="eggs")


def test_set_edit_text_without_edit_is_noop(controller: TaskListController) -> None:
    controller.set_edit_text("whatever")
    assert isinstance(controller.state.edit, NoActiveEdit)


@pytest.mark.asyncio
async def test_commit_edit_preserves_completed(milk_store: FakeTaskStore) -> None:
    milk_store.rows[1]["completed"] = True
    ctrl = TaskListController(milk_store)
    await ctrl.load()

    ctrl.begin_edit(1)
    ctrl.set_edit_text("oat milk")
    assert await ctrl.commit_edit() is True

    assert milk_store.ops() == ["list", "update", "list"]
    body = milk_store.calls[1].body or {}
    assert body["title"] == "oat milk"
    assert body["completed"] is True
    assert ctrl.state.tasks == [Task(id=1, title="oat milk", completed=True)]
    assert isinstance(ctrl.state.edit, NoActiveEdit)


@pytest.mark.asyncio
async def test_commit_edit_reads_completed_at_commit_time(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    controller.begin_edit(1)
    controller.set_edit_text("oat milk")

    # Completed elsewhere while the edit was open.
    await controller.toggle_complete(1)
    milk_store.calls.clear()

    await controller.commit_edit()

    body = milk_store.calls[0].body or {}
    assert body["completed"] is True


@pytest.mark.asyncio
async def test_commit_edit_twice_is_idempotent(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    controller.begin_edit(1)
    controller.set_edit_text("oat milk")
    milk_store.calls.clear()

    # Save button, then the input loses focus.
    assert await controller.commit_edit() is True
    assert await controller.commit_edit() is False

    assert milk_store.ops() == ["update", "list"]


@pytest.mark.asyncio
async def test_commit_edit_without_edit_is_noop(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    assert await controller.commit_edit() is False
    assert milk_store.calls == []


@pytest.mark.asyncio
async def test_rejected_edit_stays_active(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    controller.begin_edit(1)
    controller.set_edit_text("oat milk")
    milk_store.reject["update"] = 400

    assert await controller.commit_edit() is False

    assert controller.state.edit == EditingTask(task_id=1, buffer="oat milk")
    assert controller.state.tasks[0].title == "milk"


@pytest.mark.asyncio
async def test_blank_edit_is_not_sent(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    controller.begin_edit(1)
    controller.set_edit_text("   ")
    milk_store.calls.clear()

    assert await controller.commit_edit() is False

    assert milk_store.calls == []
    assert controller.state.editing_id == 1


@pytest.mark.asyncio
async def test_commit_edit_for_vanished_task_drops_edit(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    controller.begin_edit(1)
    controller.state.tasks = []
    milk_store.calls.clear()

    assert await controller.commit_edit() is False

    assert milk_store.calls == []
    assert isinstance(controller.state.edit, NoActiveEdit)


def test_cancel_edit(controller: TaskListController) -> None:
    controller.state.tasks = [Task(id=1, title="milk")]
    controller.begin_edit(1)
    controller.cancel_edit()
    assert controller.state.editing_id is None


def test_filter_and_dark_mode_are_local(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    controller.state.tasks = [Task(id=1, title="a", completed=True), Task(id=2, title="b")]

    assert controller.set_filter("completed") is TaskFilter.COMPLETED
    assert [t.id for t in controller.visible_tasks()] == [1]

    assert controller.toggle_dark_mode() is True
    assert controller.toggle_dark_mode() is False
    assert milk_store.calls == []


def test_set_filter_rejects_unknown_value(controller: TaskListController) -> None:
    with pytest.raises(ValueError):
        controller.set_filter("someday")
    assert controller.state.filter is TaskFilter.ALL


class SlowTaskStore(FakeTaskStore):
    """Yields to the event loop before answering an update, like a real network call."""

    async def update_task(self, task: Task):
        await asyncio.sleep(0.01)
        return await super().update_task(task)


@pytest.mark.asyncio
async def test_overlapping_save_and_blur_send_one_update() -> None:
    store = SlowTaskStore.with_tasks({"id": 1, "title": "milk", "completed": False})
    ctrl = TaskListController(store)
    await ctrl.load()
    ctrl.begin_edit(1)
    ctrl.set_edit_text("oat milk")
    store.calls.clear()

    results = await asyncio.gather(ctrl.commit_edit(), ctrl.commit_edit())

    assert sorted(results) == [False, True]
    assert store.ops() == ["update", "list"]
    assert ctrl.state.tasks[0].title == "oat milk"
    assert isinstance(ctrl.state.edit, NoActiveEdit)


@pytest.mark.asyncio
async def test_overlapping_commits_rejected_keep_buffer_for_retry() -> None:
    store = SlowTaskStore.with_tasks({"id": 1, "title": "milk", "completed": False})
    store.reject["update"] = 500
    ctrl = TaskListController(store)
    await ctrl.load()
    ctrl.begin_edit(1)
    ctrl.set_edit_text("oat milk")
    store.calls.clear()

    await asyncio.gather(ctrl.commit_edit(), ctrl.commit_edit())

    assert store.ops() == ["update"]
    assert ctrl.state.edit == EditingTask(task_id=1, buffer="oat milk")


@pytest.mark.asyncio
async def test_edit_begun_during_failed_commit_is_not_overwritten() -> None:
    store = SlowTaskStore.with_tasks(
        {"id": 1, "title": "milk", "completed": False},
        {"id": 2, "title": "eggs", "completed": False},
    )
    store.reject["update"] = 500
    ctrl = TaskListController(store)
    await ctrl.load()
    ctrl.begin_edit(1)
    ctrl.set_edit_text("oat milk")

    pending = asyncio.create_task(ctrl.commit_edit())
    await asyncio.sleep(0)
    ctrl.begin_edit(2)
    assert await pending is False

    assert ctrl.state.edit == EditingTask(task_id=2, buffer="eggs")


@pytest.mark.asyncio
async def test_unreachable_create_keeps_draft(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    milk_store.calls.clear()
    milk_store.unreachable.add("create")

    controller.set_draft("bread")
    assert await controller.submit_draft() is False

    assert milk_store.ops() == ["create"]
    assert controller.state.draft == "bread"
    assert [t.title for t in controller.state.tasks] == ["milk"]


@pytest.mark.asyncio
async def test_unreachable_update_keeps_edit_buffer(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    controller.begin_edit(1)
    controller.set_edit_text("oat milk")
    milk_store.calls.clear()
    milk_store.unreachable.add("update")

    assert await controller.commit_edit() is False
    assert await controller.toggle_complete(1) is False

    assert milk_store.ops() == ["update", "update"]
    assert controller.state.edit == EditingTask(task_id=1, buffer="oat milk")
    assert controller.state.tasks == [Task(id=1, title="milk", completed=False)]


@pytest.mark.asyncio
async def test_unreachable_delete_keeps_list(
    controller: TaskListController, milk_store: FakeTaskStore
) -> None:
    await controller.load()
    milk_store.calls.clear()
    milk_store.unreachable.add("delete")

    assert await controller.delete(1) is False

    assert milk_store.ops() == ["delete"]
    assert len(controller.state.tasks) == 1
