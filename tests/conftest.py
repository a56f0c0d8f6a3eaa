# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_client.controller import TaskListController

from .fakes import FakeTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        base_url="http://task-store.test",
        request_timeout_seconds=None,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def milk_store() -> FakeTaskStore:
    return FakeTaskStore.with_tasks({"id": 1, "title": "milk", "completed": False})


@pytest.fixture()
def controller(milk_store: FakeTaskStore) -> TaskListController:
    return TaskListController(milk_store)
