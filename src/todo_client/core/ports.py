# src/todo_client/core/ports.py

"""
Ports (interfaces) used by the core.

The controller depends on a Protocol instead of the concrete HTTP client.
This keeps the Task Store swappable and makes testing easier.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from ..tasks.task_models import Task, TaskId


@dataclass(slots=True, frozen=True)
class StoreResult:
    """
    Outcome of one Task Store request.

    ok is True only for a 2xx response. status_code is None when no response
    arrived at all (transport failure); error then carries the reason.
    """

    ok: bool
    status_code: int | None = None
    error: str | None = None


@dataclass(slots=True, frozen=True)
class ListResult(StoreResult):
    tasks: list[Task] = field(default_factory=list)


class TaskStore(Protocol):
    """REST-style `todos` resource. Implementations never raise for HTTP/transport errors."""

    async def list_tasks(self) -> ListResult: ...
    async def create_task(self, *, title: str, completed: bool = False) -> StoreResult: ...
    async def update_task(self, task: Task) -> StoreResult: ...
    async def delete_task(self, task_id: TaskId) -> StoreResult: ...
