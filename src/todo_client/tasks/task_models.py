# src/todo_client/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any

TaskId = int | str


class TaskFilter(StrEnum):
    """Which slice of the collection the screen shows."""

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    @classmethod
    def parse(cls, raw: TaskFilter | str) -> TaskFilter:
        if isinstance(raw, TaskFilter):
            return raw
        key = (raw or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown filter: {raw!r} (expected one of: {choices})") from None

    @property
    def label(self) -> str:
        return self.value.capitalize()


_KNOWN_KEYS = frozenset({"id", "title", "completed"})


@dataclass(slots=True, frozen=True)
class Task:
    """
    A todo item as the Task Store reports it.

    Notes:
    - id is assigned by the Task Store; None only for a record that was never persisted.
    - extra keeps server fields this client does not model, so a full-record
      update writes them back unchanged.
    """

    id: TaskId | None
    title: str
    completed: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> Task:
        if not isinstance(raw, dict):
            raise ValueError(f"Expected JSON object for task, got {type(raw).__name__}")
        if "title" not in raw:
            raise ValueError("Task JSON is missing 'title'")
        title = raw["title"]
        if not isinstance(title, str):
            raise ValueError(f"Task title must be a string, got {type(title).__name__}")
        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError(f"Task completed must be a boolean, got {type(completed).__name__}")
        extra = {k: v for k, v in raw.items() if k not in _KNOWN_KEYS}
        return cls(
            id=raw.get("id"),
            title=title,
            completed=completed,
            extra=extra,
        )

    def to_json(self) -> dict[str, Any]:
        """Full record as sent on update (id included once known)."""
        out: dict[str, Any] = dict(self.extra)
        if self.id is not None:
            out["id"] = self.id
        out["title"] = self.title
        out["completed"] = self.completed
        return out

    def with_title(self, title: str) -> Task:
        return replace(self, title=title)

    def toggled(self) -> Task:
        return replace(self, completed=not self.completed)


def same_id(a: TaskId | None, b: TaskId | None) -> bool:
    """Compare opaque ids; console input arrives as text, server ids may be ints."""
    if a is None or b is None:
        return False
    return a == b or str(a) == str(b)


def find_task(tasks: list[Task], task_id: TaskId) -> Task | None:
    for t in tasks:
        if same_id(t.id, task_id):
            return t
    return None
