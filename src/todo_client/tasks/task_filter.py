# src/todo_client/tasks/task_filter.py

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Task, TaskFilter


def filter_tasks(tasks: Iterable[Task], task_filter: TaskFilter | str) -> list[Task]:
    """
    Project the collection onto what the screen shows.

    Pure: never mutates the input, keeps the server's order.
    """
    f = TaskFilter.parse(task_filter)
    if f is TaskFilter.COMPLETED:
        return [t for t in tasks if t.completed]
    if f is TaskFilter.PENDING:
        return [t for t in tasks if not t.completed]
    return list(tasks)
