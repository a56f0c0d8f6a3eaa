# src/todo_client/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import Task, TaskFilter, TaskId


@dataclass(slots=True, frozen=True)
class NoActiveEdit:
    pass


@dataclass(slots=True, frozen=True)
class EditingTask:
    task_id: TaskId
    buffer: str


EditState = NoActiveEdit | EditingTask

NO_ACTIVE_EDIT = NoActiveEdit()


@dataclass
class ViewState:
    """
    Everything the single screen shows.

    tasks is the last snapshot returned by the Task Store; it is only ever
    replaced wholesale by a refresh. Everything else is transient UI state.
    """

    tasks: list[Task] = field(default_factory=list)
    filter: TaskFilter = TaskFilter.ALL
    dark_mode: bool = False
    draft: str = ""
    edit: EditState = NO_ACTIVE_EDIT

    @property
    def editing_id(self) -> TaskId | None:
        return self.edit.task_id if isinstance(self.edit, EditingTask) else None
