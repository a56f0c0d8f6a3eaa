# src/todo_client/controller.py

"""
Task List Controller.

Owns the ViewState and keeps it in sync with the Task Store:
user action -> local intent -> one request -> on success, full re-fetch.

There is no optimistic update and no merge: the task list is only ever
replaced by a refresh. Failures never escape; they are logged and the
transient state (draft / edit buffer) is left for the user to retry.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable

from .core.ports import StoreResult, TaskStore
from .core.state import NO_ACTIVE_EDIT, EditingTask, NoActiveEdit, ViewState
from .tasks.task_filter import filter_tasks
from .tasks.task_models import Task, TaskFilter, TaskId, find_task

logger = logging.getLogger(__name__)


class TaskListController:
    def __init__(self, store: TaskStore, state: ViewState | None = None) -> None:
        self.store = store
        self.state = state if state is not None else ViewState()

    # ---- sync with the Task Store ----

    async def load(self) -> bool:
        """Initial fetch on mount."""
        logger.debug("Loading tasks")
        return await self.refresh()

    async def refresh(self) -> bool:
        """Replace the collection with the Task Store's list. Failures keep the stale list."""
        result = await self.store.list_tasks()
        if not result.ok:
            logger.error(
                "Error fetching tasks (status=%s error=%s)", result.status_code, result.error
            )
            return False
        self.state.tasks = list(result.tasks)
        logger.debug("Fetched %d tasks", len(self.state.tasks))
        return True

    async def commit(self, op: Awaitable[StoreResult]) -> bool:
        """Await one mutation; on success re-fetch. Returns whether the mutation succeeded."""
        result = await op
        if not result.ok:
            return False
        await self.refresh()
        return True

    # ---- create ----

    def set_draft(self, text: str) -> None:
        self.state.draft = text

    async def submit_draft(self) -> bool:
        draft = self.state.draft
        if not draft.strip():
            logger.debug("Ignoring blank draft")
            return False
        ok = await self.commit(self.store.create_task(title=draft, completed=False))
        if ok:
            self.state.draft = ""
        return ok

    # ---- edit ----

    def begin_edit(self, task_id: TaskId) -> bool:
        task = find_task(self.state.tasks, task_id)
        if task is None:
            logger.warning("begin_edit: unknown task id=%s", task_id)
            return False
        self.state.edit = EditingTask(task_id=task.id if task.id is not None else task_id, buffer=task.title)
        return True

    def set_edit_text(self, text: str) -> None:
        edit = self.state.edit
        if not isinstance(edit, EditingTask):
            return
        self.state.edit = EditingTask(task_id=edit.task_id, buffer=text)

    def cancel_edit(self) -> None:
        self.state.edit = NO_ACTIVE_EDIT

    async def commit_edit(self) -> bool:
        """
        Save the active edit (explicit save or focus loss).

        Safe to call twice: without an active edit it does nothing.
        """
        edit = self.state.edit
        if not isinstance(edit, EditingTask):
            return False

        if not edit.buffer.strip():
            logger.debug("Ignoring blank edit for task id=%s", edit.task_id)
            return False

        # completed (and any extra fields) come from the list as it is now, not when the edit began.
        current = find_task(self.state.tasks, edit.task_id)
        if current is None:
            logger.warning("commit_edit: task id=%s is gone; dropping edit", edit.task_id)
            self.state.edit = NO_ACTIVE_EDIT
            return False

        # Taken out of state before awaiting so an overlapping save/blur finds nothing to commit.
        self.state.edit = NO_ACTIVE_EDIT
        ok = await self.commit(self.store.update_task(current.with_title(edit.buffer)))
        if not ok and isinstance(self.state.edit, NoActiveEdit):
            self.state.edit = edit
        return ok

    # ---- complete / delete ----

    async def toggle_complete(self, task_id: TaskId) -> bool:
        task = find_task(self.state.tasks, task_id)
        if task is None:
            logger.warning("toggle_complete: unknown task id=%s", task_id)
            return False
        return await self.commit(self.store.update_task(task.toggled()))

    async def delete(self, task_id: TaskId) -> bool:
        task = find_task(self.state.tasks, task_id)
        target = task.id if task is not None and task.id is not None else task_id
        return await self.commit(self.store.delete_task(target))

    # ---- local-only view state ----

    def set_filter(self, task_filter: TaskFilter | str) -> TaskFilter:
        self.state.filter = TaskFilter.parse(task_filter)
        return self.state.filter

    def visible_tasks(self) -> list[Task]:
        return filter_tasks(self.state.tasks, self.state.filter)

    def toggle_dark_mode(self) -> bool:
        self.state.dark_mode = not self.state.dark_mode
        return self.state.dark_mode
