# src/todo_client/ui/render.py

from __future__ import annotations

from dataclasses import dataclass

from ..core.state import EditingTask, ViewState
from ..tasks.task_filter import filter_tasks
from ..tasks.task_models import Task, TaskFilter, same_id

HEADER = "📝 Todo List App"
INPUT_PLACEHOLDER = "Add new task..."


@dataclass(frozen=True, slots=True)
class Palette:
    name: str
    switch_on: str
    switch_off: str


LIGHT = Palette(name="light", switch_on="[on ]", switch_off="[ off]")
DARK = Palette(name="dark", switch_on="[ON ]", switch_off="[ OFF]")


def palette_for(state: ViewState) -> Palette:
    return DARK if state.dark_mode else LIGHT


def _filter_bar(active: TaskFilter) -> str:
    parts = []
    for f in TaskFilter:
        parts.append(f"[{f.label}]" if f is active else f" {f.label} ")
    return "  ".join(parts)


def _task_lines(task: Task, state: ViewState) -> list[str]:
    edit = state.edit
    buffer = edit.buffer if isinstance(edit, EditingTask) and same_id(edit.task_id, task.id) else None
    editing = buffer is not None

    mark = "x" if task.completed else " "
    if editing:
        title = f"> {buffer}_"
    elif task.completed:
        title = f"~~{task.title}~~"
    else:
        title = task.title

    complete_label = "✅ Completed" if task.completed else "✅ Complete"
    edit_label = "💾 Save" if editing else "✏️ Edit"

    return [
        f"[{mark}] #{task.id} {title}",
        f"      {complete_label} | {edit_label} | 🗑 Delete",
    ]


def render_screen(state: ViewState) -> list[str]:
    """Lines of the single screen, top to bottom."""
    pal = palette_for(state)
    switch = pal.switch_on if state.dark_mode else pal.switch_off

    lines = [
        f"{HEADER}  ({pal.name})",
        f"{state.draft or INPUT_PLACEHOLDER}  ➕",
        f"Dark Mode {switch}",
        _filter_bar(state.filter),
        "",
    ]

    visible = filter_tasks(state.tasks, state.filter)
    if not visible:
        lines.append("(no tasks)")
        return lines

    for task in visible:
        lines.extend(_task_lines(task, state))
    return lines
