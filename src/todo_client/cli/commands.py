# src/todo_client/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..controller import TaskListController
from ..core.state import EditingTask
from ..ui.render import render_screen

CommandHandler = Callable[[TaskListController, list[str]], Awaitable[str]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(self, controller: TaskListController, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return await handler(controller, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def screen_text(controller: TaskListController) -> str:
    return "\n".join(render_screen(controller.state))


async def submit_line(controller: TaskListController, text: str) -> str:
    """
    Plain (non-command) input.

    While editing, the line replaces the edit buffer and the edit is committed
    (the console's "input lost focus"). Otherwise it becomes the draft and is submitted.
    """
    if isinstance(controller.state.edit, EditingTask):
        controller.set_edit_text(text)
        ok = await controller.commit_edit()
        return screen_text(controller) if ok else "Edit not saved."

    controller.set_draft(text)
    ok = await controller.submit_draft()
    return screen_text(controller) if ok else "Task not added."


async def cmd_help(controller: TaskListController, args: list[str]) -> str:
    return registry.build_help()


async def cmd_list(controller: TaskListController, args: list[str]) -> str:
    return screen_text(controller)


async def cmd_refresh(controller: TaskListController, args: list[str]) -> str:
    await controller.refresh()
    return screen_text(controller)


async def cmd_add(controller: TaskListController, args: list[str]) -> str:
    if args:
        controller.set_draft(" ".join(args))
    ok = await controller.submit_draft()
    return screen_text(controller) if ok else "Task not added."


async def cmd_edit(controller: TaskListController, args: list[str]) -> str:
    if not args:
        return "Usage: /edit <id>"
    if not controller.begin_edit(args[0]):
        return f"No task with id {args[0]}."
    edit = controller.state.edit
    buffer = edit.buffer if isinstance(edit, EditingTask) else ""
    return f"Editing #{args[0]}: {buffer}\nType the new title (or /save, /cancel)."


async def cmd_save(controller: TaskListController, args: list[str]) -> str:
    if not isinstance(controller.state.edit, EditingTask):
        return "Nothing is being edited."
    ok = await controller.commit_edit()
    return screen_text(controller) if ok else "Edit not saved."


async def cmd_cancel(controller: TaskListController, args: list[str]) -> str:
    controller.cancel_edit()
    return screen_text(controller)


async def cmd_done(controller: TaskListController, args: list[str]) -> str:
    if not args:
        return "Usage: /done <id>"
    await controller.toggle_complete(args[0])
    return screen_text(controller)


async def cmd_delete(controller: TaskListController, args: list[str]) -> str:
    if not args:
        return "Usage: /del <id>"
    await controller.delete(args[0])
    return screen_text(controller)


async def cmd_filter(controller: TaskListController, args: list[str]) -> str:
    if not args:
        return f"Filter is {controller.state.filter.value}. Use /filter all|completed|pending."
    try:
        controller.set_filter(args[0])
    except ValueError as e:
        logger.debug("Rejected filter %r", args[0])
        return str(e)
    return screen_text(controller)


async def cmd_dark(controller: TaskListController, args: list[str]) -> str:
    controller.toggle_dark_mode()
    return screen_text(controller)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("refresh", cmd_refresh, help_text="Re-fetch tasks from the server.")
registry.register("add", cmd_add, help_text="Add a task: /add <title>.", aliases=["a"])
registry.register("edit", cmd_edit, help_text="Start editing a task: /edit <id>.", aliases=["e"])
registry.register("save", cmd_save, help_text="Save the task being edited.", aliases=["s"])
registry.register("cancel", cmd_cancel, help_text="Stop editing without saving.")
registry.register("done", cmd_done, help_text="Toggle complete: /done <id>.", aliases=["d"])
registry.register("del", cmd_delete, help_text="Delete a task: /del <id>.", aliases=["rm"])
registry.register(
    "filter", cmd_filter, help_text="Filter tasks: /filter all | completed | pending.", aliases=["f"]
)
registry.register("dark", cmd_dark, help_text="Toggle dark mode.")
