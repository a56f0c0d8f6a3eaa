# src/todo_client/connectors/console_connector.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from collections.abc import Awaitable, Callable

from ..cli.commands import registry as command_registry
from ..cli.commands import screen_text, submit_line
from ..controller import TaskListController

logger = logging.getLogger(__name__)

InputFn = Callable[[str], Awaitable[str]]
OutputFn = Callable[[str], None]

PROMPT = ">>> "


def _settle(fut: asyncio.Future[str], line: str | None, exc: Exception | None) -> None:
    if fut.done():
        return
    if exc is not None:
        fut.set_exception(exc)
    else:
        fut.set_result(line or "")


def _input_worker(prompt: str, loop: asyncio.AbstractEventLoop, fut: asyncio.Future[str]) -> None:
    try:
        line, exc = input(prompt), None
    except Exception as e:
        line, exc = None, e
    # The loop may already be closed if the app exited while we were blocked.
    with contextlib.suppress(RuntimeError):
        loop.call_soon_threadsafe(_settle, fut, line, exc)


async def read_stdin(prompt: str) -> str:
    """
    Read one line without blocking the event loop.

    input() runs in a daemon thread rather than the default executor, so
    asyncio.run() never waits on a thread stuck at the prompt after Ctrl-C.
    """
    loop = asyncio.get_running_loop()
    fut: asyncio.Future[str] = loop.create_future()
    threading.Thread(
        target=_input_worker, args=(prompt, loop, fut), name="console-input", daemon=True
    ).start()
    return await fut


async def run_console_loop(
    controller: TaskListController,
    *,
    read_line: InputFn = read_stdin,
    write: OutputFn = print,
) -> None:
    logger.info("Console connector started.")

    await controller.load()
    write(screen_text(controller))
    write("Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = (await read_line(PROMPT)).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except asyncio.CancelledError:
            logger.info("Console interrupted, exiting.")
            raise

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = await command_registry.handle(controller, user_input)
            if reply is None:
                reply = await submit_line(controller, user_input)
        except Exception:
            logger.exception("Console handler crashed.")
            reply = "Internal error while handling input."

        write(reply)

    logger.info("Console connector finished.")
