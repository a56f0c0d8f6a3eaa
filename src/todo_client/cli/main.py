# src/todo_client/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the controller, then runs the console REPL
on an asyncio event loop.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_controller
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _shutdown(controller) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        aclose = getattr(controller.store, "aclose", None)
        if aclose is not None:
            await aclose()
    except Exception:
        logger.debug("Task Store close failed.", exc_info=True)


async def _run(settings) -> None:
    controller = create_controller(settings=settings)
    try:
        await run_console_loop(controller)
    finally:
        await _shutdown(controller)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        asyncio.run(_run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")

    logger.info("Bye.")


if __name__ == "__main__":
    main()
