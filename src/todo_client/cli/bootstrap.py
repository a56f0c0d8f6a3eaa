# src/todo_client/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the concrete Task Store client into the controller.
"""

from __future__ import annotations

import logging

import httpx

from ..config import get_settings
from ..controller import TaskListController
from ..store.http_store import HttpTaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_controller(
    *,
    settings=None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TaskListController:
    """
    Build a TaskListController for the configured Task Store.

    Keeping settings (and the HTTP transport) injectable makes the app easy to
    point at a mock endpoint. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = HttpTaskStore(
        settings.base_url,
        timeout_seconds=getattr(settings, "request_timeout_seconds", None),
        transport=transport,
    )
    logger.info("Task Store: %s", store.base_url)
    return TaskListController(store)
