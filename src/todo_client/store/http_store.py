# src/todo_client/store/http_store.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.ports import ListResult, StoreResult
from ..tasks.task_models import Task, TaskId

logger = logging.getLogger(__name__)

TODOS_PATH = "/todos/"


def _make_timeout_obj(timeout_s: float | None) -> httpx.Timeout:
    """None disables every httpx timeout (httpx otherwise defaults to 5s)."""
    if timeout_s is None:
        return httpx.Timeout(None)
    return httpx.Timeout(timeout_s)


def _task_path(task_id: TaskId) -> str:
    return f"{TODOS_PATH}{task_id}"


class HttpTaskStore:
    """
    Task Store client over httpx.AsyncClient.

    Every method returns a result value instead of raising:
    - transport errors -> StoreResult(ok=False, status_code=None, error=...)
    - non-2xx          -> StoreResult(ok=False, status_code=<code>)
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=_make_timeout_obj(timeout_seconds),
            transport=transport,
        )
        logger.debug("HttpTaskStore ready base_url=%s", self._base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpTaskStore:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ---- low-level helpers ----

    async def _send(self, method: str, path: str, *, json: dict[str, Any] | None = None) -> httpx.Response | StoreResult:
        try:
            return await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning("Task Store %s %s failed: %s", method, path, e.__class__.__name__)
            return StoreResult(ok=False, error=f"{e.__class__.__name__}: {e}")

    async def _mutate(self, method: str, path: str, *, json: dict[str, Any] | None = None) -> StoreResult:
        resp = await self._send(method, path, json=json)
        if isinstance(resp, StoreResult):
            return resp
        if not resp.is_success:
            logger.info("Task Store rejected %s %s status=%s", method, path, resp.status_code)
            return StoreResult(ok=False, status_code=resp.status_code)
        return StoreResult(ok=True, status_code=resp.status_code)

    # ---- todos resource ----

    async def list_tasks(self) -> ListResult:
        resp = await self._send("GET", TODOS_PATH)
        if isinstance(resp, StoreResult):
            return ListResult(ok=False, error=resp.error)

        if not resp.is_success:
            logger.warning("Task Store list failed status=%s", resp.status_code)
            return ListResult(ok=False, status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            logger.warning("Task Store list returned invalid JSON: %s", e)
            return ListResult(ok=False, status_code=resp.status_code, error="invalid JSON")

        if not isinstance(data, list):
            logger.warning("Task Store list returned %s, expected array", type(data).__name__)
            return ListResult(ok=False, status_code=resp.status_code, error="expected JSON array")

        try:
            tasks = [Task.from_json(item) for item in data]
        except ValueError as e:
            logger.warning("Task Store list returned a malformed task: %s", e)
            return ListResult(ok=False, status_code=resp.status_code, error=str(e))

        return ListResult(ok=True, status_code=resp.status_code, tasks=tasks)

    async def create_task(self, *, title: str, completed: bool = False) -> StoreResult:
        return await self._mutate("POST", TODOS_PATH, json={"title": title, "completed": completed})

    async def update_task(self, task: Task) -> StoreResult:
        if task.id is None:
            raise ValueError("Cannot update a task that has no server-assigned id")
        return await self._mutate("PUT", _task_path(task.id), json=task.to_json())

    async def delete_task(self, task_id: TaskId) -> StoreResult:
        return await self._mutate("DELETE", _task_path(task_id))
