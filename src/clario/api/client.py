# src/clario/api/client.py

"""
HTTP client for the to-do backend.

Thin wrapper around httpx.Client:
- one method per backend route,
- network failures and non-2xx statuses raise TodoApiError,
- 2xx bodies are decoded into ApiResponse; a body that is not a JSON object
  is reported as success=False rather than raised.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.ports import ApiResponse, TodoApiError
from ..tasks.task_models import Draft, Task

logger = logging.getLogger(__name__)


def _decode_envelope(response: httpx.Response) -> dict[str, Any] | None:
    try:
        body = response.json()
    except ValueError:
        logger.debug("API response is not JSON (status=%s)", response.status_code)
        return None
    if not isinstance(body, dict):
        logger.debug("API response is not an object: %r", body)
        return None
    return body


def _task_or_none(raw: Any) -> Task | None:
    if isinstance(raw, dict):
        return Task.from_api(raw)
    return None


class TodoApiClient:
    """
    Client for `<base_url>/todos`.

    base_url is injected (see Settings.api_base_url); no authentication,
    pagination or filtering is supported by the backend.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            base_url=self._base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )
        logger.info("TodoApiClient ready base_url=%s", self._base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> TodoApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ---- low-level helpers ----

    def _request(self, method: str, path: str, *, json: Any = None) -> dict[str, Any] | None:
        try:
            response = self._http.request(method, path, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise TodoApiError(
                f"{method} {path} failed with HTTP {status}", status_code=status
            ) from e
        except httpx.HTTPError as e:
            raise TodoApiError(f"{method} {path} failed: {e}") from e

        body = _decode_envelope(response)
        logger.debug("API response: %s %s -> %s", method, path, body)
        return body

    @staticmethod
    def _envelope(body: dict[str, Any] | None, data: Any = None) -> ApiResponse:
        if body is None:
            return ApiResponse(success=False)
        return ApiResponse(
            success=body.get("success") is True,
            data=data,
            message=body.get("message"),
            error=body.get("error"),
        )

    # ---- routes ----

    def list_tasks(self) -> ApiResponse:
        body = self._request("GET", "/todos")
        if body is None:
            return self._envelope(None)

        raw = body.get("data")
        if raw is None:
            tasks: list[Task] = []
        elif isinstance(raw, list):
            tasks = [Task.from_api(item) for item in raw if isinstance(item, dict)]
        else:
            logger.warning("GET /todos returned non-list data: %r", raw)
            return ApiResponse(success=False, message=body.get("message"), error=body.get("error"))
        return self._envelope(body, tasks)

    def get_task(self, task_id: str) -> ApiResponse:
        body = self._request("GET", f"/todos/{task_id}")
        return self._envelope(body, _task_or_none(body.get("data")) if body else None)

    def create_task(self, draft: Draft) -> ApiResponse:
        body = self._request("POST", "/todos", json=draft.to_payload())
        return self._envelope(body, _task_or_none(body.get("data")) if body else None)

    def update_task(self, task_id: str, draft: Draft) -> ApiResponse:
        body = self._request("PUT", f"/todos/{task_id}", json=draft.to_payload())
        return self._envelope(body, _task_or_none(body.get("data")) if body else None)

    def delete_task(self, task_id: str) -> ApiResponse:
        return self._envelope(self._request("DELETE", f"/todos/{task_id}"))

    def toggle_task(self, task_id: str) -> ApiResponse:
        body = self._request("PATCH", f"/todos/{task_id}/toggle")
        return self._envelope(body, _task_or_none(body.get("data")) if body else None)
