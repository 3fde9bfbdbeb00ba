# src/clario/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The board depends on Protocols instead of concrete implementations.
This keeps the HTTP client and the timer swappable and makes testing easier.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from ..tasks.task_models import Draft

ConfirmPrompt = Callable[[str], bool]
# Asks the user a yes/no question; True means "go ahead".


class TodoApiError(RuntimeError):
    """Network or HTTP-level failure talking to the backend."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True, frozen=True)
class ApiResponse:
    """
    Envelope returned by every backend route: {success, message?, data?, error?}.

    success=False covers both an explicit failure body and a malformed body.
    """

    success: bool
    data: Any = None
    message: str | None = None
    error: str | None = None


class TodoClient(Protocol):
    """REST client for the /todos resource. Raises TodoApiError on network/HTTP failure."""

    def list_tasks(self) -> ApiResponse: ...
    def get_task(self, task_id: str) -> ApiResponse: ...
    def create_task(self, draft: Draft) -> ApiResponse: ...
    def update_task(self, task_id: str, draft: Draft) -> ApiResponse: ...
    def delete_task(self, task_id: str) -> ApiResponse: ...
    def toggle_task(self, task_id: str) -> ApiResponse: ...


class TimerHandle(Protocol):
    """The subset of threading.Timer the board needs."""

    daemon: bool

    def start(self) -> None: ...
    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]
