# src/clario/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the HTTP client and the confirmation prompt into a TaskBoard.
"""

from __future__ import annotations

import logging

from ..api.client import TodoApiClient
from ..config import Settings, get_settings
from ..core.board import TaskBoard
from ..core.ports import ConfirmPrompt, TodoClient

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_client(*, settings: Settings | None = None) -> TodoApiClient:
    if settings is None:
        settings = get_settings()
    return TodoApiClient(settings.api_base_url, timeout=settings.http_timeout_seconds)


def create_board(
    *,
    confirm: ConfirmPrompt,
    settings: Settings | None = None,
    client: TodoClient | None = None,
) -> TaskBoard:
    """
    Create a TaskBoard from the provided settings.

    Keeping settings and client injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to
    get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if client is None:
        client = create_client(settings=settings)

    return TaskBoard(
        client,
        confirm=confirm,
        message_ttl=settings.message_ttl_seconds,
    )
