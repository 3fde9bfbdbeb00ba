# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from clario.api.client import TodoApiClient
from clario.config import Settings
from clario.core.board import TaskBoard

from .fakes import FakeBackend, FakeTimerFactory

BASE_URL = "http://testserver/api"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Explicit settings object for tests.

    We build it directly rather than via Settings.from_env() to keep unit
    tests isolated from the developer's environment and .env file.
    """
    return Settings(
        app_name="clario-test",
        log_level="DEBUG",
        api_base_url=BASE_URL,
        http_timeout_seconds=1.0,
        message_ttl_seconds=5.0,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
def client(backend: FakeBackend) -> Iterator[TodoApiClient]:
    with TodoApiClient(BASE_URL, timeout=1.0, transport=backend.transport()) as c:
        yield c


@pytest.fixture()
def timers() -> FakeTimerFactory:
    return FakeTimerFactory()


@pytest.fixture()
def answers() -> list[bool]:
    """Queue of answers for the delete confirmation prompt (empty -> yes)."""
    return []


@pytest.fixture()
def prompts() -> list[str]:
    return []


@pytest.fixture()
def board(
    client: TodoApiClient,
    timers: FakeTimerFactory,
    answers: list[bool],
    prompts: list[str],
) -> Iterator[TaskBoard]:
    """TaskBoard wired to the in-memory backend through the real HTTP client."""

    def confirm(prompt: str) -> bool:
        prompts.append(prompt)
        return answers.pop(0) if answers else True

    b = TaskBoard(client, confirm=confirm, message_ttl=5.0, timer_factory=timers)
    yield b
    b.close()
