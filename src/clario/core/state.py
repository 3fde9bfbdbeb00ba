# src/clario/core/state.py

"""
Board state container.

BoardState is immutable; every transition is a pure function returning a new
state. Only TaskBoard (core/board.py) holds the "current" state.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from ..tasks.task_models import Draft, Task


@dataclass(frozen=True, slots=True)
class BoardState:
    tasks: tuple[Task, ...] = ()
    loading: bool = True
    error: str = ""
    success: str = ""
    editing: Task | None = None
    draft: Draft = field(default_factory=Draft)

    @property
    def is_editing(self) -> bool:
        return self.editing is not None

    def find_task(self, task_id: str) -> Task | None:
        for t in self.tasks:
            if t.id == task_id:
                return t
        return None


def begin_loading(state: BoardState) -> BoardState:
    return replace(state, loading=True)


def finish_loading(state: BoardState) -> BoardState:
    return replace(state, loading=False)


def tasks_loaded(state: BoardState, tasks: Iterable[Task]) -> BoardState:
    # Wholesale replace: the server list is the only source of truth.
    return replace(state, tasks=tuple(tasks))


def set_error(state: BoardState, message: str) -> BoardState:
    return replace(state, error=message)


def set_success(state: BoardState, message: str) -> BoardState:
    return replace(state, success=message)


def clear_messages(state: BoardState) -> BoardState:
    return replace(state, error="", success="")


def update_draft(state: BoardState, **fields: Any) -> BoardState:
    return replace(state, draft=state.draft.with_fields(**fields))


def reset_form(state: BoardState) -> BoardState:
    return replace(state, draft=Draft())


def start_edit(state: BoardState, task: Task) -> BoardState:
    return replace(state, editing=task, draft=Draft.from_task(task))


def cancel_edit(state: BoardState) -> BoardState:
    return replace(state, editing=None, draft=Draft())
