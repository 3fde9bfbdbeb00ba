# src/clario/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

from .dates import ISO_DATE_FORMAT, date_input_to_timestamp, safe_format_date


class Priority(StrEnum):
    """
    Task priority as stored by the backend.

    Display order is by rank: high first, low last.
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @classmethod
    def from_raw(cls, raw: Any) -> Priority:
        if not raw:
            return cls.MEDIUM
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.MEDIUM


_PRIORITY_RANK: dict[Priority, int] = {
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}


@dataclass(slots=True, frozen=True)
class Task:
    """A to-do record owned by the backend and cached by the client."""

    id: str
    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    due_date: str | None = None
    completed: bool = False
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> Task:
        return cls(
            id=str(raw.get("id", "")),
            title=str(raw.get("title") or ""),
            description=str(raw.get("description") or ""),
            priority=Priority.from_raw(raw.get("priority")),
            due_date=raw.get("due_date") or None,
            completed=bool(raw.get("completed", False)),
            created_at=raw.get("created_at") or None,
            updated_at=raw.get("updated_at") or None,
        )


@dataclass(slots=True, frozen=True)
class Draft:
    """
    Form buffer for a task being created or edited.

    due_date holds date-input text (yyyy-mm-dd) or "" when unset.
    """

    title: str = ""
    description: str = ""
    priority: Priority = Priority.MEDIUM
    due_date: str = ""

    @classmethod
    def from_task(cls, task: Task) -> Draft:
        return cls(
            title=task.title,
            description=task.description,
            priority=task.priority,
            due_date=safe_format_date(task.due_date, ISO_DATE_FORMAT) if task.due_date else "",
        )

    def with_fields(self, **fields: Any) -> Draft:
        if "priority" in fields:
            fields["priority"] = Priority.from_raw(fields["priority"])
        return replace(self, **fields)

    def is_submittable(self) -> bool:
        return bool(self.title.strip())

    def to_payload(self) -> dict[str, Any]:
        """
        Request body for POST/PUT /todos.

        Raises ValueError when due_date is not a valid yyyy-mm-dd date.
        """
        return {
            "title": self.title,
            "description": self.description,
            "priority": self.priority.value,
            "due_date": date_input_to_timestamp(self.due_date) if self.due_date else None,
        }


def sort_tasks_by_priority(tasks: Iterable[Task]) -> list[Task]:
    # sorted() is stable, so equal priorities keep their server order.
    return sorted(tasks, key=lambda t: t.priority.rank)
