# src/clario/tasks/rendering.py

"""
Plain-text rendering of the board for the console connector.

Pure functions of BoardState; nothing here talks to the backend.
"""

from __future__ import annotations

from ..core.state import BoardState
from .dates import DISPLAY_DATE_FORMAT, safe_format_date
from .task_models import Task, sort_tasks_by_priority

LOADING_TEXT = "Loading todos..."
EMPTY_TITLE = "No tasks yet"
EMPTY_HINT = "Create your first task to get started!"


def count_badge(n: int) -> str:
    return f"{n} task{'' if n == 1 else 's'}"


def render_task(position: int, task: Task) -> str:
    mark = "[x]" if task.completed else "[ ]"
    title = f"~{task.title}~" if task.completed else task.title
    lines = [f"{position:>2}. {mark} {title}  [{task.priority.value.upper()}]"]

    if task.description:
        lines.append(f"      {task.description}")

    dates: list[str] = []
    if task.due_date:
        dates.append(f"Due: {safe_format_date(task.due_date, DISPLAY_DATE_FORMAT)}")
    dates.append(f"Created: {safe_format_date(task.created_at, DISPLAY_DATE_FORMAT)}")
    lines.append("      " + " | ".join(dates))

    toggle_label = "Completed" if task.completed else "Mark Complete"
    lines.append(f"      /toggle {position} ({toggle_label}) · /edit {position} · /delete {position}")
    return "\n".join(lines)


def render_task_list(state: BoardState) -> str:
    if state.loading:
        return LOADING_TEXT

    if not state.tasks:
        return "Your Tasks\n\n" + f"  {EMPTY_TITLE}\n  {EMPTY_HINT}"

    header = f"Your Tasks ({count_badge(len(state.tasks))})"
    items = [render_task(i, t) for i, t in enumerate(sort_tasks_by_priority(state.tasks), start=1)]
    return header + "\n\n" + "\n\n".join(items)


def render_form(state: BoardState) -> str:
    d = state.draft
    heading = "Edit Task" if state.is_editing else "Add New Task"
    action = "Update Task" if state.is_editing else "Add Task"
    lines = [
        heading,
        f"  Title *:     {d.title}",
        f"  Description: {d.description}",
        f"  Priority:    {d.priority.value}",
        f"  Due Date:    {d.due_date or '-'}",
        f"  /submit ({action})" + (" · /cancel" if state.is_editing else ""),
    ]
    return "\n".join(lines)


def render_messages(state: BoardState) -> str:
    lines: list[str] = []
    if state.error:
        lines.append(f"[ERROR] {state.error}")
    if state.success:
        lines.append(f"[OK] {state.success}")
    return "\n".join(lines)
