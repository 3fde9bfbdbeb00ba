# src/clario/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.board import TaskBoard
from ..tasks.dates import parse_date_input
from ..tasks.rendering import render_form, render_messages, render_task_list
from ..tasks.task_models import Priority, Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[TaskBoard, list[str]], str]
CommandHandler3 = Callable[[TaskBoard, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        board: TaskBoard,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(board, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(board, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _with_messages(board: TaskBoard, text: str) -> str:
    msgs = render_messages(board.state)
    return f"{msgs}\n{text}" if msgs else text


def _resolve_position(board: TaskBoard, args: list[str], usage: str) -> Task | str:
    """Return the task at the 1-based display position in args[0], or an error reply."""
    if len(args) != 1:
        return usage
    try:
        position = int(args[0])
    except ValueError:
        return usage
    task = board.visible_task(position)
    if task is None:
        return f"No task at position {position}. Use /list to see positions."
    return task


def cmd_help(board: TaskBoard, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(board: TaskBoard, args: list[str]) -> str:
    return _with_messages(board, render_task_list(board.state))


def cmd_refresh(board: TaskBoard, args: list[str], emit: CommandEmitter | None = None) -> str:
    if emit:
        emit("Loading todos...")
    board.refresh()
    return _with_messages(board, render_task_list(board.state))


def cmd_form(board: TaskBoard, args: list[str]) -> str:
    return render_form(board.state)


def cmd_title(board: TaskBoard, args: list[str]) -> str:
    if not args:
        return "Usage: /title <text>"
    board.set_field("title", " ".join(args))
    return render_form(board.state)


def cmd_desc(board: TaskBoard, args: list[str]) -> str:
    """
    /desc <text>  -> set description
    /desc         -> clear description
    """
    board.set_field("description", " ".join(args))
    return render_form(board.state)


def cmd_priority(board: TaskBoard, args: list[str]) -> str:
    allowed = [p.value for p in Priority]
    if len(args) != 1 or args[0].lower() not in allowed:
        return f"Usage: /priority {'|'.join(allowed)}"
    board.set_field("priority", args[0].lower())
    return render_form(board.state)


def cmd_due(board: TaskBoard, args: list[str]) -> str:
    """
    /due yyyy-mm-dd  -> set due date
    /due none        -> clear due date
    """
    if len(args) != 1:
        return "Usage: /due yyyy-mm-dd | /due none"
    raw = args[0]
    if raw.lower() in ("none", "clear", "-"):
        board.set_field("due_date", "")
        return render_form(board.state)
    try:
        parse_date_input(raw)
    except ValueError:
        return f"Invalid date: {raw}. Use yyyy-mm-dd."
    board.set_field("due_date", raw)
    return render_form(board.state)


def cmd_submit(board: TaskBoard, args: list[str]) -> str:
    if not board.state.draft.is_submittable():
        return "Title is required. Set it with /title <text>."
    board.submit()
    return _with_messages(board, render_task_list(board.state))


def cmd_edit(board: TaskBoard, args: list[str]) -> str:
    task = _resolve_position(board, args, "Usage: /edit <n>")
    if isinstance(task, str):
        return task
    board.start_edit(task)
    return render_form(board.state)


def cmd_cancel(board: TaskBoard, args: list[str]) -> str:
    was_editing = board.state.is_editing
    board.cancel_edit()
    return "Edit cancelled." if was_editing else "Form cleared."


def cmd_toggle(board: TaskBoard, args: list[str]) -> str:
    task = _resolve_position(board, args, "Usage: /toggle <n>")
    if isinstance(task, str):
        return task
    board.toggle(task.id)
    return _with_messages(board, render_task_list(board.state))


def cmd_delete(board: TaskBoard, args: list[str]) -> str:
    task = _resolve_position(board, args, "Usage: /delete <n>")
    if isinstance(task, str):
        return task
    if not board.delete(task.id) and not board.state.error:
        return "Nothing deleted."
    return _with_messages(board, render_task_list(board.state))


def cmd_status(board: TaskBoard, args: list[str]) -> str:
    s = board.state
    mode = "EDIT" if s.is_editing else "ADD"
    msgs = render_messages(s) or "  (no messages)"
    return (
        "Status:\n"
        f"  Tasks loaded: {len(s.tasks)}\n"
        f"  Form mode: {mode}\n"
        f"{msgs}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks sorted by priority.", aliases=["ls"])
registry.register("refresh", cmd_refresh, help_text="Re-fetch all tasks from the backend.")
registry.register("form", cmd_form, help_text="Show the add/edit form.")
registry.register("title", cmd_title, help_text="Set the form title: /title <text>.")
registry.register("desc", cmd_desc, help_text="Set the form description: /desc <text>.")
registry.register("priority", cmd_priority, help_text="Set the form priority: /priority high|medium|low.")
registry.register("due", cmd_due, help_text="Set the form due date: /due yyyy-mm-dd | /due none.")
registry.register("submit", cmd_submit, help_text="Add the task (or save the edit).", aliases=["save"])
registry.register("edit", cmd_edit, help_text="Load task <n> into the form: /edit <n>.")
registry.register("cancel", cmd_cancel, help_text="Leave edit mode and clear the form.")
registry.register("toggle", cmd_toggle, help_text="Flip completion of task <n>: /toggle <n>.")
registry.register("delete", cmd_delete, help_text="Delete task <n> after confirmation.", aliases=["rm"])
registry.register("status", cmd_status, help_text="Show board status and current messages.")
