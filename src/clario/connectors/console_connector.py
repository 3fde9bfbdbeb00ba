# src/clario/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.board import TaskBoard
from ..tasks.rendering import render_form, render_messages, render_task_list

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def make_console_confirm(input_fn: InputFn = input) -> Callable[[str], bool]:
    """Yes/no prompt used by the board before deleting a task."""

    def confirm(prompt: str) -> bool:
        try:
            answer = input_fn(f"{prompt} [y/N] ")
        except (EOFError, KeyboardInterrupt):
            print()
            return False
        return answer.strip().lower() in ("y", "yes")

    return confirm


def run_console_loop(board: TaskBoard, *, app_name: str = "clario", input_fn: InputFn = input) -> None:
    logger.info("Console connector started.")
    _print_ts(f"[{app_name.upper()}] Organize your tasks efficiently.")
    _print_ts("Use /help for commands. Use /exit to quit.\n")

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    print(render_task_list(board.state))
    msgs = render_messages(board.state)
    if msgs:
        print(msgs)
    print()
    print(render_form(board.state))

    while True:
        try:
            user_input = input_fn(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            cmd_response = command_registry.handle(board, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response is None:
            cmd_response = "Commands start with '/'. Use /help to list them."

        print(f"[{_ts_local()}] {cmd_response}\n")

    logger.info("Console connector finished.")
