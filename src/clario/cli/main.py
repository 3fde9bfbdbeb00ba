# src/clario/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the TaskBoard, loads the task list once, then runs
the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_board, create_client
from ..config import get_settings
from ..connectors.console_connector import make_console_confirm, run_console_loop
from ..core.board import TaskBoard
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(board: TaskBoard, client) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        board.close()
    except Exception:
        logger.debug("Board close failed.", exc_info=True)

    try:
        client.close()
    except Exception:
        logger.debug("HTTP client close failed.", exc_info=True)


def main() -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.info("Starting %s (backend=%s)...", settings.app_name, settings.api_base_url)

    client = create_client(settings=settings)
    board = create_board(confirm=make_console_confirm(), settings=settings, client=client)

    try:
        board.mount()
        run_console_loop(board, app_name=settings.app_name)
    finally:
        _shutdown(board, client)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
