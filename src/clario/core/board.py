# src/clario/core/board.py

"""
Task board controller.

Owns the current BoardState and turns user actions into backend calls:
- every mutation (create/update/delete/toggle) is one request followed by a
  full list refresh; local state is never patched in place,
- network/HTTP failures become one static user-facing message each and leave
  the previous data in place,
- a success=false (or malformed) response is a silent no-op,
- error/success messages clear themselves after `message_ttl` seconds; any
  change to either message restarts the countdown.

Concurrent actions are not coordinated: whichever refresh finishes last wins.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from ..config import DEFAULT_MESSAGE_TTL_SECONDS
from ..tasks.task_models import Task, sort_tasks_by_priority
from . import state as reducers
from .ports import ConfirmPrompt, TimerFactory, TimerHandle, TodoApiError, TodoClient
from .state import BoardState

logger = logging.getLogger(__name__)

MSG_FETCH_FAILED = "Failed to fetch todos"
MSG_SAVE_FAILED = "Failed to save todo"
MSG_DELETE_FAILED = "Failed to delete todo"
MSG_TOGGLE_FAILED = "Failed to toggle todo status"

MSG_CREATED = "Todo created successfully!"
MSG_UPDATED = "Todo updated successfully!"
MSG_DELETED = "Todo deleted successfully!"

DELETE_CONFIRM_PROMPT = "Are you sure you want to delete this todo?"

DRAFT_FIELDS = frozenset({"title", "description", "priority", "due_date"})


class TaskBoard:
    def __init__(
        self,
        client: TodoClient,
        *,
        confirm: ConfirmPrompt,
        message_ttl: float = DEFAULT_MESSAGE_TTL_SECONDS,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self._client = client
        self._confirm = confirm
        self._message_ttl = float(message_ttl)
        self._timer_factory = timer_factory

        # RLock: the message timer fires on its own thread.
        self._lock = threading.RLock()
        self._state = BoardState()
        self._timer: TimerHandle | None = None
        self._timer_generation = 0

    # ---- state access ----

    @property
    def state(self) -> BoardState:
        with self._lock:
            return self._state

    def visible_tasks(self) -> list[Task]:
        return sort_tasks_by_priority(self.state.tasks)

    def visible_task(self, position: int) -> Task | None:
        """1-based position in the displayed (priority-sorted) list."""
        tasks = self.visible_tasks()
        if 1 <= position <= len(tasks):
            return tasks[position - 1]
        return None

    def _apply(self, reducer: Callable[..., BoardState], *args: Any, **kwargs: Any) -> BoardState:
        with self._lock:
            old = self._state
            new = reducer(old, *args, **kwargs)
            self._state = new
            if (old.error, old.success) != (new.error, new.success):
                self._restart_message_timer()
            return new

    # ---- message timer ----

    def _restart_message_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

        self._timer_generation += 1
        if not (self._state.error or self._state.success):
            return

        generation = self._timer_generation
        timer = self._timer_factory(self._message_ttl, lambda: self._expire_messages(generation))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _expire_messages(self, generation: int) -> None:
        with self._lock:
            # cancel() cannot stop a timer whose callback already started.
            if generation != self._timer_generation:
                return
            self._timer = None
            self._state = reducers.clear_messages(self._state)

    def clear_messages(self) -> None:
        self._apply(reducers.clear_messages)

    def close(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._timer_generation += 1

    # ---- list ----

    def mount(self) -> bool:
        """Initial load; same as refresh()."""
        return self.refresh()

    def refresh(self) -> bool:
        self._apply(reducers.begin_loading)
        try:
            response = self._client.list_tasks()
            if response.success:
                tasks = response.data or ()
                self._apply(reducers.tasks_loaded, tasks)
                logger.debug("Todos set: %d item(s)", len(tasks))
            else:
                logger.info("List refresh returned success=false; keeping current list.")
            return response.success
        except TodoApiError as e:
            logger.warning("Error fetching todos: %s", e)
            self._apply(reducers.set_error, MSG_FETCH_FAILED)
            return False
        finally:
            self._apply(reducers.finish_loading)

    # ---- form ----

    def set_field(self, name: str, value: Any) -> None:
        if name not in DRAFT_FIELDS:
            raise ValueError(f"Unknown draft field: {name}")
        self._apply(reducers.update_draft, **{name: value})

    def reset_form(self) -> None:
        self._apply(reducers.reset_form)

    def start_edit(self, task: Task) -> None:
        logger.debug("Editing task id=%s", task.id)
        self._apply(reducers.start_edit, task)

    def cancel_edit(self) -> None:
        self._apply(reducers.cancel_edit)

    def submit(self) -> bool:
        """
        Create or update from the draft.

        Returns True only when the backend accepted the change. An empty title
        issues no request at all.
        """
        current = self.state
        draft = current.draft
        editing = current.editing

        if not draft.is_submittable():
            logger.debug("Submit ignored: title is empty.")
            return False

        try:
            if editing is not None:
                response = self._client.update_task(editing.id, draft)
            else:
                response = self._client.create_task(draft)
        except (TodoApiError, ValueError) as e:
            # ValueError: the draft due date could not be converted.
            logger.warning("Error saving todo: %s", e)
            self._apply(reducers.set_error, MSG_SAVE_FAILED)
            return False

        if not response.success:
            logger.info("Save returned success=false; nothing changed.")
            return False

        self._apply(reducers.set_success, MSG_UPDATED if editing is not None else MSG_CREATED)
        self._apply(reducers.cancel_edit)
        self.refresh()
        return True

    # ---- item actions ----

    def delete(self, task_id: str) -> bool:
        if not self._confirm(DELETE_CONFIRM_PROMPT):
            logger.debug("Delete of task id=%s declined.", task_id)
            return False

        try:
            response = self._client.delete_task(task_id)
        except TodoApiError as e:
            logger.warning("Error deleting todo: %s", e)
            self._apply(reducers.set_error, MSG_DELETE_FAILED)
            return False

        if not response.success:
            logger.info("Delete returned success=false for id=%s.", task_id)
            return False

        self._apply(reducers.set_success, MSG_DELETED)
        self.refresh()
        return True

    def toggle(self, task_id: str) -> bool:
        try:
            response = self._client.toggle_task(task_id)
        except TodoApiError as e:
            logger.warning("Error toggling todo: %s", e)
            self._apply(reducers.set_error, MSG_TOGGLE_FAILED)
            return False

        if not response.success:
            logger.info("Toggle returned success=false for id=%s.", task_id)
            return False

        self.refresh()
        return True
