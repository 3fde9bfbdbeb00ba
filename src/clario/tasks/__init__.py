"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Draft, Priority) + priority ordering
- dates.py: safe date formatting for form pre-fill and display
- rendering.py: console rendering of the task list and the form panel
"""

from .task_models import Draft, Priority, Task, sort_tasks_by_priority

__all__ = ["Draft", "Priority", "Task", "sort_tasks_by_priority"]
