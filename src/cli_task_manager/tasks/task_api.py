# src/cli_task_manager/tasks/task_api.py

"""
In-memory task operations.

Every function works on a list loaded by TaskStore and mutates it in place
(list_tasks only reads). Persisting the result is the caller's job.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from .task_errors import NotFoundError, ValidationError
from .task_models import Task

Emitter = Callable[[str], None]

NO_TASKS_MESSAGE = "No tasks found."
ALL_FILTERED_MESSAGE = "No tasks to show (use --all to include completed)."

logger = logging.getLogger(__name__)


def next_task_id(tasks: list[Task]) -> int:
    """Max existing id + 1. Gaps left by removals are never refilled."""
    return max((t.id for t in tasks), default=0) + 1


def add_task(tasks: list[Task], description: str) -> Task:
    text = description.strip()
    if not text:
        raise ValidationError("Task description cannot be empty")

    task = Task(id=next_task_id(tasks), description=text, completed=False)
    tasks.append(task)
    logger.debug("Task added id=%s", task.id)
    return task


def format_task(task: Task) -> str:
    return f"{task.marker} {task.id}: {task.description}"


def visible_lines(tasks: list[Task], include_completed: bool) -> Iterator[str]:
    for task in tasks:
        if include_completed or not task.completed:
            yield format_task(task)


def list_tasks(tasks: list[Task], include_completed: bool, emit: Emitter = print) -> None:
    shown = False
    for line in visible_lines(tasks, include_completed):
        emit(line)
        shown = True

    if not shown:
        emit(NO_TASKS_MESSAGE if not tasks else ALL_FILTERED_MESSAGE)


def mark_done(tasks: list[Task], task_id: int) -> Task:
    for task in tasks:
        if task.id == task_id:
            task.completed = True
            logger.debug("Task completed id=%s", task_id)
            return task
    raise NotFoundError(task_id)


def remove_task(tasks: list[Task], task_id: int) -> None:
    before = len(tasks)
    kept = [t for t in tasks if t.id != task_id]
    if len(kept) == before:
        raise NotFoundError(task_id)
    tasks[:] = kept
    logger.debug("Task removed id=%s", task_id)
