# src/cli_task_manager/tasks/task_errors.py

"""
Error hierarchy for task operations and persistence.

Everything raised on purpose by this package derives from TaskError, so the
CLI entrypoint can report it and exit non-zero without catching unrelated bugs.
"""

from __future__ import annotations

from pathlib import Path


class TaskError(Exception):
    """Base class for user-facing task errors."""


class ValidationError(TaskError):
    """Input rejected before touching the task list (e.g. empty description)."""


class NotFoundError(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"No task with id {task_id}")
        self.task_id = task_id


class StoreError(TaskError):
    """Persistence failure; always carries the file path involved."""

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)


class ReadError(StoreError):
    pass


class ParseError(StoreError):
    pass


class WriteError(StoreError):
    pass
