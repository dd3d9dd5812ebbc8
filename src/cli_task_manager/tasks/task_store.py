# src/cli_task_manager/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_errors import ParseError, ReadError, WriteError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file task store.

    The whole list is the unit of persistence:
    - load() reads every task, save() rewrites every task
    - a missing or blank file is an empty list

    Crash-safety:
    - save() writes a sibling "<name>.tmp" (e.g. "tasks.json.tmp"), fsyncs it,
      then os.replace()s the target, so readers see either the old file or the new one,
      never a truncated mix
    - no cross-process locking: two concurrent savers race and the last rename wins
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def temp_path(self) -> Path:
        # "tasks.json" -> "tasks.json.tmp"; never equal to the target, whatever its suffix.
        return self._path.with_name(self._path.name + ".tmp")

    # ---- public API ----

    def load(self) -> list[Task]:
        path = self._path
        try:
            data = path.read_text("utf-8")
        except FileNotFoundError:
            logger.debug("No tasks file at %s, starting empty", path)
            return []
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Failed to read tasks file at {path}: {exc}", path) from exc

        if not data.strip():
            logger.debug("Tasks file %s is blank, starting empty", path)
            return []

        try:
            raw = json.loads(data)
            if not isinstance(raw, list):
                raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
            tasks = [Task.from_record(item) for item in raw]
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError too.
            raise ParseError(
                f"Failed to parse tasks file at {path}. Ensure it contains valid JSON. ({exc})",
                path,
            ) from exc

        logger.debug("Loaded %d tasks from %s", len(tasks), path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        path = self._path
        parent = path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteError(f"Failed to create data directory at {parent}: {exc}", path) from exc

        records = [t.to_record() for t in tasks]
        data = json.dumps(records, ensure_ascii=False, indent=2) + "\n"

        tmp = self.temp_path
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
        except OSError as exc:
            raise WriteError(f"Failed to write tasks to {tmp}: {exc}", path) from exc

        try:
            os.replace(tmp, path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                os.remove(tmp)
            raise WriteError(f"Failed to replace {path} with {tmp}: {exc}", path) from exc

        logger.debug("Saved %d tasks to %s", len(records), path)
