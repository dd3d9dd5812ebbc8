# src/cli_task_manager/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Ids are unsigned 32-bit values in the file format.
MAX_TASK_ID = 2**32 - 1


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    @property
    def marker(self) -> str:
        return "[x]" if self.completed else "[ ]"

    def to_record(self) -> dict[str, Any]:
        # Key order is the on-disk field order.
        return {
            "id": self.id,
            "description": self.description,
            "completed": self.completed,
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """
        Build a Task from one decoded JSON record.

        Raises ValueError describing the first problem found; unknown keys are ignored.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        for key in ("id", "description", "completed"):
            if key not in raw:
                raise ValueError(f"task record is missing field {key!r}")

        task_id = raw["id"]
        # bool is a subclass of int; reject it explicitly.
        if isinstance(task_id, bool) or not isinstance(task_id, int) or not 0 <= task_id <= MAX_TASK_ID:
            raise ValueError(f"invalid task id {task_id!r}")

        description = raw["description"]
        if not isinstance(description, str):
            raise ValueError(f"task {task_id}: description must be a string")

        completed = raw["completed"]
        if not isinstance(completed, bool):
            raise ValueError(f"task {task_id}: completed must be true or false")

        return cls(id=task_id, description=description, completed=completed)
