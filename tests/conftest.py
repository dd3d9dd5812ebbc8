# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from cli_task_manager.config import Settings
from cli_task_manager.tasks.task_models import Task
from cli_task_manager.tasks.task_store import TaskStore


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    # Nested on purpose: save() has to create the data directory.
    return tmp_path / "data" / "tasks.json"


@pytest.fixture()
def settings(tmp_path: Path, tasks_path: Path) -> Settings:
    """
    Settings pointing at a per-test temp directory.

    Built directly instead of from_env() so the developer's real task file
    and environment never leak into tests.
    """
    return Settings(
        log_level="WARNING",
        log_file=None,
        data_dir=tasks_path.parent,
        tasks_path=tasks_path,
    )


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    return TaskStore(tasks_path)


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task(id=1, description="buy milk", completed=True),
        Task(id=3, description="call mum", completed=False),
        Task(id=4, description="écrire le rapport", completed=False),
    ]
