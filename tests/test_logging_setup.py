# tests/test_logging_setup.py

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from pathlib import Path

from cli_task_manager.logging_setup import _ConsoleNoiseFilter, setup_logging


@contextlib.contextmanager
def _preserved_root_logger() -> Iterator[logging.Logger]:
    """Undo setup_logging() so pytest's own capture handlers survive the test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        yield root
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            if h not in handlers:
                h.close()
        for h in handlers:
            root.addHandler(h)
        root.setLevel(level)
        logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_drops_library_noise() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("cli_task_manager.tasks.task_store", logging.DEBUG))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_file_handler_gets_debug_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "tasks.log"

    with _preserved_root_logger() as root:
        setup_logging(console_level=logging.WARNING, log_file=log_file)
        logging.getLogger("cli_task_manager.test").debug("hello file")
        for h in root.handlers:
            h.flush()

    assert "DEBUG cli_task_manager.test: hello file" in log_file.read_text("utf-8")


def test_setup_logging_replaces_previous_handlers() -> None:
    with _preserved_root_logger() as root:
        setup_logging()
        setup_logging()
        assert len(root.handlers) == 1
