# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_widget.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_console_filter() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("task_widget.widget.render", logging.INFO))
    assert not f.filter(_record("task_widget.widget.sinks", logging.DEBUG))
    assert f.filter(_record("task_widget.widget.task_source", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("asyncio", logging.WARNING))
    assert f.filter(_record("asyncio", logging.ERROR))


def test_setup_logging_writes_log_file(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
    logging.getLogger("task_widget.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    log_file = tmp_path / "logs" / "task-widget.log"
    assert log_file.exists()
    assert "hello file" in log_file.read_text("utf-8")


def test_setup_logging_without_file(restore_root_logging) -> None:
    setup_logging(log_dir=None)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
