# tests/conftest.py

from __future__ import annotations

import json
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from task_widget.config import ENV_PREFIX, Settings
from task_widget.widget.widget_models import FormatterConfig

# Middle of the day, so "today" is unambiguous in UTC.
NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=timezone.utc)


def due_in(days: int, *, hour: int = 0, minute: int = 0) -> str:
    """Compact Taskwarrior timestamp `days` from NOW's date, at hour:minute UTC."""
    d = NOW.date() + timedelta(days=days)
    return f"{d:%Y%m%d}T{hour:02d}{minute:02d}00Z"


def payload(*tasks: dict) -> str:
    return json.dumps(list(tasks))


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def config() -> FormatterConfig:
    return FormatterConfig()


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Drop every TASKWIDGET_* variable so Settings.from_env() sees defaults."""
    import os

    for key in list(os.environ):
        if key.startswith(f"{ENV_PREFIX}_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture()
def settings(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> Settings:
    """
    Default settings with local paths redirected into tmp_path.

    Built from a clean environment so the developer's own TASKWIDGET_* vars
    never leak into unit tests.
    """
    return replace(Settings.from_env(), data_dir=tmp_path / "data", timezone="")
