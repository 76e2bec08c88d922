# src/task_widget/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing here is read by the formatter directly: the composition root turns
  Settings into an immutable FormatterConfig and passes it in.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .widget.task_source import DEFAULT_COMMAND

ENV_PREFIX = "TASKWIDGET"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# Local .env (gitignored) never overrides the real environment.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _env_rgb(name: str, default: tuple[int, int, int]) -> tuple[int, int, int]:
    """Parse "r,g,b" (commas or spaces). Falls back to default on anything odd."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    parts = [p for p in raw.replace(",", " ").split() if p]
    if len(parts) != 3:
        return default
    try:
        rgb = tuple(int(p) for p in parts)
    except ValueError:
        return default
    if not all(0 <= c <= 255 for c in rgb):
        return default
    return rgb  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Export / refresh ----
    command: str
    refresh_seconds: float

    # ---- Presentation ----
    stylesheet_href: Optional[str]
    max_entries: int
    ordering: str
    timezone: Optional[str]
    output_path: Optional[Path]

    # ---- Colours (r, g, b) ----
    overdue_colour: tuple[int, int, int]
    today_colour: tuple[int, int, int]
    future_colour: tuple[int, int, int]
    tags_colour: tuple[int, int, int]

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-widget").strip() or "task-widget"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR")) or Path(".local/task-widget")

        command = _env(_k("COMMAND"), DEFAULT_COMMAND).strip() or DEFAULT_COMMAND
        refresh_seconds = _env_float(_k("REFRESH_SECONDS"), 10.0)

        # An explicitly empty value disables the <link>.
        stylesheet_href = _env(_k("STYLESHEET"), "taskwarrior.widget/style.css").strip() or None
        max_entries = _env_int(_k("MAX_ENTRIES"), 20)
        if max_entries < 1:
            max_entries = 20
        ordering = _env(_k("ORDERING"), "due").strip().lower() or "due"
        timezone = _env(_k("TIMEZONE"), "").strip() or None
        output_path = _env_path(_k("OUTPUT_PATH"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            command=command,
            refresh_seconds=refresh_seconds,
            stylesheet_href=stylesheet_href,
            max_entries=max_entries,
            ordering=ordering,
            timezone=timezone,
            output_path=output_path,
            overdue_colour=_env_rgb(_k("OVERDUE_COLOUR"), (255, 100, 100)),
            today_colour=_env_rgb(_k("TODAY_COLOUR"), (255, 200, 0)),
            future_colour=_env_rgb(_k("FUTURE_COLOUR"), (255, 255, 255)),
            tags_colour=_env_rgb(_k("TAGS_COLOUR"), (50, 225, 50)),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
