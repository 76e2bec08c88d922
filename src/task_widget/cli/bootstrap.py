# src/task_widget/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- turns them into an immutable FormatterConfig + ordering + timezone,
- wires a task source and a document sink into WidgetState.
"""

from __future__ import annotations

import logging
from datetime import tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..config import Settings, get_settings
from ..core.ports import DocumentSink, TaskSource
from ..core.state import WidgetState
from ..widget.ordering import get_ordering
from ..widget.sinks import FileSink, StdoutSink
from ..widget.task_source import StaticTaskSource, TaskwarriorExportSource
from ..widget.widget_models import Colour, ColourScheme, FormatterConfig

logger = logging.getLogger(__name__)


def build_formatter_config(settings: Settings, *, max_entries: int | None = None) -> FormatterConfig:
    scheme = ColourScheme(
        overdue=Colour(*settings.overdue_colour),
        today=Colour(*settings.today_colour),
        future=Colour(*settings.future_colour),
        undated=Colour(*settings.future_colour),
        tags=Colour(*settings.tags_colour),
    )
    return FormatterConfig(
        max_entries=max_entries if max_entries is not None else settings.max_entries,
        colours=scheme,
        stylesheet_href=settings.stylesheet_href,
    )


def resolve_timezone(name: str | None) -> tzinfo | None:
    """IANA zone for day truncation; None means system local time."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using system local time.", name)
        return None


def create_widget_state(
        *,
        settings: Settings | None = None,
        input_path: str | Path | None = None,
        output_path: str | Path | None = None,
        ordering: str | None = None,
        max_entries: int | None = None,
        full_page: bool = False,
) -> WidgetState:
    """
    Create WidgetState from settings, with CLI overrides applied on top.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    """
    if settings is None:
        settings = get_settings()

    source: TaskSource
    if input_path is not None:
        source = StaticTaskSource.from_path(input_path)
    else:
        source = TaskwarriorExportSource(settings.command)

    sink: DocumentSink
    out = output_path if output_path is not None else settings.output_path
    sink = FileSink(out) if out else StdoutSink()

    return WidgetState(
        settings=settings,
        config=build_formatter_config(settings, max_entries=max_entries),
        ordering=get_ordering(ordering or settings.ordering),
        source=source,
        sink=sink,
        tz=resolve_timezone(settings.timezone),
        full_page=full_page,
    )
