# src/task_widget/widget/render.py

from __future__ import annotations

"""
Render entry point.

One call = one pass over one export payload:
parse -> normalize -> order -> truncate -> annotate -> markup.

render() never raises for empty or malformed payloads; they become a
"no tasks" document or an inline error document (the latter is also logged).
"""

import json
import logging
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING, Any

from .formatter import TaskListFormatter
from .markup import render_empty, render_error, render_table
from .widget_models import DisplayTask, FailureKind, FormatterConfig, RawTask, RenderFailure

if TYPE_CHECKING:
    from ..core.ports import OrderingStrategy

logger = logging.getLogger(__name__)


def _opt_text(obj: dict[str, Any], key: str) -> str:
    v = obj.get(key)
    return "" if v is None else str(v)


def _raw_task_from_json(index: int, obj: Any) -> RawTask:
    if not isinstance(obj, dict):
        raise ValueError(f"task #{index} is not an object")

    tags_any = obj.get("tags")
    tags: tuple[str, ...] | None = None
    if tags_any is not None:
        if not isinstance(tags_any, list) or not all(isinstance(t, str) for t in tags_any):
            raise ValueError(f"task #{index} has invalid tags")
        tags = tuple(tags_any)

    due_any = obj.get("due")
    if due_any is not None and not isinstance(due_any, str):
        raise ValueError(f"task #{index} has invalid due date {due_any!r}")

    urgency_any = obj.get("urgency")
    if isinstance(urgency_any, bool) or not isinstance(urgency_any, (str, int, float, type(None))):
        raise ValueError(f"task #{index} has invalid urgency {urgency_any!r}")

    return RawTask(
        id=obj.get("id"),
        description=_opt_text(obj, "description"),
        project=_opt_text(obj, "project"),
        due=due_any or None,
        tags=tags,
        # Presence only; the start timestamp itself is not shown.
        start=bool(obj.get("start")),
        urgency=None if urgency_any is None else str(urgency_any),
    )


def parse_payload(output: str | bytes | None) -> tuple[RawTask, ...] | RenderFailure:
    """Decode a `task export` payload into RawTask records, or describe why not."""
    if output is None:
        return RenderFailure(FailureKind.EMPTY_INPUT)
    if isinstance(output, bytes):
        try:
            output = output.decode("utf-8")
        except UnicodeDecodeError as e:
            return RenderFailure(FailureKind.MALFORMED_PAYLOAD, f"payload is not UTF-8: {e}")
    if not output.strip():
        return RenderFailure(FailureKind.EMPTY_INPUT)

    try:
        data = json.loads(output)
    except json.JSONDecodeError as e:
        return RenderFailure(FailureKind.MALFORMED_PAYLOAD, f"invalid JSON: {e}")

    if not isinstance(data, list):
        return RenderFailure(FailureKind.MALFORMED_PAYLOAD, "expected a JSON array of tasks")

    try:
        return tuple(_raw_task_from_json(i, obj) for i, obj in enumerate(data))
    except ValueError as e:
        return RenderFailure(FailureKind.MALFORMED_PAYLOAD, str(e))


def build_rows(
        output: str | bytes | None,
        *,
        config: FormatterConfig | None = None,
        now: datetime | None = None,
        ordering: OrderingStrategy | None = None,
        tz: tzinfo | None = None,
) -> list[DisplayTask] | RenderFailure:
    parsed = parse_payload(output)
    if isinstance(parsed, RenderFailure):
        return parsed
    formatter = TaskListFormatter(config, ordering=ordering, tz=tz)
    return formatter.format(parsed, now=now)


def render_failure(failure: RenderFailure) -> str:
    if failure.kind == FailureKind.EMPTY_INPUT:
        return render_empty()
    logger.error("Cannot render task list: %s", failure.message)
    return render_error(failure.message)


def render(
        output: str | bytes | None,
        *,
        config: FormatterConfig | None = None,
        now: datetime | None = None,
        ordering: OrderingStrategy | None = None,
        tz: tzinfo | None = None,
) -> str:
    """Render one export payload to a widget document."""
    config = config or FormatterConfig()
    rows = build_rows(output, config=config, now=now, ordering=ordering, tz=tz)
    if isinstance(rows, RenderFailure):
        return render_failure(rows)
    if not rows:
        return render_empty()
    return render_table(rows, config)
