# src/task_widget/widget/refresh_loop.py

from __future__ import annotations

"""
Refresh loop.

A small polling loop that, every interval:
- fetches the export payload from the injected source,
- renders it (the render itself never raises for bad payloads),
- hands the document to the injected sink.

A failing fetch is logged and shown as an error document; the loop keeps going.
To stop the loop, cancel the coroutine/task.
"""

import asyncio
import logging
from collections.abc import Callable

from ..core.ports import DocumentSink, TaskSource
from .markup import render_error
from .task_source import TaskwarriorError

logger = logging.getLogger(__name__)

Renderer = Callable[[str | None], str]


def refresh_once(source: TaskSource, sink: DocumentSink, renderer: Renderer) -> str:
    """Fetch, render and write one document. Returns the document."""
    try:
        output = source.fetch()
    except (TaskwarriorError, OSError) as e:
        logger.exception("Fetching tasks failed")
        document = render_error(str(e))
    else:
        document = renderer(output)

    sink.write(document)
    return document


async def run_refresh_loop(
        source: TaskSource,
        sink: DocumentSink,
        renderer: Renderer,
        *,
        interval_seconds: float = 10.0,
        max_iterations: int | None = None,
) -> None:
    sleep_s = max(0.01, float(interval_seconds))
    done = 0

    while max_iterations is None or done < max_iterations:
        try:
            refresh_once(source, sink, renderer)
        except OSError:
            # Sink trouble (disk full, permissions); try again next tick.
            logger.exception("Writing widget document failed")
        done += 1

        if max_iterations is not None and done >= max_iterations:
            break
        await asyncio.sleep(sleep_s)
