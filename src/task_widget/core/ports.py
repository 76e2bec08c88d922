# src/task_widget/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the widget.

The formatter and the refresh loop depend on Protocols instead of concrete
implementations, so the export command, the output target and the ordering
law can be swapped (and faked in tests).
"""

from collections.abc import Iterable
from typing import Protocol

from ..widget.widget_models import DisplayTask


class OrderingStrategy(Protocol):
    """Orders normalized tasks. Must be stable and must not truncate."""

    name: str

    def sort(self, tasks: Iterable[DisplayTask]) -> list[DisplayTask]: ...


class TaskSource(Protocol):
    """Where the raw export payload comes from (usually `task ... export`)."""

    def fetch(self) -> str | None: ...


class DocumentSink(Protocol):
    """Where a rendered document goes (stdout, a file the widget host watches, ...)."""

    def write(self, document: str) -> None: ...
