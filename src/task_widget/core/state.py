# src/task_widget/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import TYPE_CHECKING

from ..widget.markup import wrap_page
from ..widget.render import render
from ..widget.widget_models import FormatterConfig
from .ports import DocumentSink, OrderingStrategy, TaskSource

if TYPE_CHECKING:
    from ..config import Settings


@dataclass(slots=True)
class WidgetState:
    """Everything one widget instance needs, wired once by the bootstrap."""

    settings: Settings

    config: FormatterConfig
    ordering: OrderingStrategy
    source: TaskSource
    sink: DocumentSink
    tz: tzinfo | None = None
    full_page: bool = False

    def render(self, output: str | None) -> str:
        document = render(output, config=self.config, ordering=self.ordering, tz=self.tz)
        if not self.full_page:
            return document
        return wrap_page(
            document,
            title=self.settings.app_name,
            refresh_seconds=self.settings.refresh_seconds,
        )
