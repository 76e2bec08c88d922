# src/task_widget/widget/formatter.py

from __future__ import annotations

import logging
import math
from dataclasses import replace
from datetime import datetime, timezone, tzinfo
from typing import TYPE_CHECKING

from .due_dates import compute_due_offset
from .ordering import DueThenUrgencyOrdering
from .widget_models import (
    DisplayTask,
    FailureKind,
    FormatterConfig,
    RawTask,
    RenderFailure,
)

if TYPE_CHECKING:
    from ..core.ports import OrderingStrategy

logger = logging.getLogger(__name__)


def parse_urgency(raw: str | None) -> float:
    # Missing and "0" both end up as 0.0.
    if raw is None or str(raw).strip() == "":
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid urgency {raw!r}") from e
    if not math.isfinite(value):
        raise ValueError(f"invalid urgency {raw!r}")
    return value


class TaskListFormatter:
    """
    Turns raw export records into ordered, truncated, colourized rows.

    Stages (run in order by format()):
    - normalize: due offset, start marker, joined tags, numeric urgency
    - order: pluggable strategy, full list
    - annotate: after truncation to max_entries, colour by due bucket and fade by rank

    Every call builds fresh DisplayTask objects; nothing is kept between calls.
    """

    def __init__(
            self,
            config: FormatterConfig | None = None,
            *,
            ordering: OrderingStrategy | None = None,
            tz: tzinfo | None = None,
    ) -> None:
        self.config = config or FormatterConfig()
        self.ordering = ordering or DueThenUrgencyOrdering()
        self.tz = tz

    def normalize(self, raw: RawTask, *, now: datetime | None = None) -> DisplayTask:
        """Raises ValueError (DueDateError included) for unusable fields."""
        due = None
        if raw.due:
            due = compute_due_offset(raw.due, now=now, tz=self.tz)

        tags = " ".join(f"+{t}" for t in raw.tags) if raw.tags else ""

        return DisplayTask(
            id=raw.id,
            description=raw.description,
            project=raw.project,
            due=due,
            started=raw.start,
            start_marker=self.config.started_indicator if raw.start else "",
            tags=tags,
            urgency=parse_urgency(raw.urgency),
        )

    def annotate(self, tasks: list[DisplayTask]) -> list[DisplayTask]:
        # Colour has to be applied after ordering and truncation: alpha depends on rank.
        scheme = self.config.colours
        out: list[DisplayTask] = []
        for rank, task in enumerate(tasks):
            colour = scheme.for_bucket(task.bucket).with_alpha(self.config.alpha_for_rank(rank))
            out.append(replace(task, colour=colour))
        return out

    def format(
            self,
            raw_tasks: list[RawTask] | tuple[RawTask, ...],
            *,
            now: datetime | None = None,
    ) -> list[DisplayTask] | RenderFailure:
        # One "today" for the whole pass, even if it runs across midnight.
        if now is None:
            now = datetime.now(timezone.utc)

        try:
            normalized = [self.normalize(t, now=now) for t in raw_tasks]
        except ValueError as e:
            return RenderFailure(FailureKind.MALFORMED_PAYLOAD, str(e))

        ordered = self.ordering.sort(normalized)
        shown = ordered[: self.config.max_entries]
        logger.debug(
            "Formatted %d tasks (%d shown, ordering=%s)",
            len(ordered),
            len(shown),
            getattr(self.ordering, "name", "?"),
        )
        return self.annotate(shown)
