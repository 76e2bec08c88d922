# src/task_widget/widget/ordering.py

from __future__ import annotations

"""
Ordering strategies.

The default sorts by due date ascending with urgency as a fractional
tie-breaker. Urgency is assumed to stay below 1000 (the maximum with default
Taskwarrior settings is about 60.7), so urgency / 1000 never moves a task
across a whole millisecond, let alone a day.

The older behaviour (urgency only) is kept as a selectable mode.
"""

from collections.abc import Iterable

from .widget_models import DisplayTask

URGENCY_SCALE = 1000.0


class DueThenUrgencyOrdering:
    name = "due"

    @staticmethod
    def sort_key(task: DisplayTask) -> tuple[bool, float]:
        # Undated tasks go last whatever their urgency.
        return task.due is None, task.due_millis - task.urgency / URGENCY_SCALE

    def sort(self, tasks: Iterable[DisplayTask]) -> list[DisplayTask]:
        return sorted(tasks, key=self.sort_key)


class UrgencyOrdering:
    name = "urgency"

    def sort(self, tasks: Iterable[DisplayTask]) -> list[DisplayTask]:
        return sorted(tasks, key=lambda t: -t.urgency)


_ORDERINGS = {
    DueThenUrgencyOrdering.name: DueThenUrgencyOrdering,
    UrgencyOrdering.name: UrgencyOrdering,
}

ORDERING_NAMES = tuple(_ORDERINGS)


def get_ordering(name: str | None = None):
    key = (name or DueThenUrgencyOrdering.name).strip().lower()
    cls = _ORDERINGS.get(key)
    if cls is None:
        raise ValueError(f"unknown ordering {name!r}; expected one of {', '.join(ORDERING_NAMES)}")
    return cls()
