# src/task_widget/widget/widget_models.py

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any

# Ridiculously far in the future (100000 days, in ms); used for tasks with no due date.
MAX_DUE_MS = 100_000 * 24 * 60 * 60 * 1000

STARTED_INDICATOR = "\U0001F7CA"


class DueUnit(StrEnum):
    YEARS = "y"
    MONTHS = "m"
    WEEKS = "w"
    DAYS = "d"


class DueBucket(StrEnum):
    """Which colour a row gets, based on its due date relative to today."""

    OVERDUE = "overdue"
    TODAY = "today"
    FUTURE = "future"
    NONE = "none"


class FailureKind(StrEnum):
    EMPTY_INPUT = "empty_input"
    MALFORMED_PAYLOAD = "malformed_payload"


@dataclass(slots=True, frozen=True)
class RenderFailure:
    kind: FailureKind
    message: str = ""


@dataclass(slots=True, frozen=True)
class Colour:
    r: int
    g: int
    b: int
    a: float | None = None

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if not isinstance(v, int) or not 0 <= v <= 255:
                raise ValueError(f"colour channel {name}={v!r} is not in 0..255")

    def with_alpha(self, alpha: float) -> Colour:
        return replace(self, a=alpha)

    def rgba(self, alpha: float | None = None) -> str:
        """CSS rgba() string. An explicit alpha wins over the stored one."""
        a = alpha if alpha is not None else self.a
        if a is None:
            a = 1.0
        return f"rgba({self.r}, {self.g}, {self.b}, {a:.2f})"


@dataclass(slots=True, frozen=True)
class ColourScheme:
    """
    Bucket -> colour mapping.

    Convention used by default: overdue is red, due today is amber,
    future and undated tasks are white.
    """

    overdue: Colour = Colour(255, 100, 100)
    today: Colour = Colour(255, 200, 0)
    future: Colour = Colour(255, 255, 255)
    undated: Colour = Colour(255, 255, 255)
    header: Colour = Colour(255, 255, 255, 1.0)
    tags: Colour = Colour(50, 225, 50)

    def for_bucket(self, bucket: DueBucket) -> Colour:
        if bucket == DueBucket.OVERDUE:
            return self.overdue
        if bucket == DueBucket.TODAY:
            return self.today
        if bucket == DueBucket.FUTURE:
            return self.future
        return self.undated


@dataclass(slots=True, frozen=True)
class FormatterConfig:
    max_entries: int = 20
    colours: ColourScheme = field(default_factory=ColourScheme)
    started_indicator: str = STARTED_INDICATOR
    stylesheet_href: str | None = "taskwarrior.widget/style.css"

    def __post_init__(self) -> None:
        if not isinstance(self.max_entries, int) or self.max_entries < 1:
            raise ValueError(f"max_entries must be a positive integer, got {self.max_entries!r}")

    def alpha_for_rank(self, rank: int) -> float:
        """Rows fade out towards the bottom in steps of 1 / max_entries."""
        return round(1 - rank / self.max_entries, 2)


@dataclass(slots=True, frozen=True)
class RawTask:
    """One element of the `task export` JSON array, as received."""

    id: Any = None
    description: str = ""
    project: str = ""
    due: str | None = None
    tags: tuple[str, ...] | None = None
    start: bool = False
    urgency: str | None = None


@dataclass(slots=True, frozen=True)
class DueOffset:
    value: int
    unit: DueUnit
    millis: int

    @property
    def label(self) -> str:
        return f"{self.value}{self.unit.value}"


@dataclass(slots=True, frozen=True)
class DisplayTask:
    id: Any
    description: str
    project: str
    due: DueOffset | None
    started: bool
    start_marker: str
    tags: str
    urgency: float
    colour: Colour | None = None

    @property
    def due_millis(self) -> int:
        return self.due.millis if self.due is not None else MAX_DUE_MS

    @property
    def due_label(self) -> str:
        return self.due.label if self.due is not None else ""

    @property
    def urgency_text(self) -> str:
        return f"{self.urgency:.2f}"

    @property
    def bucket(self) -> DueBucket:
        if self.due is None:
            return DueBucket.NONE
        if self.due.millis < 0:
            return DueBucket.OVERDUE
        if self.due.millis == 0:
            return DueBucket.TODAY
        return DueBucket.FUTURE
