"""Interfaces between the quiz core and the terminal front end.

The core never reads the keyboard or writes to the screen itself. It asks an
``AnswerInput`` for selections and pushes display events into a
``DisplaySink``. Both are injected once by the top-level controller, so every
component shares the same input stream.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Union

from quiz_champion.core.models import AnswerReview, HistoryAggregate, Question, ScoreResult


class SelectionRejection(Enum):
    """Why a line of user input was not accepted as an option number."""

    EMPTY = "empty"
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"


def parse_selection(raw: str, option_count: int) -> int | SelectionRejection:
    """Parse a 1-based option number, or return the reason it was rejected."""
    text = raw.strip()
    if not text:
        return SelectionRejection.EMPTY
    try:
        value = int(text)
    except ValueError:
        return SelectionRejection.NOT_A_NUMBER
    if not 1 <= value <= option_count:
        return SelectionRejection.OUT_OF_RANGE
    return value


class AnswerInput(Protocol):
    """Source of user choices. ``None`` always means the input has ended."""

    def request_option_selection(self, option_count: int, prompt: str | None = None) -> int | None:
        ...

    def request_text(self, prompt: str) -> str | None:
        ...


# --- Display events -------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MenuEntry:
    title: str
    description: str
    style: str | None = None
    question_count: int | None = None


@dataclass(frozen=True, slots=True)
class SplashScreen:
    title: str
    tagline: str


@dataclass(frozen=True, slots=True)
class MainMenu:
    title: str
    entries: tuple[MenuEntry, ...]


@dataclass(frozen=True, slots=True)
class QuestSelection:
    title: str
    entries: tuple[MenuEntry, ...]


@dataclass(frozen=True, slots=True)
class Codex:
    title: str
    mechanics: tuple[str, ...]
    grading: tuple[tuple[str, str, str], ...]
    quests: tuple[MenuEntry, ...]
    concepts: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Farewell:
    message: str
    subtitle: str


@dataclass(frozen=True, slots=True)
class Notice:
    message: str
    level: str = "warning"


@dataclass(frozen=True, slots=True)
class QuestionShown:
    number: int
    total: int
    question: Question

    @property
    def progress_percent(self) -> int:
        return (self.number * 100) // self.total if self.total else 0


@dataclass(frozen=True, slots=True)
class AnswerFeedback:
    is_correct: bool
    selected_text: str
    correct_text: str
    explanation: str
    defaulted: bool = False
    unanswered: bool = False


@dataclass(frozen=True, slots=True)
class ResultCard:
    result: ScoreResult


@dataclass(frozen=True, slots=True)
class AnswerBreakdown:
    reviews: tuple[AnswerReview, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class StatisticsCard:
    aggregate: HistoryAggregate


DisplayEvent = Union[
    SplashScreen,
    MainMenu,
    QuestSelection,
    Codex,
    Farewell,
    Notice,
    QuestionShown,
    AnswerFeedback,
    ResultCard,
    AnswerBreakdown,
    StatisticsCard,
]


class DisplaySink(Protocol):
    """Receives display events; how they look is entirely up to the sink."""

    def show(self, event: DisplayEvent) -> None:
        ...
