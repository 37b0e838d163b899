"""Domain models for the quiz game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from quiz_champion.constants.quiz_constants import (
    FAILING_GRADE,
    GRADE_BANDS,
    GRADE_LABELS,
    INVALID_OPTION_MARKER,
    MIN_OPTION_COUNT,
    NO_ANSWER,
)
from quiz_champion.core.errors import ValidationError


@dataclass(frozen=True, slots=True)
class Question:
    """Immutable multiple-choice question with two or more options."""

    prompt: str
    options: tuple[str, ...]
    correct_index: int
    explanation: str = ""

    def __post_init__(self) -> None:
        options = tuple(self.options)
        if len(options) < MIN_OPTION_COUNT:
            raise ValidationError(
                f"A question needs at least {MIN_OPTION_COUNT} options, got {len(options)}."
            )
        if isinstance(self.correct_index, bool) or not isinstance(self.correct_index, int):
            raise ValidationError("Correct option index must be an integer.")
        if not 0 <= self.correct_index < len(options):
            raise ValidationError(
                f"Correct option index {self.correct_index} is outside 0..{len(options) - 1}."
            )
        object.__setattr__(self, "options", options)

    @classmethod
    def create(
        cls,
        prompt: str,
        options: Sequence[str],
        correct_index: int,
        explanation: str = "",
    ) -> "Question":
        return cls(prompt=prompt, options=tuple(options), correct_index=correct_index, explanation=explanation)

    @property
    def option_count(self) -> int:
        return len(self.options)

    def option_at(self, index: int) -> str:
        if not 0 <= index < len(self.options):
            raise IndexError(f"Option index {index} out of range")
        return self.options[index]

    def is_correct(self, candidate_index: int) -> bool:
        return candidate_index == self.correct_index

    def correct_option_text(self) -> str:
        return self.options[self.correct_index]

    def option_text_or_invalid(self, index: int) -> str:
        """Return the option text, or the invalid marker for an out-of-range index."""
        if 0 <= index < len(self.options):
            return self.options[index]
        return INVALID_OPTION_MARKER


@dataclass(frozen=True, slots=True)
class AnswerRecord:
    """The option selected for one question of a session."""

    question_index: int
    selected_option_index: int
    defaulted: bool = False

    @property
    def is_unanswered(self) -> bool:
        return self.selected_option_index == NO_ANSWER


@dataclass(frozen=True, slots=True)
class AnswerReview:
    """One row of the per-question breakdown shown after a quest."""

    number: int
    prompt: str
    selected_text: str
    correct_text: str
    is_correct: bool


def letter_grade_for(percentage: float) -> str:
    """Map a percentage onto the A-F grading bands."""
    for lower_bound, grade in GRADE_BANDS:
        if percentage >= lower_bound:
            return grade
    return FAILING_GRADE


@dataclass(frozen=True, slots=True)
class ScoreResult:
    """Immutable summary of a completed quiz session."""

    player_name: str
    total_questions: int
    correct_count: int
    elapsed_seconds: int = 0

    def __post_init__(self) -> None:
        if self.elapsed_seconds < 0:
            object.__setattr__(self, "elapsed_seconds", 0)

    @property
    def incorrect_count(self) -> int:
        return self.total_questions - self.correct_count

    @property
    def percentage(self) -> float:
        if self.total_questions == 0:
            return 0.0
        return self.correct_count * 100.0 / self.total_questions

    @property
    def letter_grade(self) -> str:
        return letter_grade_for(self.percentage)

    @property
    def grade_label(self) -> str:
        return GRADE_LABELS[self.letter_grade]

    def summary_text(self) -> str:
        """Plain-text result summary suitable for logs or copying."""
        lines = [
            "QUIZ RESULT SUMMARY",
            f"Player:      {self.player_name}",
            f"Correct:     {self.correct_count}/{self.total_questions}",
            f"Incorrect:   {self.incorrect_count}/{self.total_questions}",
            f"Percentage:  {self.percentage:.2f}%",
            f"Grade:       {self.letter_grade}",
            f"Time Taken:  {self.elapsed_seconds} seconds",
        ]
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class HistoryAggregate:
    """Cross-session totals returned by ``SessionHistory.aggregate``."""

    session_count: int
    total_questions: int
    total_correct: int
    mean_percentage: float
