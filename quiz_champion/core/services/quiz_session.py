"""Service that runs one quiz session from first question to result."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum, auto
import logging
from typing import Callable, Iterable

from quiz_champion.constants.quiz_constants import NO_ANSWER
from quiz_champion.constants.ui_constants import NO_QUESTIONS_MESSAGE
from quiz_champion.core.boundaries import (
    AnswerFeedback,
    AnswerInput,
    DisplaySink,
    Notice,
    QuestionShown,
)
from quiz_champion.core.errors import InvalidStateError
from quiz_champion.core.models import AnswerRecord, AnswerReview, Question, ScoreResult

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionState(Enum):
    EMPTY = auto()
    READY = auto()
    IN_PROGRESS = auto()
    COMPLETE = auto()


class EndOfInputPolicy(Enum):
    """What to store when the input ends in the middle of a question."""

    DEFAULT_FIRST_OPTION = auto()
    MARK_UNANSWERED = auto()


class QuizSession:
    """Drives a fixed list of questions strictly in order and scores the answers."""

    def __init__(
        self,
        answer_input: AnswerInput,
        display: DisplaySink,
        *,
        end_of_input_policy: EndOfInputPolicy = EndOfInputPolicy.DEFAULT_FIRST_OPTION,
        clock: Clock = _utc_now,
    ) -> None:
        self._input = answer_input
        self._display = display
        self._end_of_input_policy = end_of_input_policy
        self._clock = clock

        self._questions: list[Question] = []
        self._answers: list[AnswerRecord] = []
        self._position: int = 0
        self._state = SessionState.EMPTY
        self._started_at: datetime | None = None
        self._stop_requested: bool = False

    # --- Accessors ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def position(self) -> int:
        return self._position

    @property
    def questions(self) -> tuple[Question, ...]:
        return tuple(self._questions)

    @property
    def answers(self) -> tuple[AnswerRecord, ...]:
        return tuple(self._answers)

    @property
    def question_count(self) -> int:
        return len(self._questions)

    @property
    def started_at(self) -> datetime | None:
        return self._started_at

    def is_started(self) -> bool:
        return self._state in (SessionState.IN_PROGRESS, SessionState.COMPLETE)

    # --- Lifecycle ---

    def attach_questions(self, questions: Iterable[Question]) -> None:
        if self._state not in (SessionState.EMPTY, SessionState.READY):
            raise InvalidStateError(f"Cannot attach questions while the session is {self._state.name}.")
        self._questions.extend(questions)
        if self._questions:
            self._state = SessionState.READY

    def start(self) -> None:
        """Ask every question in order, then mark the session complete."""
        if self._state is SessionState.EMPTY:
            logger.warning("Refusing to start a quiz session without questions")
            self._display.show(Notice(NO_QUESTIONS_MESSAGE, level="error"))
            return
        if self._state is not SessionState.READY:
            raise InvalidStateError(f"Cannot start a session that is {self._state.name}; reset it first.")

        self._started_at = self._clock()
        self._state = SessionState.IN_PROGRESS
        logger.info("Quiz session started with %d question(s)", len(self._questions))

        while not self._stop_requested and self._position < len(self._questions):
            self._ask_current_question()

        self._state = SessionState.COMPLETE
        logger.info(
            "Quiz session complete: %d of %d question(s) answered",
            len(self._answers),
            len(self._questions),
        )

    def request_stop(self) -> None:
        """Finish the session after the question currently being asked."""
        if self._state is not SessionState.IN_PROGRESS:
            logger.debug("Ignoring stop request while the session is %s", self._state.name)
            return
        self._stop_requested = True

    def reset(self) -> None:
        self._answers = []
        self._position = 0
        self._started_at = None
        self._stop_requested = False
        self._state = SessionState.READY if self._questions else SessionState.EMPTY

    # --- Results ---

    def compute_result(self, player_name: str) -> ScoreResult:
        if self._state is not SessionState.COMPLETE:
            raise InvalidStateError(f"Results are only available once the session is complete (now {self._state.name}).")

        correct_count = sum(
            1
            for record in self._answers
            if self._questions[record.question_index].is_correct(record.selected_option_index)
        )
        elapsed = 0
        if self._started_at is not None:
            elapsed = max(0, int((self._clock() - self._started_at).total_seconds()))

        return ScoreResult(
            player_name=player_name,
            total_questions=len(self._questions),
            correct_count=correct_count,
            elapsed_seconds=elapsed,
        )

    def answer_breakdown(self) -> list[AnswerReview]:
        reviews: list[AnswerReview] = []
        for record in self._answers:
            question = self._questions[record.question_index]
            reviews.append(
                AnswerReview(
                    number=record.question_index + 1,
                    prompt=question.prompt,
                    selected_text=question.option_text_or_invalid(record.selected_option_index),
                    correct_text=question.correct_option_text(),
                    is_correct=question.is_correct(record.selected_option_index),
                )
            )
        return reviews

    # --- Internals ---

    def _ask_current_question(self) -> None:
        question = self._questions[self._position]
        self._display.show(
            QuestionShown(number=self._position + 1, total=len(self._questions), question=question)
        )

        selection = self._input.request_option_selection(question.option_count)
        defaulted = selection is None
        if selection is None:
            selected_index = self._fallback_selection()
            logger.info(
                "Input ended on question %d; storing option index %d",
                self._position + 1,
                selected_index,
            )
        else:
            selected_index = selection - 1

        record = AnswerRecord(
            question_index=self._position,
            selected_option_index=selected_index,
            defaulted=defaulted,
        )
        self._answers.append(record)
        self._position += 1

        self._display.show(
            AnswerFeedback(
                is_correct=question.is_correct(selected_index),
                selected_text=question.option_text_or_invalid(selected_index),
                correct_text=question.correct_option_text(),
                explanation=question.explanation,
                defaulted=defaulted,
                unanswered=record.is_unanswered,
            )
        )

    def _fallback_selection(self) -> int:
        if self._end_of_input_policy is EndOfInputPolicy.MARK_UNANSWERED:
            return NO_ANSWER
        return 0
