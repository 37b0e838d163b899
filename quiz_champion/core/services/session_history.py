"""Service that accumulates quiz results for the lifetime of the process."""

from __future__ import annotations

import logging

from quiz_champion.core.models import HistoryAggregate, ScoreResult

logger = logging.getLogger(__name__)


class SessionHistory:
    """Append-only record of completed sessions, in completion order."""

    def __init__(self) -> None:
        self._results: list[ScoreResult] = []

    def record(self, result: ScoreResult) -> None:
        if not isinstance(result, ScoreResult):
            raise TypeError(f"Expected a ScoreResult, got {type(result).__name__}.")
        self._results.append(result)
        logger.info(
            "Recorded result for %s: %d/%d (%s)",
            result.player_name,
            result.correct_count,
            result.total_questions,
            result.letter_grade,
        )

    def results(self) -> tuple[ScoreResult, ...]:
        return tuple(self._results)

    def is_empty(self) -> bool:
        return not self._results

    def __len__(self) -> int:
        return len(self._results)

    def aggregate(self) -> HistoryAggregate:
        """Totals across sessions; the mean is taken over per-session percentages."""
        count = len(self._results)
        mean_percentage = 0.0
        if count:
            mean_percentage = sum(result.percentage for result in self._results) / count
        return HistoryAggregate(
            session_count=count,
            total_questions=sum(result.total_questions for result in self._results),
            total_correct=sum(result.correct_count for result in self._results),
            mean_percentage=mean_percentage,
        )
