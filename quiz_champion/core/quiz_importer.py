"""Utilities for importing extra quizzes from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    Q: Question text. Additional lines until the next marker are treated as
       part of the question.
    A: First option text
    B: Second option text
    C: Third option text (options are optional after B, up to H)
    CORRECT: A|B|...
    EXPLANATION: Shown after the question is answered (optional)

Example:

    Q: Which keyword exits a loop immediately?
    A: continue
    B: break
    C: return
    CORRECT: B
    EXPLANATION: 'break' leaves the loop; 'continue' skips to the next pass.

Imported quizzes are registered in the catalog next to the built-in quests.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import string

from quiz_champion.constants.quiz_constants import MAX_IMPORT_OPTION_COUNT, MIN_OPTION_COUNT
from quiz_champion.core.errors import QuizImportError, ValidationError
from quiz_champion.core.models import Question
from quiz_champion.core.quiz_catalog import CatalogEntry

logger = logging.getLogger(__name__)

_OPTION_ORDER = list(string.ascii_uppercase[:MAX_IMPORT_OPTION_COUNT])


@dataclass(slots=True)
class ImportedQuiz:
    """Container for imported quiz metadata and questions."""

    source_path: Path
    key: str
    title: str
    questions: list[Question]

    def catalog_entry(self) -> CatalogEntry:
        questions = tuple(self.questions)
        return CatalogEntry(
            key=self.key,
            title=self.title,
            tagline=f"Imported from {self.source_path.name}",
            builder=lambda: list(questions),
            style="blue",
        )


def load_quiz_from_file(file_path: Path, key: str | None = None, title: str | None = None) -> ImportedQuiz:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_quiz_text(text)
    if not questions:
        raise QuizImportError(f"Quiz file {file_path} did not contain any questions.")
    logger.info("Imported %d question(s) from %s", len(questions), file_path)
    return ImportedQuiz(
        source_path=file_path,
        key=key or file_path.stem,
        title=title or file_path.stem.replace("_", " ").upper(),
        questions=questions,
    )


def parse_quiz_text(text: str) -> list[Question]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            # Blank line encountered after content - finalize current block
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    return [_parse_block(block) for block in blocks if block]


def _parse_block(block: str) -> Question:
    question_lines: list[str] = []
    explanation_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if upper.startswith("EXPLANATION:"):
            explanation_lines = [line.split(":", 1)[1].strip()]
            current_section = "EXPLANATION"
            continue

        if len(line) > 2 and line[0].upper() in _OPTION_ORDER and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section == "EXPLANATION":
            explanation_lines.append(line)
        elif current_section in _OPTION_ORDER:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(f"Encountered text outside of a known section: '{line}'.")

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError("Question text missing (Q: ...)")

    expected_letters = _OPTION_ORDER[: len(options)]
    if sorted(options) != expected_letters:
        raise QuizImportError(
            f"Options must be lettered consecutively from A; got {', '.join(sorted(options)) or 'none'}."
        )
    if len(options) < MIN_OPTION_COUNT:
        raise QuizImportError(f"Each question must define at least {MIN_OPTION_COUNT} options.")

    option_list = [options[letter].strip() for letter in expected_letters]
    if any(not option for option in option_list):
        raise QuizImportError("Option text cannot be empty.")

    if correct_letter is None:
        raise QuizImportError(f"CORRECT is missing for question '{question_text}'.")
    if correct_letter not in expected_letters:
        raise QuizImportError(f"CORRECT must be one of {', '.join(expected_letters)}.")

    try:
        return Question.create(
            question_text,
            option_list,
            expected_letters.index(correct_letter),
            " ".join(explanation_lines).strip(),
        )
    except ValidationError as exc:  # pragma: no cover - guarded by the checks above
        raise QuizImportError(str(exc)) from exc
