"""
Tests for the plain-text quiz importer.
"""

from pathlib import Path

import pytest

from quiz_champion.core.errors import QuizImportError
from quiz_champion.core.quiz_catalog import QuizCatalog
from quiz_champion.core.quiz_importer import load_quiz_from_file, parse_quiz_text

SAMPLE_QUIZ = """\
Q: Which keyword exits a loop immediately?
A: continue
B: break
C: return
CORRECT: B
EXPLANATION: 'break' leaves the loop;
'continue' skips to the next pass.

---

Q: Is Python dynamically typed?
A: Yes
B: No
CORRECT: a
"""


class TestParseQuizText:
    def test_parses_blocks_with_variable_option_counts(self):
        questions = parse_quiz_text(SAMPLE_QUIZ)

        assert len(questions) == 2
        first, second = questions
        assert first.prompt == "Which keyword exits a loop immediately?"
        assert first.options == ("continue", "break", "return")
        assert first.correct_index == 1
        assert first.explanation == "'break' leaves the loop; 'continue' skips to the next pass."
        assert second.option_count == 2
        assert second.correct_index == 0
        assert second.explanation == ""

    def test_multiline_question_text(self):
        questions = parse_quiz_text("Q: First line\nsecond line\nA: x\nB: y\nCORRECT: A\n")

        assert questions[0].prompt == "First line\nsecond line"

    def test_missing_correct_raises(self):
        with pytest.raises(QuizImportError, match="CORRECT is missing"):
            parse_quiz_text("Q: Pick\nA: x\nB: y\n")

    def test_correct_letter_without_option_raises(self):
        with pytest.raises(QuizImportError, match="CORRECT must be one of A, B"):
            parse_quiz_text("Q: Pick\nA: x\nB: y\nCORRECT: D\n")

    def test_single_option_raises(self):
        with pytest.raises(QuizImportError, match="at least 2 options"):
            parse_quiz_text("Q: Pick\nA: x\nCORRECT: A\n")

    def test_gap_in_option_letters_raises(self):
        with pytest.raises(QuizImportError, match="consecutively"):
            parse_quiz_text("Q: Pick\nA: x\nC: y\nCORRECT: A\n")

    def test_text_outside_section_raises(self):
        with pytest.raises(QuizImportError, match="outside of a known section"):
            parse_quiz_text("CORRECT: A\nstray text\n")

    def test_missing_question_text_raises(self):
        with pytest.raises(QuizImportError, match="Question text missing"):
            parse_quiz_text("A: x\nB: y\nCORRECT: A\n")


class TestLoadQuizFromFile:
    def test_load_and_register_in_catalog(self, tmp_path: Path):
        quiz_file = tmp_path / "loops_quiz.txt"
        quiz_file.write_text(SAMPLE_QUIZ, encoding="utf-8")

        imported = load_quiz_from_file(quiz_file)
        catalog = QuizCatalog.default()
        catalog.register(imported.catalog_entry())

        assert imported.key == "loops_quiz"
        assert imported.title == "LOOPS QUIZ"
        assert catalog.keys()[-1] == "loops_quiz"
        built = catalog.build("loops_quiz")
        assert built == imported.questions
        assert built is not catalog.build("loops_quiz")

    def test_empty_file_raises(self, tmp_path: Path):
        quiz_file = tmp_path / "empty.txt"
        quiz_file.write_text("\n\n---\n", encoding="utf-8")

        with pytest.raises(QuizImportError, match="did not contain any questions"):
            load_quiz_from_file(quiz_file)
