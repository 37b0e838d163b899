"""
Tests for the console input boundary and selection parsing.
"""

import io

import pytest

from quiz_champion.cli.console_input import ConsoleInput, rejection_message
from quiz_champion.core.boundaries import SelectionRejection, parse_selection


class TestParseSelection:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1", 1),
            (" 4 \n", 4),
            ("", SelectionRejection.EMPTY),
            ("   ", SelectionRejection.EMPTY),
            ("two", SelectionRejection.NOT_A_NUMBER),
            ("1.5", SelectionRejection.NOT_A_NUMBER),
            ("0", SelectionRejection.OUT_OF_RANGE),
            ("5", SelectionRejection.OUT_OF_RANGE),
            ("-1", SelectionRejection.OUT_OF_RANGE),
        ],
    )
    def test_parse_selection(self, raw, expected):
        assert parse_selection(raw, 4) == expected


class TestConsoleInput:
    def _input(self, text_console, text):
        return ConsoleInput(text_console, stream=io.StringIO(text))

    def test_valid_selection_returned_as_one_based(self, text_console):
        boundary = self._input(text_console, "3\n")

        assert boundary.request_option_selection(4) == 3

    def test_rejections_are_reported_and_reprompted(self, text_console):
        boundary = self._input(text_console, "\nabc\n9\n2\n")

        assert boundary.request_option_selection(4) == 2

        output = text_console.file.getvalue()
        assert "Please enter a valid number." in output
        assert "Invalid input! Please enter a number." in output
        assert "Please enter a number between 1 and 4." in output
        assert output.count("Your answer (1-4):") == 4

    def test_end_of_input_returns_none_and_stays_exhausted(self, text_console):
        boundary = self._input(text_console, "abc\n")

        assert boundary.request_option_selection(4) is None
        assert boundary.exhausted
        assert boundary.request_text("Name: ") is None
        assert "Using default answer" not in text_console.file.getvalue()

    def test_menu_prompt_used_when_given(self, text_console):
        boundary = self._input(text_console, "1\n")

        boundary.request_option_selection(5, prompt="Enter your choice (1-5): ")

        assert "Enter your choice (1-5):" in text_console.file.getvalue()

    def test_request_text_strips_and_keeps_blank_lines(self, text_console):
        boundary = self._input(text_console, "  Ada  \n\n")

        assert boundary.request_text("Name: ") == "Ada"
        assert boundary.request_text("Again? ") == ""
        assert boundary.request_text("Again? ") is None

    def test_shared_stream_is_consumed_once(self, text_console):
        boundary = self._input(text_console, "Ada\n2\nyes\n")

        assert boundary.request_text("Name: ") == "Ada"
        assert boundary.request_option_selection(3) == 2
        assert boundary.request_text("Again? ") == "yes"

    def test_rejection_message_includes_range(self):
        assert rejection_message(SelectionRejection.OUT_OF_RANGE, 3) == "Please enter a number between 1 and 3."
