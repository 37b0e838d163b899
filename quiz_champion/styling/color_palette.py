"""Color palette for the terminal UI, expressed as rich style strings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GradeStyle:
    """Style and badge used when a letter grade is displayed."""
    style: str
    badge: str


class ColorPalette:
    """Centralized color definitions for the application."""

    # Screens
    TITLE = "bold cyan"
    SUBTITLE = "yellow"
    FRAME = "magenta"
    MENU_NUMBER = "bold blue"
    MENU_DESCRIPTION = "cyan"
    LABEL = "cyan"
    VALUE = "bold"
    STAT_LABEL = "bold yellow"

    # Question flow
    QUESTION_HEADER = "bold yellow"
    QUESTION_TEXT = "bold"
    PROGRESS = "cyan"
    PROGRESS_FILLED = "green"
    CORRECT = "bold green"
    INCORRECT = "bold red"
    EXPLANATION = "italic"

    NOTICE_LEVELS = {
        "info": "cyan",
        "warning": "yellow",
        "error": "red",
    }

    # Options cycle through these, in order
    OPTION_STYLES = ("bold blue", "bold green", "bold yellow", "bold red")

    GRADES = {
        "A": GradeStyle(style="bold green", badge="🏅"),
        "B": GradeStyle(style="bold cyan", badge="⭐"),
        "C": GradeStyle(style="bold yellow", badge="✨"),
        "D": GradeStyle(style="bold yellow", badge="💫"),
        "F": GradeStyle(style="bold red", badge="⚠️"),
    }

    @classmethod
    def option_style(cls, index: int) -> str:
        return cls.OPTION_STYLES[min(index, len(cls.OPTION_STYLES) - 1)]

    @classmethod
    def grade(cls, letter: str) -> GradeStyle:
        return cls.GRADES.get(letter, cls.GRADES["F"])
