"""Rich-powered display sink for the terminal game.

Turns the display events emitted by the controller and quiz sessions into
panels, tables and progress bars. All pacing (sleeps, screen clearing) lives
here and is switched off with ``animate=False``.
"""

from __future__ import annotations

import time
from typing import Callable

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from quiz_champion.constants.quiz_constants import POINTS_PER_CORRECT_ANSWER
from quiz_champion.constants.ui_constants import (
    BREAKDOWN_TITLE,
    END_OF_INPUT_MESSAGE,
    END_OF_INPUT_UNANSWERED_MESSAGE,
    FEEDBACK_DELAY,
    PROGRESS_BAR_WIDTH,
    RESULT_CARD_TITLE,
    SPLASH_READY_DELAY,
    SPLASH_STEP_DELAY,
    STATISTICS_TITLE,
    VICTORY_LINE_DELAY,
)
from quiz_champion.core.boundaries import (
    AnswerBreakdown,
    AnswerFeedback,
    Codex,
    DisplayEvent,
    Farewell,
    MainMenu,
    MenuEntry,
    Notice,
    QuestionShown,
    QuestSelection,
    ResultCard,
    SplashScreen,
    StatisticsCard,
)
from quiz_champion.styling import ColorPalette


def progress_bar(percent: float, width: int = PROGRESS_BAR_WIDTH) -> str:
    """Block-character bar, one cell per ``100 / width`` percent."""
    filled = max(0, min(width, int(percent * width / 100)))
    return "█" * filled + "░" * (width - filled)


class RichRenderer:
    """Display sink that writes every event to a rich ``Console``."""

    def __init__(
        self,
        console: Console,
        *,
        animate: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._console = console
        self._animate = animate
        self._sleep = sleep
        self._handlers: dict[type, Callable] = {
            SplashScreen: self._render_splash,
            MainMenu: self._render_main_menu,
            QuestSelection: self._render_quest_selection,
            Codex: self._render_codex,
            Farewell: self._render_farewell,
            Notice: self._render_notice,
            QuestionShown: self._render_question,
            AnswerFeedback: self._render_feedback,
            ResultCard: self._render_result_card,
            AnswerBreakdown: self._render_breakdown,
            StatisticsCard: self._render_statistics,
        }

    def show(self, event: DisplayEvent) -> None:
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Unsupported display event: {type(event).__name__}")
        handler(event)

    # --- Menus and screens ---

    def _render_splash(self, event: SplashScreen) -> None:
        self._clear()
        title = Text(f"⚡ {' '.join(event.title.upper())} ⚡", style=ColorPalette.TITLE, justify="center")
        tagline = Text(event.tagline, style=ColorPalette.SUBTITLE, justify="center")
        self._console.print(Panel(Text.assemble(title, "\n", tagline), box=box.DOUBLE, padding=(1, 4)))
        self._console.print(Text("  Loading Quest Data...", style=ColorPalette.LABEL))
        for step in range(1, 4):
            self._pause(SPLASH_STEP_DELAY)
            self._console.print(f"  {'█' * 11} {step}/3")
        self._console.print(Text("  ✓ Ready to begin your adventure!", style=ColorPalette.CORRECT))
        self._pause(SPLASH_READY_DELAY)

    def _render_main_menu(self, event: MainMenu) -> None:
        self._clear()
        self._console.rule(Text(f"⚔️  {event.title}  ⚔️", style=ColorPalette.SUBTITLE), style=ColorPalette.TITLE)
        self._render_menu_entries(event.entries)
        self._console.rule(style=ColorPalette.TITLE)

    def _render_quest_selection(self, event: QuestSelection) -> None:
        self._clear()
        self._console.print(
            Panel(Text(f"🗺️  {event.title}  🗺️", justify="center"), style=f"bold {ColorPalette.FRAME}")
        )
        self._render_menu_entries(event.entries)

    def _render_menu_entries(self, entries: tuple[MenuEntry, ...]) -> None:
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Number", style=ColorPalette.MENU_NUMBER, justify="right")
        table.add_column("Entry")
        for number, entry in enumerate(entries, start=1):
            title = Text(entry.title, style=f"bold {entry.style}" if entry.style else "bold")
            if entry.question_count:
                title.append(f" ({entry.question_count}Q)")
            description = Text(entry.description, style=entry.style or ColorPalette.MENU_DESCRIPTION)
            table.add_row(f"{number}.", Text.assemble(title, "\n", description))
        self._console.print()
        self._console.print(table)
        self._console.print()

    def _render_codex(self, event: Codex) -> None:
        self._clear()
        self._console.print(
            Panel(Text(f"📖 {event.title} 📖", justify="center"), style=f"bold {ColorPalette.FRAME}")
        )
        self._render_section("🎮 GAME MECHANICS:", event.mechanics)
        self._render_section(
            "⚡ DIFFICULTY LEVELS:",
            [f"{quest.title} - {quest.description} ({quest.question_count or 0} questions)" for quest in event.quests],
        )
        self._render_section(
            "🏆 GRADING SYSTEM:",
            [f"{ColorPalette.grade(grade).badge} {grade} ({band}) - {label}" for grade, band, label in event.grading],
        )
        self._render_section("📚 CONCEPTS COVERED:", event.concepts)

    def _render_section(self, heading: str, lines) -> None:
        self._console.print(Text(heading, style=ColorPalette.TITLE))
        for line in lines:
            self._console.print(Text(f"  • {line}"))
        self._console.print()

    def _render_farewell(self, event: Farewell) -> None:
        self._clear()
        self._console.print()
        self._console.print(Text(f"  {event.message}", style=ColorPalette.STAT_LABEL))
        self._console.print(Text(f"  {event.subtitle} 🚀", style=ColorPalette.LABEL))
        self._console.print()

    def _render_notice(self, event: Notice) -> None:
        style = ColorPalette.NOTICE_LEVELS.get(event.level, ColorPalette.NOTICE_LEVELS["warning"])
        marker = "❌" if event.level == "error" else "⚠️ "
        self._console.print(Text(f"\n  {marker} {event.message}", style=style))

    # --- Question flow ---

    def _render_question(self, event: QuestionShown) -> None:
        percent = event.progress_percent
        self._console.print()
        self._console.print(Text(f"  Progress: [{progress_bar(percent)}] {percent}%", style=ColorPalette.PROGRESS))
        self._console.print()
        self._console.print(
            Text(f"  Question {event.number} of {event.total}", style=ColorPalette.QUESTION_HEADER)
        )
        self._console.print(
            Panel(Text(event.question.prompt, style=ColorPalette.QUESTION_TEXT), border_style=ColorPalette.FRAME, width=58)
        )
        self._console.print(Text("  Choose wisely:", style=f"bold {ColorPalette.LABEL}"))
        self._console.print()
        for index, option in enumerate(event.question.options):
            line = Text("    ")
            line.append(f"{index + 1})", style=ColorPalette.option_style(index))
            line.append(f"  {option}")
            self._console.print(line)
        self._console.print()

    def _render_feedback(self, event: AnswerFeedback) -> None:
        if event.defaulted:
            message = END_OF_INPUT_UNANSWERED_MESSAGE if event.unanswered else END_OF_INPUT_MESSAGE
            self._console.print(Text(f"  {message}", style=ColorPalette.NOTICE_LEVELS["warning"]))
        if event.is_correct:
            self._console.print(
                Text(f"  ⭐ CORRECT! +{POINTS_PER_CORRECT_ANSWER} Points!", style=ColorPalette.CORRECT)
            )
        else:
            self._console.print(Text("  ❌ WRONG! But don't give up!", style=ColorPalette.INCORRECT))
            self._console.print(Text(f"  Correct Answer: {event.correct_text}"))
        if event.explanation:
            self._console.print(Text(f"  💡 {event.explanation}", style=ColorPalette.EXPLANATION))
        self._pause(FEEDBACK_DELAY)

    def _render_result_card(self, event: ResultCard) -> None:
        result = event.result
        self._console.print()
        for line in ("", "🎊 YOU'VE CONQUERED THIS CHALLENGE! 🎊"):
            self._console.print(Text(line, style=ColorPalette.STAT_LABEL, justify="center"))
            self._pause(VICTORY_LINE_DELAY)
        self._clear()

        grade = ColorPalette.grade(result.letter_grade)
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Label", style=ColorPalette.LABEL)
        table.add_column("Value", style=ColorPalette.VALUE)
        table.add_row("Adventurer:", Text(result.player_name))
        table.add_row("Questions Conquered:", f"{result.correct_count}/{result.total_questions}")
        table.add_row("Victory Rate:", f"{result.percentage:.1f}%")
        table.add_row("Time in Arena:", f"{result.elapsed_seconds} seconds")
        table.add_row(
            "Final Grade:",
            Text(f"{grade.badge} {result.letter_grade} ({result.grade_label})", style=grade.style),
        )
        self._console.print(
            Panel(
                table,
                title=Text(f"⚔️  {RESULT_CARD_TITLE}  ⚔️", style=ColorPalette.SUBTITLE),
                border_style=f"bold {ColorPalette.FRAME}",
                box=box.DOUBLE,
            )
        )

    def _render_breakdown(self, event: AnswerBreakdown) -> None:
        table = Table(title=BREAKDOWN_TITLE, box=box.SIMPLE, expand=True)
        table.add_column("#", justify="right")
        table.add_column("Question", overflow="fold")
        table.add_column("Your answer", overflow="fold")
        table.add_column("Correct answer", overflow="fold")
        table.add_column("Result", justify="center")
        for review in event.reviews:
            table.add_row(
                f"Q{review.number}",
                Text(review.prompt),
                Text(review.selected_text),
                Text("" if review.is_correct else review.correct_text),
                "✅" if review.is_correct else "❌",
            )
        self._console.print(table)

    def _render_statistics(self, event: StatisticsCard) -> None:
        self._clear()
        aggregate = event.aggregate
        self._console.print(
            Panel(Text(f"📊 {STATISTICS_TITLE} 📊", justify="center"), style=ColorPalette.TITLE)
        )
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Label", style=ColorPalette.STAT_LABEL)
        table.add_column("Value")
        table.add_row("Quests Completed:", Text(str(aggregate.session_count), style="cyan"))
        table.add_row("Total Questions Answered:", Text(str(aggregate.total_questions), style="cyan"))
        table.add_row("Correct Answers:", Text(str(aggregate.total_correct), style="green"))
        table.add_row("Average Victory Rate:", Text(f"{aggregate.mean_percentage:.1f}%", style="blue"))
        self._console.print(table)

        bar = Text("  Overall Progress: [", style=ColorPalette.PROGRESS)
        bar.append(progress_bar(aggregate.mean_percentage), style=ColorPalette.PROGRESS_FILLED)
        bar.append(f"] {aggregate.mean_percentage:.1f}%", style=ColorPalette.PROGRESS)
        self._console.print()
        self._console.print(bar)
        self._console.print()

    # --- Pacing ---

    def _clear(self) -> None:
        if self._animate:
            self._console.clear()

    def _pause(self, seconds: float) -> None:
        if self._animate and seconds > 0:
            self._sleep(seconds)
