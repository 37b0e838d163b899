"""Top-level game loop: menus, quest selection and achievements.

The controller owns the single ``SessionHistory`` of the run and passes the one
injected input boundary and display sink to every session it creates.
"""

from __future__ import annotations

import logging

from quiz_champion.constants.about import (
    APP_NAME,
    APP_TAGLINE,
    CODEX_CONCEPTS,
    CODEX_MECHANICS,
)
from quiz_champion.constants.quiz_constants import DEFAULT_PLAYER_NAME, GRADE_BANDS, GRADE_LABELS
from quiz_champion.constants.ui_constants import (
    CODEX_TITLE,
    CONTINUE_PROMPT,
    FAREWELL_MESSAGE,
    FAREWELL_SUBTITLE,
    MAIN_MENU_TITLE,
    MENU_ACHIEVEMENTS,
    MENU_BACK,
    MENU_CODEX,
    MENU_EXIT,
    MENU_PROMPT_TEMPLATE,
    MENU_START_QUEST,
    NO_RESULTS_MESSAGE,
    PLAY_AGAIN_PROMPT,
    PLAYER_NAME_PROMPT,
    QUEST_SELECTION_TITLE,
)
from quiz_champion.core.boundaries import (
    AnswerBreakdown,
    AnswerInput,
    Codex,
    DisplaySink,
    Farewell,
    MainMenu,
    MenuEntry,
    Notice,
    QuestSelection,
    ResultCard,
    SplashScreen,
    StatisticsCard,
)
from quiz_champion.core.models import ScoreResult
from quiz_champion.core.quiz_catalog import CatalogEntry, QuizCatalog
from quiz_champion.core.services.quiz_session import EndOfInputPolicy, QuizSession, SessionState
from quiz_champion.core.services.session_history import SessionHistory

logger = logging.getLogger(__name__)

_MAIN_MENU_ENTRIES = (MENU_START_QUEST, MENU_ACHIEVEMENTS, MENU_CODEX, MENU_EXIT)
_START_QUEST, _ACHIEVEMENTS, _CODEX, _EXIT = range(1, len(_MAIN_MENU_ENTRIES) + 1)


class GameController:
    """Runs the main menu until the player exits or the input ends."""

    def __init__(
        self,
        catalog: QuizCatalog,
        answer_input: AnswerInput,
        display: DisplaySink,
        history: SessionHistory | None = None,
        end_of_input_policy: EndOfInputPolicy = EndOfInputPolicy.DEFAULT_FIRST_OPTION,
    ) -> None:
        self._catalog = catalog
        self._input = answer_input
        self._display = display
        self._history = history if history is not None else SessionHistory()
        self._end_of_input_policy = end_of_input_policy

    @property
    def history(self) -> SessionHistory:
        return self._history

    def run(self) -> None:
        self._display.show(SplashScreen(APP_NAME, APP_TAGLINE))
        while True:
            self._display.show(
                MainMenu(
                    MAIN_MENU_TITLE,
                    tuple(MenuEntry(title, description) for title, description in _MAIN_MENU_ENTRIES),
                )
            )
            choice = self._ask_menu_choice(len(_MAIN_MENU_ENTRIES))
            if choice is None or choice == _EXIT:
                break
            if choice == _START_QUEST:
                self.select_and_take_quests()
            elif choice == _ACHIEVEMENTS:
                self.show_achievements()
            elif choice == _CODEX:
                self.show_codex()

        self._display.show(Farewell(FAREWELL_MESSAGE, FAREWELL_SUBTITLE))

    def select_and_take_quests(self) -> None:
        """Quest menu; keeps offering quests while the player answers yes."""
        while True:
            entry = self._choose_quest()
            if entry is None:
                return
            self.take_quest(entry)
            answer = self._input.request_text(PLAY_AGAIN_PROMPT)
            if answer is None or answer.strip().lower() not in ("yes", "y"):
                return

    def take_quest(self, entry: CatalogEntry, player_name: str | None = None) -> ScoreResult | None:
        if player_name is None:
            player_name = self._ask_player_name()

        session = QuizSession(self._input, self._display, end_of_input_policy=self._end_of_input_policy)
        session.attach_questions(self._catalog.build(entry.key))
        logger.info("%s starts quest '%s'", player_name, entry.key)
        session.start()
        if session.state is not SessionState.COMPLETE:
            return None

        result = session.compute_result(player_name)
        self._history.record(result)
        self._display.show(ResultCard(result))
        self._display.show(AnswerBreakdown(tuple(session.answer_breakdown())))
        return result

    def show_achievements(self) -> None:
        if self._history.is_empty():
            self._display.show(Notice(NO_RESULTS_MESSAGE, level="error"))
        else:
            self._display.show(StatisticsCard(self._history.aggregate()))
        self._wait_for_enter()

    def show_codex(self) -> None:
        grading = []
        upper = 100
        for lower, grade in GRADE_BANDS:
            grading.append((grade, f"{int(lower)}-{upper}%", GRADE_LABELS[grade]))
            upper = int(lower) - 1
        grading.append(("F", f"<{int(GRADE_BANDS[-1][0])}%", GRADE_LABELS["F"]))

        self._display.show(
            Codex(
                title=CODEX_TITLE,
                mechanics=CODEX_MECHANICS,
                grading=tuple(grading),
                quests=self._quest_entries(),
                concepts=CODEX_CONCEPTS,
            )
        )
        self._wait_for_enter()

    # --- Internals ---

    def _choose_quest(self) -> CatalogEntry | None:
        catalog_entries = self._catalog.entries()
        back = MenuEntry(*MENU_BACK, style="cyan")
        self._display.show(QuestSelection(QUEST_SELECTION_TITLE, self._quest_entries() + (back,)))
        choice = self._ask_menu_choice(len(catalog_entries) + 1)
        if choice is None or choice > len(catalog_entries):
            return None
        return catalog_entries[choice - 1]

    def _quest_entries(self) -> tuple[MenuEntry, ...]:
        return tuple(
            MenuEntry(
                title=entry.title,
                description=entry.tagline,
                style=entry.style,
                question_count=self._catalog.question_count(entry.key),
            )
            for entry in self._catalog.entries()
        )

    def _ask_menu_choice(self, option_count: int) -> int | None:
        return self._input.request_option_selection(
            option_count, prompt=MENU_PROMPT_TEMPLATE.format(count=option_count)
        )

    def _ask_player_name(self) -> str:
        name = self._input.request_text(PLAYER_NAME_PROMPT)
        if name is None or not name.strip():
            return DEFAULT_PLAYER_NAME
        return name.strip()

    def _wait_for_enter(self) -> None:
        self._input.request_text(CONTINUE_PROMPT)
