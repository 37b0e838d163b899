"""
Integration tests for the game controller with scripted input.
"""

import pytest

from quiz_champion.constants.quiz_constants import DEFAULT_PLAYER_NAME
from quiz_champion.core.boundaries import (
    AnswerBreakdown,
    Codex,
    Farewell,
    MainMenu,
    Notice,
    QuestionShown,
    QuestSelection,
    ResultCard,
    SplashScreen,
    StatisticsCard,
)
from quiz_champion.core.game_controller import GameController
from quiz_champion.core.quiz_catalog import CatalogEntry, QuizCatalog
from quiz_champion.core.services.session_history import SessionHistory


@pytest.fixture
def catalog(sample_questions):
    return QuizCatalog(
        [
            CatalogEntry("sample", "SAMPLE QUEST", "Three questions", lambda: list(sample_questions), "green"),
            CatalogEntry("short", "SHORT QUEST", "One question", lambda: list(sample_questions[:1]), "red"),
        ]
    )


# Main menu: 1 start, 2 achievements, 3 codex, 4 exit.
# Quest menu for the catalog above: 1 sample, 2 short, 3 back.


class TestGameController:
    def test_exit_from_main_menu(self, catalog, make_input, display):
        controller = GameController(catalog, make_input([4]), display)

        controller.run()

        assert isinstance(display.events[0], SplashScreen)
        assert isinstance(display.events[1], MainMenu)
        assert isinstance(display.events[-1], Farewell)
        assert len(controller.history) == 0

    def test_end_of_input_at_main_menu_exits(self, catalog, make_input, display):
        controller = GameController(catalog, make_input([]), display)

        controller.run()

        assert isinstance(display.events[-1], Farewell)
        assert len(display.of_type(MainMenu)) == 1

    def test_play_one_quest_then_exit(self, catalog, make_input, display):
        answers = make_input([1, 1, "Ada", 2, 1, 3, "no", 4])
        controller = GameController(catalog, answers, display)

        controller.run()

        results = controller.history.results()
        assert len(results) == 1
        result = results[0]
        assert result.player_name == "Ada"
        assert result.total_questions == 3
        assert result.correct_count == 3
        assert len(display.of_type(QuestionShown)) == 3
        assert display.of_type(ResultCard)[0].result == result
        assert len(display.of_type(AnswerBreakdown)[0].reviews) == 3
        assert answers.option_requests == [4, 3, 3, 2, 4, 4]

    def test_play_again_yes_offers_quest_menu_again(self, catalog, make_input, display):
        script = [1, 2, "Ada", 1, "yes", 2, "Grace", 2, "n", 4]
        controller = GameController(catalog, make_input(script), display)

        controller.run()

        results = controller.history.results()
        assert [result.player_name for result in results] == ["Ada", "Grace"]
        assert [result.correct_count for result in results] == [0, 1]
        assert len(display.of_type(QuestSelection)) == 2

    def test_back_from_quest_menu(self, catalog, make_input, display):
        controller = GameController(catalog, make_input([1, 3, 4]), display)

        controller.run()

        assert len(controller.history) == 0
        assert len(display.of_type(MainMenu)) == 2

    def test_blank_name_uses_default(self, catalog, make_input, display):
        controller = GameController(catalog, make_input([1, 2, "   ", 1, "no", 4]), display)

        controller.run()

        assert controller.history.results()[0].player_name == DEFAULT_PLAYER_NAME

    def test_input_ending_mid_quest_still_records_result(self, catalog, make_input, display):
        controller = GameController(catalog, make_input([1, 1, "Ada", 2]), display)

        controller.run()

        result = controller.history.results()[0]
        assert result.total_questions == 3
        # Remaining answers default to the first option; question 2's answer is option 1.
        assert result.correct_count == 2
        assert isinstance(display.events[-1], Farewell)

    def test_achievements_when_empty_shows_notice(self, catalog, make_input, display):
        controller = GameController(catalog, make_input([2, "", 4]), display)

        controller.run()

        assert display.of_type(StatisticsCard) == []
        assert len(display.of_type(Notice)) == 1

    def test_achievements_after_quests_aggregate_history(self, catalog, make_input, display):
        script = [1, 2, "Ada", 1, "yes", 2, "Ada", 2, "no", 2, "", 4]
        controller = GameController(catalog, make_input(script), display)

        controller.run()

        aggregate = display.of_type(StatisticsCard)[0].aggregate
        assert aggregate.session_count == 2
        assert aggregate.total_questions == 2
        assert aggregate.total_correct == 1
        assert aggregate.mean_percentage == pytest.approx(50.0)

    def test_codex_lists_grades_and_quests(self, catalog, make_input, display):
        controller = GameController(catalog, make_input([3, "", 4]), display)

        controller.run()

        codex = display.of_type(Codex)[0]
        assert [row[0] for row in codex.grading] == ["A", "B", "C", "D", "F"]
        assert codex.grading[0][1] == "90-100%"
        assert codex.grading[1][1] == "80-89%"
        assert codex.grading[-1][1] == "<60%"
        assert [quest.question_count for quest in codex.quests] == [3, 1]

    def test_uses_injected_history(self, catalog, make_input, display):
        history = SessionHistory()
        controller = GameController(catalog, make_input([1, 2, "Ada", 1, "no", 4]), display, history=history)

        controller.run()

        assert controller.history is history
        assert len(history) == 1

    def test_take_quest_with_given_name_skips_prompt(self, catalog, make_input, display):
        answers = make_input([1])
        controller = GameController(catalog, answers, display)

        result = controller.take_quest(catalog.get("short"), player_name="Ada")

        assert answers.text_requests == []
        assert result.correct_count == 0

    def test_take_quest_with_empty_builder_records_nothing(self, make_input, display):
        catalog = QuizCatalog([CatalogEntry("void", "VOID QUEST", "Nothing here", lambda: [])])
        controller = GameController(catalog, make_input([]), display)

        result = controller.take_quest(catalog.get("void"), player_name="Ada")

        assert result is None
        assert len(controller.history) == 0
        assert display.of_type(Notice)[0].level == "error"

    def test_menus_count_questions_once_per_quest(self, make_input, display, sample_questions):
        calls = []

        def builder():
            calls.append(1)
            return list(sample_questions)

        catalog = QuizCatalog([CatalogEntry("sample", "SAMPLE QUEST", "Counted", builder)])
        controller = GameController(catalog, make_input([1, 2, 3, "", 1, 2, 4]), display)

        controller.run()

        assert len(display.of_type(QuestSelection)) == 2
        assert len(calls) == 1
