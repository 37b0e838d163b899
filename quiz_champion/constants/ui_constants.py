"""Terminal UI constants used by the controller, input boundary and renderer."""

MAIN_MENU_TITLE: str = "MAIN QUEST MENU"
QUEST_SELECTION_TITLE: str = "CHOOSE YOUR QUEST DIFFICULTY"
RESULT_CARD_TITLE: str = "QUEST COMPLETE!"
BREAKDOWN_TITLE: str = "DETAILED ANSWER BREAKDOWN"
STATISTICS_TITLE: str = "YOUR LEGENDARY ACHIEVEMENTS"
CODEX_TITLE: str = "THE CODEX - GAME INFORMATION"

MENU_START_QUEST: tuple[str, str] = ("START QUEST", "Begin a new quiz challenge")
MENU_ACHIEVEMENTS: tuple[str, str] = ("VIEW ACHIEVEMENTS", "Review your past victories")
MENU_CODEX: tuple[str, str] = ("CODEX", "Learn about this adventure")
MENU_EXIT: tuple[str, str] = ("EXIT GAME", "Leave the arena")
MENU_BACK: tuple[str, str] = ("BACK", "Return to main menu")

ANSWER_PROMPT_TEMPLATE: str = "Your answer (1-{count}): "
MENU_PROMPT_TEMPLATE: str = "Enter your choice (1-{count}): "
PLAYER_NAME_PROMPT: str = "Enter your name: "
PLAY_AGAIN_PROMPT: str = "Would you like to try another quest? (yes/no): "
CONTINUE_PROMPT: str = "Press ENTER to continue..."

EMPTY_INPUT_MESSAGE: str = "Please enter a valid number."
NOT_A_NUMBER_MESSAGE: str = "Invalid input! Please enter a number."
OUT_OF_RANGE_TEMPLATE: str = "Please enter a number between 1 and {count}."
END_OF_INPUT_MESSAGE: str = "Input ended unexpectedly. Using default answer."
END_OF_INPUT_UNANSWERED_MESSAGE: str = "Input ended unexpectedly. Question left unanswered."

NO_QUESTIONS_MESSAGE: str = "No questions available. Please add questions to the quiz."
NO_RESULTS_MESSAGE: str = "No quest victories yet. Complete a quest to see your achievements!"
FAREWELL_MESSAGE: str = "Thanks for playing Quiz Champion!"
FAREWELL_SUBTITLE: str = "May your code always compile on the first try!"

PROGRESS_BAR_WIDTH: int = 20

# Pacing in seconds; the renderer skips all of these when animation is off.
SPLASH_STEP_DELAY: float = 0.33
SPLASH_READY_DELAY: float = 1.0
FEEDBACK_DELAY: float = 1.5
VICTORY_LINE_DELAY: float = 0.3
