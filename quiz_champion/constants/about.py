"""Static metadata describing Quiz Champion."""

APP_NAME = "Quiz Champion"
APP_VERSION = "1.0"
APP_TAGLINE = "Your Quest Awaits!"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Quiz Champion is a terminal quiz game. Pick a quest, answer the "
    "multiple-choice questions and collect your grade."
)

CODEX_MECHANICS: tuple[str, ...] = (
    "Answer multiple-choice questions to gain XP",
    "Each correct answer awards you 10 points",
    "Build your achievement history",
    "Track your overall victory rate",
)

CODEX_CONCEPTS: tuple[str, ...] = (
    "Java Loops (for, while, do-while)",
    "Conditionals (if-else, switch)",
    "Collections (ArrayList, List, Set, Map)",
    "Object-Oriented Programming",
)
