"""Quiz-related constants shared across the core and the terminal UI."""

MIN_OPTION_COUNT: int = 2
MAX_IMPORT_OPTION_COUNT: int = 8

NO_ANSWER: int = -1
INVALID_OPTION_MARKER: str = "Invalid"
DEFAULT_PLAYER_NAME: str = "Anonymous Adventurer"
POINTS_PER_CORRECT_ANSWER: int = 10

# Inclusive lower bound of each band, highest first.
GRADE_BANDS: tuple[tuple[float, str], ...] = (
    (90.0, "A"),
    (80.0, "B"),
    (70.0, "C"),
    (60.0, "D"),
)
FAILING_GRADE: str = "F"

GRADE_LABELS: dict[str, str] = {
    "A": "Legendary!",
    "B": "Excellent!",
    "C": "Good!",
    "D": "Keep trying!",
    "F": "Don't give up!",
}
