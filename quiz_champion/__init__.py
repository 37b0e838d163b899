"""Quiz Champion: a terminal quiz game."""

from quiz_champion.constants.about import APP_VERSION

__version__ = APP_VERSION
