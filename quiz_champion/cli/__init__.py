"""Terminal front end: console input boundary and rich renderer."""

from .console_input import ConsoleInput
from .renderer import RichRenderer

__all__ = ["ConsoleInput", "RichRenderer"]
