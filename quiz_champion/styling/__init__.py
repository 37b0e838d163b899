"""Styling module for the Quiz Champion terminal UI."""

from .color_palette import ColorPalette, GradeStyle

__all__ = ["ColorPalette", "GradeStyle"]
