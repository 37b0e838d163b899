"""Exception types raised by the quiz core."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a question is constructed with malformed data."""


class InvalidStateError(RuntimeError):
    """Raised when a session operation is called in the wrong state."""


class QuizImportError(ValueError):
    """Raised when a quiz definition file cannot be parsed."""
