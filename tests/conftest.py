import io
from datetime import datetime, timedelta, timezone

import pytest
from rich.console import Console

from quiz_champion.core.models import Question


class ScriptedInput:
    """Input boundary that replays a fixed list of responses, then reports end of input."""

    def __init__(self, responses=None):
        self._responses = list(responses or [])
        self.option_requests = []
        self.text_requests = []

    def request_option_selection(self, option_count, prompt=None):
        self.option_requests.append(option_count)
        return self._next()

    def request_text(self, prompt):
        self.text_requests.append(prompt)
        return self._next()

    def _next(self):
        if not self._responses:
            return None
        return self._responses.pop(0)


class RecordingDisplay:
    """Display sink that keeps every event it receives."""

    def __init__(self):
        self.events = []

    def show(self, event):
        self.events.append(event)

    def of_type(self, event_type):
        return [event for event in self.events if isinstance(event, event_type)]


class SteppingClock:
    """Clock returning a start time, then that time plus ``step`` on every later call."""

    def __init__(self, step_seconds=0.0):
        self._start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self._step = timedelta(seconds=step_seconds)
        self._calls = 0

    def __call__(self):
        value = self._start + self._step * self._calls
        self._calls += 1
        return value


@pytest.fixture
def sample_questions():
    return [
        Question.create("2 + 2?", ["3", "4", "5"], 1, "Basic addition."),
        Question.create("Capital of France?", ["Paris", "Rome"], 0, "Paris is the capital."),
        Question.create("Largest planet?", ["Mars", "Venus", "Jupiter", "Earth"], 2, "Jupiter is the largest."),
    ]


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def text_console():
    """Rich console writing plain text into a buffer."""
    return Console(file=io.StringIO(), width=100, color_system=None, force_terminal=False)


@pytest.fixture
def make_input():
    """Factory for scripted input boundaries."""
    return ScriptedInput
