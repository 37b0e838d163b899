"""Line-based input boundary that reads answers from a text stream."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from rich.console import Console

from quiz_champion.constants.ui_constants import (
    ANSWER_PROMPT_TEMPLATE,
    EMPTY_INPUT_MESSAGE,
    NOT_A_NUMBER_MESSAGE,
    OUT_OF_RANGE_TEMPLATE,
)
from quiz_champion.core.boundaries import SelectionRejection, parse_selection

logger = logging.getLogger(__name__)


class ConsoleInput:
    """Prompts on a rich console and validates option numbers until one is valid.

    One instance is shared by the whole application so that menus and quiz
    sessions consume the same stream.
    """

    def __init__(self, console: Console, stream: TextIO | None = None) -> None:
        self._console = console
        self._stream = stream if stream is not None else sys.stdin
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def request_option_selection(self, option_count: int, prompt: str | None = None) -> int | None:
        prompt = prompt or ANSWER_PROMPT_TEMPLATE.format(count=option_count)
        while True:
            raw = self._read_line(prompt)
            if raw is None:
                return None
            parsed = parse_selection(raw, option_count)
            if isinstance(parsed, SelectionRejection):
                logger.debug("Rejected selection %r: %s", raw, parsed.value)
                self._console.print(f"[yellow]{rejection_message(parsed, option_count)}[/yellow]")
                continue
            return parsed

    def request_text(self, prompt: str) -> str | None:
        raw = self._read_line(prompt)
        if raw is None:
            return None
        return raw.strip()

    def _read_line(self, prompt: str) -> str | None:
        if self._exhausted:
            return None
        line = self._console.input(f"  {prompt}", stream=self._stream)
        if not line:
            self._exhausted = True
            self._console.print()
            logger.info("Input stream ended")
            return None
        return line.rstrip("\r\n")


def rejection_message(reason: SelectionRejection, option_count: int) -> str:
    if reason is SelectionRejection.EMPTY:
        return EMPTY_INPUT_MESSAGE
    if reason is SelectionRejection.NOT_A_NUMBER:
        return NOT_A_NUMBER_MESSAGE
    return OUT_OF_RANGE_TEMPLATE.format(count=option_count)
