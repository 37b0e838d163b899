"""Application entry point for Quiz Champion."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from rich.console import Console
from rich.text import Text

from quiz_champion.cli.console_input import ConsoleInput
from quiz_champion.cli.renderer import RichRenderer
from quiz_champion.constants.about import APP_ABOUT_TEXT, APP_NAME, APP_VERSION
from quiz_champion.core.errors import QuizImportError
from quiz_champion.core.game_controller import GameController
from quiz_champion.core.quiz_catalog import QuizCatalog
from quiz_champion.core.quiz_importer import load_quiz_from_file
from quiz_champion.core.services.quiz_session import EndOfInputPolicy
from quiz_champion.utils.logging_config import configure_logging

EXIT_IMPORT_ERROR = 2
EXIT_INTERRUPTED = 130


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quiz-champion", description=APP_ABOUT_TEXT)
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    parser.add_argument(
        "--no-animation",
        action="store_true",
        help="Skip pauses and screen clearing.",
    )
    parser.add_argument(
        "--quiz-file",
        action="append",
        type=Path,
        default=[],
        metavar="PATH",
        help="Add a quiz from a text file to the quest menu (repeatable).",
    )
    parser.add_argument(
        "--mark-unanswered",
        action="store_true",
        help="When input ends mid-question, score it as unanswered instead of choosing option 1.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    return parser


def _build_catalog(quiz_files: list[Path], logger: logging.Logger) -> QuizCatalog:
    catalog = QuizCatalog.default()
    for quiz_file in quiz_files:
        imported = load_quiz_from_file(quiz_file)
        catalog.register(imported.catalog_entry())
        logger.info("Added quiz '%s' from %s", imported.key, quiz_file)
    return catalog


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, wire the console boundaries and run the game loop."""
    args = _build_parser().parse_args(argv)
    logger = configure_logging(args.log_level)
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    console = Console()
    try:
        catalog = _build_catalog(args.quiz_file, logger)
    except (OSError, QuizImportError, ValueError) as exc:
        logger.error("Could not load quiz file: %s", exc)
        console.print(Text.assemble(("Could not load quiz file: ", "red"), str(exc)))
        return EXIT_IMPORT_ERROR

    policy = EndOfInputPolicy.MARK_UNANSWERED if args.mark_unanswered else EndOfInputPolicy.DEFAULT_FIRST_OPTION
    controller = GameController(
        catalog=catalog,
        answer_input=ConsoleInput(console),
        display=RichRenderer(console, animate=not args.no_animation),
        end_of_input_policy=policy,
    )
    try:
        controller.run()
    except KeyboardInterrupt:
        console.print("\n[bold yellow]Game interrupted. Goodbye![/]")
        return EXIT_INTERRUPTED

    logger.info("Finished after %d quest(s)", len(controller.history))
    return 0


if __name__ == "__main__":
    sys.exit(main())
