"""Command-line entry point: ``study-quiz <mode> <filename>``."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence

from .author import author as author_session
from .runner import RunResult, format_score, run as run_quiz
from .console import QuizIO, terminal_io
from .core import (
    QuizConfig,
    QuizConfigError,
    WorkspaceError,
    configure_logger,
    ensure_workspace,
    load_config,
)

USAGE_EXIT_CODE = -1
IO_ERROR_EXIT_CODE = 1
CONFIG_ERROR_EXIT_CODE = 2
INTERRUPTED_EXIT_CODE = 130

LOGGER_NAME = "study_quiz"

RunAction = Callable[..., RunResult]
AuthorAction = Callable[..., object]


@dataclass(frozen=True)
class QuizActions:
    """Operations the dispatcher calls, replaceable in tests.

    Both callables receive the quiz path plus ``io`` and ``encoding``
    keyword arguments.
    """

    run: RunAction = run_quiz
    author: AuthorAction = author_session
    io_factory: Callable[[], QuizIO] = terminal_io


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="study-quiz",
        description="Take or write plain-text quizzes interactively.",
        epilog=(
            "Modes: 'run' asks every question in FILENAME and prints the "
            "score; 'create' appends new questions to FILENAME."
        ),
    )
    parser.add_argument("mode", nargs="?", help="run or create")
    parser.add_argument("filename", nargs="?", help="Quiz file path")
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to quiz.toml (defaults to the workspace config).",
    )
    parser.add_argument(
        "--workspace",
        type=Path,
        help="Workspace root (defaults to STUDY_QUIZ_HOME or ~/.study-quiz).",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override the log file level.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Mirror log records to stderr.",
    )
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    actions: QuizActions | None = None,
) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if not args.mode or not args.filename:
        return USAGE_EXIT_CODE

    actions = actions or QuizActions()
    handler = _HANDLERS.get(args.mode)
    if handler is None:
        return 0

    try:
        layout = ensure_workspace(path=args.workspace)
        config = load_config(args.config, layout=layout)
    except (QuizConfigError, WorkspaceError) as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return CONFIG_ERROR_EXIT_CODE

    logger, _ = configure_logger(
        LOGGER_NAME,
        log_dir=layout.path_for("logs"),
        level=args.log_level or config.log_level,
        verbose=config.verbose if args.verbose is None else args.verbose,
        filename="quiz.log",
    )
    logger.debug(
        "study-quiz invoked",
        extra={"mode": args.mode, "path": args.filename},
    )

    io = actions.io_factory()
    path = Path(args.filename).expanduser()
    try:
        return handler(actions, path, io, config)
    except OSError as exc:
        logger.exception("Quiz file I/O failed", extra={"path": str(path)})
        sys.stderr.write(f"Error: {exc}\n")
        return IO_ERROR_EXIT_CODE
    except (EOFError, KeyboardInterrupt):
        logger.info("Session interrupted", extra={"mode": args.mode})
        io.say()
        io.say("Session interrupted.")
        return INTERRUPTED_EXIT_CODE


def _handle_run(
    actions: QuizActions, path: Path, io: QuizIO, config: QuizConfig
) -> int:
    result = actions.run(path, io=io, encoding=config.encoding)
    io.say(format_score(result))
    return 0


def _handle_create(
    actions: QuizActions, path: Path, io: QuizIO, config: QuizConfig
) -> int:
    actions.author(path, io=io, encoding=config.encoding)
    return 0


_HANDLERS = {
    "run": _handle_run,
    "create": _handle_create,
}


if __name__ == "__main__":  # pragma: no cover - module CLI guard
    raise SystemExit(main())
