"""Run a quiz file question by question and tally the score."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple

from .console import QuizIO, terminal_io
from .presenters import present_record
from .records import parse_record, split_lines

__all__ = ["RunResult", "format_score", "run"]

_LOGGER = logging.getLogger(__name__)


class RunResult(NamedTuple):
    total_questions: int
    total_correct: int

    @property
    def percentage(self) -> float:
        if self.total_questions == 0:
            return 0.0
        return self.total_correct / self.total_questions * 100


def run(
    path: Path,
    *,
    io: QuizIO | None = None,
    encoding: str = "utf-8",
) -> RunResult:
    """Present every line of the quiz file at ``path``.

    The file is read in full up front; ``OSError`` from reading is left to
    the caller. Every split line counts as a question, including the empty
    line that follows a trailing newline.
    """

    io = io or terminal_io()
    with Path(path).open("r", encoding=encoding, newline="") as handle:
        text = handle.read()
    lines = split_lines(text)
    _LOGGER.info(
        "Loaded quiz file",
        extra={"path": str(path), "line_count": len(lines)},
    )

    correct = 0
    for line in lines:
        if present_record(parse_record(line), io=io):
            correct += 1

    result = RunResult(total_questions=len(lines), total_correct=correct)
    _LOGGER.info(
        "Quiz finished",
        extra={
            "path": str(path),
            "total_questions": result.total_questions,
            "total_correct": result.total_correct,
        },
    )
    return result


def format_score(result: RunResult) -> str:
    return (
        f"You have {result.total_correct}/{result.total_questions} "
        f"({result.percentage}%) correct."
    )
