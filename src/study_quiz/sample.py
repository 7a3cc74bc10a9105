"""Starter quiz file generator (``study-quiz-sample``)."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .records import join_lines

SAMPLE_RECORDS = (
    "tf,the sky is blue,t",
    "mc,How many legs does a dog have?,2,a,b,c,d",
)

_LOGGER = logging.getLogger(__name__)


def create_sample(path: Path, *, encoding: str = "utf-8") -> Path:
    """Write the two-record starter quiz to ``path``, replacing its content."""

    target = Path(path)
    target.write_text(
        join_lines(list(SAMPLE_RECORDS)), encoding=encoding, newline=""
    )
    _LOGGER.info("Wrote sample quiz", extra={"path": str(target)})
    return target


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="study-quiz-sample",
        description="Write a starter quiz file with one TF and one MC question.",
    )
    parser.add_argument("filename", type=Path, help="Quiz file to write")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    try:
        written = create_sample(args.filename)
    except OSError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    sys.stdout.write(f"Wrote sample quiz to {written}\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - module CLI guard
    raise SystemExit(main())
