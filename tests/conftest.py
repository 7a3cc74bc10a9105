from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest

TESTS_DIR = Path(__file__).resolve().parent
ROOT = TESTS_DIR.parent
for extra in (TESTS_DIR, ROOT / "src"):
    path_str = str(extra)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

from study_quiz.core import WORKSPACE_ENV  # noqa: E402

SAMPLE_QUIZ = (
    "tf,the sky is blue,t\n"
    "mc,How many legs does a dog have?,2,a,b,c,d"
)


@pytest.fixture(autouse=True)
def quiz_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the workspace at a per-test directory."""

    home = tmp_path / "quiz-home"
    monkeypatch.setenv(WORKSPACE_ENV, str(home))
    return home


@pytest.fixture(autouse=True)
def _reset_quiz_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("study_quiz")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True


@pytest.fixture
def sample_quiz(tmp_path: Path) -> Path:
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE_QUIZ, encoding="utf-8")
    return path
