"""Interactive authoring of new quiz records.

Builders return the encoded record line, or an empty string when the user
left a required field blank. The session loop stops on the first empty
result, so a blank field ends authoring just like pressing ENTER at the
question-type prompt.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .console import QuizIO, terminal_io
from .presenters import in_choice_range, parse_number, render_choices
from .records import QuestionKind, QuestionRecord, format_record, join_lines

__all__ = [
    "MIN_CHOICES",
    "author",
    "create_multiple_choice",
    "create_question",
    "create_true_false",
]

MIN_CHOICES = 2

QUESTION_TYPE_PROMPT = (
    "What type of question do you want to create (MC, TF or ENTER to end)"
)
QUESTION_PROMPT = "Enter the question:"
TRUE_FALSE_ANSWER_PROMPT = "Enter the answer (T/F):"
CHOICE_PROMPT = "Enter a possible answer (ENTER to end):"
CORRECT_CHOICE_PROMPT = "Which one is the correct answer:"

_LOGGER = logging.getLogger(__name__)


def create_true_false(*, io: QuizIO) -> str:
    question = io.ask(QUESTION_PROMPT)
    answer = io.ask(TRUE_FALSE_ANSWER_PROMPT)
    if not question or not answer:
        return ""
    return format_record(
        QuestionRecord(QuestionKind.TRUE_FALSE, question, answer)
    )


def create_multiple_choice(*, io: QuizIO) -> str:
    question = io.ask(QUESTION_PROMPT)
    if not question:
        return ""

    choices: list[str] = []
    while True:
        option = io.ask(CHOICE_PROMPT)
        if option:
            choices.append(option)
            continue
        if len(choices) >= MIN_CHOICES:
            break
        io.say(
            f"You need to add at least two options (you have {len(choices)})"
        )

    io.say(question)
    render_choices(choices, io=io)

    while True:
        answer = io.ask(CORRECT_CHOICE_PROMPT)
        if answer and in_choice_range(parse_number(answer), len(choices)):
            break
        io.say(f"Type valid answer (number between 1 and {len(choices)})")

    return format_record(
        QuestionRecord(
            QuestionKind.MULTIPLE_CHOICE, question, answer, tuple(choices)
        )
    )


def create_question(*, io: QuizIO) -> str:
    """Ask for a question type and build one record, ``""`` to stop."""

    builders = {
        QuestionKind.MULTIPLE_CHOICE.value: create_multiple_choice,
        QuestionKind.TRUE_FALSE.value: create_true_false,
    }
    while True:
        kind = io.ask(QUESTION_TYPE_PROMPT)
        if not kind:
            return ""
        builder = builders.get(kind.upper())
        if builder is not None:
            return builder(io=io)
        io.say(f"Please choose MC, TF or ENTER to end. You typed {kind}")


def author(
    path: Path,
    *,
    io: QuizIO | None = None,
    encoding: str = "utf-8",
) -> list[str]:
    """Collect new records interactively and append them to ``path``.

    Nothing is written until the session ends; the file is then opened once
    in append mode (and created when missing, even for an empty session).
    Returns the appended lines.
    """

    io = io or terminal_io()
    lines: list[str] = []
    while True:
        line = create_question(io=io)
        if not line:
            break
        lines.append(line)

    with Path(path).open("a", encoding=encoding, newline="") as handle:
        handle.write(join_lines(lines))
    _LOGGER.info(
        "Appended quiz records",
        extra={"path": str(path), "record_count": len(lines)},
    )
    return lines
