"""Interactive question presenters.

Each presenter prints a question, re-prompts until the answer is well formed
and reports whether it matched the stored answer. There is no retry limit;
an aborted prompt (``EOFError``/``KeyboardInterrupt``) propagates.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from .console import QuizIO
from .records import QuestionRecord

__all__ = [
    "TRUE_FALSE_PROMPT",
    "MULTIPLE_CHOICE_PROMPT",
    "in_choice_range",
    "parse_number",
    "present_multiple_choice",
    "present_record",
    "present_true_false",
    "render_choices",
]

TRUE_FALSE_PROMPT = "Is this statement true or false? (T/F):"
MULTIPLE_CHOICE_PROMPT = "Enter choice:"

_TRUE_FALSE_VALUES = {"T", "F"}

_LOGGER = logging.getLogger(__name__)


def parse_number(raw: str | None) -> float | None:
    """Parse user input as a finite number, ``None`` when it is not one."""

    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def in_choice_range(value: float | None, count: int) -> bool:
    return value is not None and 0 < value <= count


def render_choices(choices: Sequence[str], *, io: QuizIO) -> None:
    for position, choice in enumerate(choices, start=1):
        io.say(f"{position}) {choice}")


def present_true_false(question: str, answer: str, *, io: QuizIO) -> bool:
    io.say(question)
    response = ""
    while response.upper() not in _TRUE_FALSE_VALUES:
        response = io.ask(TRUE_FALSE_PROMPT) or ""

    is_correct = response.upper() == answer.upper()
    if is_correct:
        io.say("Correct!")
    else:
        io.say(f"Incorrect. The answer is {answer}")
    return is_correct


def present_multiple_choice(
    question: str,
    answer: str,
    choices: Sequence[str],
    *,
    io: QuizIO,
) -> bool:
    io.say(question)
    render_choices(choices, io=io)

    while True:
        response = io.ask(MULTIPLE_CHOICE_PROMPT)
        selected = parse_number(response)
        if in_choice_range(selected, len(choices)):
            break
        io.say(
            f"Your answer '{response}' is invalid. It needs to be a number "
            f"in the range of 1 to {len(choices)}"
        )

    expected = parse_number(answer)
    is_correct = expected is not None and selected == expected
    if is_correct:
        io.say("Correct.")
    else:
        io.say(f"Incorrect. The answer is {answer}")
    return is_correct


def present_record(record: QuestionRecord, *, io: QuizIO) -> bool:
    """Present ``record`` with the presenter matching its kind."""

    if record.is_multiple_choice:
        result = present_multiple_choice(
            record.question, record.answer, record.choices, io=io
        )
    else:
        result = present_true_false(record.question, record.answer, io=io)
    _LOGGER.debug(
        "Question answered",
        extra={"kind": record.kind.value, "correct": result},
    )
    return result
