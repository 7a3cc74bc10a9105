"""Line-oriented quiz record format.

Each line of a quiz file is one question, fields joined with commas::

    TF,<question>,<T|F>
    MC,<question>,<1-based answer index>,<choice 1>,<choice 2>,...

The kind tag is case-insensitive and anything other than ``MC`` is treated
as a true/false question. There is no quoting or escaping, so question and
choice text cannot contain commas.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "FIELD_SEPARATOR",
    "QuestionKind",
    "QuestionRecord",
    "format_record",
    "join_lines",
    "parse_record",
    "split_lines",
]

FIELD_SEPARATOR = ","

_LINE_BREAK_RE = re.compile(r"\r?\n")


class QuestionKind(str, Enum):
    TRUE_FALSE = "TF"
    MULTIPLE_CHOICE = "MC"

    @classmethod
    def from_tag(cls, tag: str) -> "QuestionKind":
        if tag.upper() == cls.MULTIPLE_CHOICE.value:
            return cls.MULTIPLE_CHOICE
        return cls.TRUE_FALSE


@dataclass(frozen=True)
class QuestionRecord:
    """One decoded quiz line."""

    kind: QuestionKind
    question: str
    answer: str
    choices: tuple[str, ...] = ()

    @property
    def is_multiple_choice(self) -> bool:
        return self.kind is QuestionKind.MULTIPLE_CHOICE


def split_lines(text: str) -> list[str]:
    """Split file content into record lines.

    A trailing line break yields a trailing empty line, which callers still
    count as a question.
    """

    return _LINE_BREAK_RE.split(text)


def join_lines(lines: list[str]) -> str:
    return "\n".join(lines)


def parse_record(line: str) -> QuestionRecord:
    fields = line.split(FIELD_SEPARATOR)
    tag, question, answer = (fields + ["", "", ""])[:3]
    kind = QuestionKind.from_tag(tag)
    choices = tuple(fields[3:]) if kind is QuestionKind.MULTIPLE_CHOICE else ()
    return QuestionRecord(
        kind=kind,
        question=question,
        answer=answer,
        choices=choices,
    )


def format_record(record: QuestionRecord) -> str:
    fields = [record.kind.value, record.question, record.answer]
    if record.is_multiple_choice:
        fields.extend(record.choices)
    return FIELD_SEPARATOR.join(fields)
