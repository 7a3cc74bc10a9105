from .author import (
    author,
    create_multiple_choice,
    create_question,
    create_true_false,
)
from .cli import QuizActions, build_arg_parser, main
from .console import QuizIO, terminal_io
from .presenters import (
    present_multiple_choice,
    present_record,
    present_true_false,
)
from .records import (
    QuestionKind,
    QuestionRecord,
    format_record,
    parse_record,
    split_lines,
)
from .runner import RunResult, format_score, run
from .sample import SAMPLE_RECORDS, create_sample

__all__ = [
    "author",
    "create_multiple_choice",
    "create_question",
    "create_true_false",
    "QuizActions",
    "build_arg_parser",
    "main",
    "QuizIO",
    "terminal_io",
    "present_multiple_choice",
    "present_record",
    "present_true_false",
    "QuestionKind",
    "QuestionRecord",
    "format_record",
    "parse_record",
    "split_lines",
    "RunResult",
    "format_score",
    "run",
    "SAMPLE_RECORDS",
    "create_sample",
]
