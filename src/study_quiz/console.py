"""Console and prompt seam shared by the presenters and the author."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

PromptProvider = Callable[[str], str]


class LinePrompt(Prompt):
    """Rich prompt returning the raw line, empty input included."""

    prompt_suffix = " "

    def process_response(self, value: str) -> str:
        return value


@dataclass
class QuizIO:
    """Output console plus the callable used to read one line of input.

    Prompt providers receive the prompt message and return the user's line.
    They may raise ``EOFError`` or ``KeyboardInterrupt`` to abort a session.
    """

    console: Console
    prompt: PromptProvider

    def say(self, text: str = "") -> None:
        # User text is printed verbatim; brackets are not Rich markup here.
        self.console.print(text, markup=False, highlight=False, emoji=False)

    def ask(self, message: str) -> str:
        return self.prompt(message)


def terminal_io(console: Console | None = None) -> QuizIO:
    """Return a :class:`QuizIO` bound to the interactive terminal."""

    target = console or Console()

    def _ask(message: str) -> str:
        return LinePrompt.ask(Text(message), console=target)

    return QuizIO(console=target, prompt=_ask)
