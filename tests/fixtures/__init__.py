"""Shared testing helpers for the study_quiz test suite."""

from .prompts import (  # noqa: F401
    ScriptedPrompt,
    output_lines,
    recording_console,
    scripted_io,
)

__all__ = [
    "ScriptedPrompt",
    "output_lines",
    "recording_console",
    "scripted_io",
]
