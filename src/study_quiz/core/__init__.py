"""Shared helpers for the study-quiz commands."""

from __future__ import annotations

from .config import (
    CONFIG_FILENAME,
    QuizConfig,
    QuizConfigError,
    find_config_path,
    load_config,
    load_toml,
    merge_defaults,
    read_template,
    write_template,
)
from .logging import JsonLogFormatter, configure_logger
from .workspace import (
    WORKSPACE_ENV,
    WorkspaceError,
    WorkspaceLayout,
    ensure_workspace,
)

__all__ = [
    "CONFIG_FILENAME",
    "QuizConfig",
    "QuizConfigError",
    "find_config_path",
    "load_config",
    "load_toml",
    "merge_defaults",
    "read_template",
    "write_template",
    "JsonLogFormatter",
    "configure_logger",
    "WORKSPACE_ENV",
    "WorkspaceError",
    "WorkspaceLayout",
    "ensure_workspace",
]
