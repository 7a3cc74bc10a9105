"""TOML configuration for the study-quiz commands."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Mapping, MutableMapping

try:  # Python >= 3.11 ships ``tomllib`` in the stdlib.
    import tomllib
except ModuleNotFoundError as exc:  # pragma: no cover - interpreter guard
    raise RuntimeError("Python 3.11+ is required for tomllib support.") from exc

from .workspace import WorkspaceLayout

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
]

CONFIG_FILENAME = "quiz.toml"

_DEFAULTS: dict[str, dict[str, Any]] = {
    "logging": {
        "level": "INFO",
        "verbose": False,
    },
    "files": {
        "encoding": "utf-8",
    },
}


class QuizConfigError(RuntimeError):
    """Raised when config IO or validation fails."""


@dataclass(frozen=True)
class QuizConfig:
    """Resolved settings shared by the quiz commands."""

    log_level: str = "INFO"
    verbose: bool = False
    encoding: str = "utf-8"
    source: Path | None = None


def load_toml(path: Path) -> Mapping[str, Any]:
    """Load a TOML document, surfacing failures as :class:`QuizConfigError`."""

    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except FileNotFoundError as exc:
        raise QuizConfigError(f"Config file not found: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise QuizConfigError(f"Failed to parse config TOML: {exc}") from exc


def merge_defaults(
    base: MutableMapping[str, Any],
    override: Mapping[str, Any],
    *,
    path: str = "",
) -> None:
    """Recursively merge ``override`` into ``base`` rejecting unknown keys."""

    for key, value in override.items():
        dotted = f"{path}{key}"
        if key not in base:
            raise QuizConfigError(f"Unknown configuration key '{dotted}'.")
        current = base[key]
        if isinstance(current, MutableMapping):
            if not isinstance(value, Mapping):
                raise QuizConfigError(
                    "Expected table for '{0}', found {1}.".format(
                        dotted, type(value).__name__
                    )
                )
            merge_defaults(current, value, path=f"{dotted}.")
            continue
        if not isinstance(value, type(current)):
            raise QuizConfigError(
                "Expected {0} for '{1}', found {2}.".format(
                    type(current).__name__, dotted, type(value).__name__
                )
            )
        base[key] = value


def find_config_path(
    explicit: Path | None, layout: WorkspaceLayout | None
) -> Path | None:
    """Return the config file to load, or ``None`` to use defaults.

    An explicit path must exist; the workspace copy is optional.
    """

    if explicit is not None:
        candidate = Path(explicit).expanduser()
        if not candidate.exists():
            raise QuizConfigError(f"Config file not found: {candidate}")
        return candidate
    if layout is None:
        return None
    candidate = layout.path_for("config") / CONFIG_FILENAME
    return candidate if candidate.exists() else None


def load_config(
    explicit: Path | None = None,
    *,
    layout: WorkspaceLayout | None = None,
) -> QuizConfig:
    data = copy.deepcopy(_DEFAULTS)
    source = find_config_path(explicit, layout)
    if source is not None:
        merge_defaults(data, load_toml(source))

    level = str(data["logging"]["level"]).strip().upper()
    encoding = str(data["files"]["encoding"]).strip()
    if not encoding:
        raise QuizConfigError("'files.encoding' must not be empty.")
    return QuizConfig(
        log_level=level or "INFO",
        verbose=bool(data["logging"]["verbose"]),
        encoding=encoding,
        source=source,
    )


def read_template() -> str:
    """Return the packaged ``quiz.toml`` template."""

    resource = resources.files("study_quiz").joinpath(CONFIG_FILENAME)
    return resource.read_text(encoding="utf-8")


def write_template(
    path: Path, *, overwrite: bool = False, mode: int = 0o600
) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.exists() and not overwrite:
        raise QuizConfigError(f"Config already exists: {path}")
    path.write_text(read_template(), encoding="utf-8")
    try:
        path.chmod(mode)
    except PermissionError:  # pragma: no cover - depends on filesystem
        pass
    return path
