"""``study-quiz-init``: prepare the workspace and its quiz.toml."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Mapping, Sequence

from .core import (
    CONFIG_FILENAME,
    QuizConfigError,
    WorkspaceError,
    ensure_workspace,
    write_template,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="study-quiz-init",
        description=(
            "Create the study-quiz workspace and write the default "
            f"{CONFIG_FILENAME} into its config directory."
        ),
    )
    parser.add_argument(
        "--path",
        type=Path,
        help="Workspace root (defaults to STUDY_QUIZ_HOME or ~/.study-quiz).",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help=f"Overwrite an existing {CONFIG_FILENAME}.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress informational output on success.",
    )
    return parser


def _status(created: Mapping[str, bool], key: str) -> str:
    return "created" if created.get(key, False) else "exists"


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        layout = ensure_workspace(path=args.path)
    except WorkspaceError as exc:
        sys.stderr.write(str(exc) + "\n")
        return 1

    config_path = layout.path_for("config") / CONFIG_FILENAME
    config_status = "kept"
    if args.force or not config_path.exists():
        try:
            write_template(config_path, overwrite=args.force)
        except QuizConfigError as exc:
            sys.stderr.write(str(exc) + "\n")
            return 1
        config_status = "written"

    if args.quiet:
        return 0

    home_status = _status(layout.created, "home")
    lines = [f"Workspace ready at {layout.home} ({home_status})"]
    width = max(len(name) for name in layout.directories)
    for name, directory in layout.items():
        status = _status(layout.created, name)
        lines.append(f"  {name.ljust(width)}  {directory} ({status})")
    lines.append(f"Config {config_path} ({config_status})")
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - module CLI guard
    raise SystemExit(main())
