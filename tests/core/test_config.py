from __future__ import annotations

import pytest

from study_quiz.core import (
    QuizConfigError,
    ensure_workspace,
    find_config_path,
    load_config,
    merge_defaults,
    read_template,
    write_template,
)


def test_defaults_without_config_file():
    config = load_config()
    assert config.log_level == "INFO"
    assert config.verbose is False
    assert config.encoding == "utf-8"
    assert config.source is None


def test_workspace_config_is_picked_up(quiz_home):
    layout = ensure_workspace()
    path = layout.path_for("config") / "quiz.toml"
    path.write_text(
        '[logging]\nlevel = "debug"\nverbose = true\n', encoding="utf-8"
    )
    config = load_config(layout=layout)
    assert config.log_level == "DEBUG"
    assert config.verbose is True
    assert config.source == path


def test_explicit_path_must_exist(tmp_path):
    with pytest.raises(QuizConfigError, match="not found"):
        find_config_path(tmp_path / "missing.toml", None)


def test_workspace_without_config_uses_defaults(quiz_home):
    layout = ensure_workspace()
    assert find_config_path(None, layout) is None


def test_invalid_toml_is_reported(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text("[logging\n", encoding="utf-8")
    with pytest.raises(QuizConfigError, match="Failed to parse"):
        load_config(path)


def test_unknown_keys_are_rejected(tmp_path):
    path = tmp_path / "extra.toml"
    path.write_text("[logging]\ncolour = true\n", encoding="utf-8")
    with pytest.raises(QuizConfigError, match="logging.colour"):
        load_config(path)


def test_merge_defaults_type_checks():
    base = {"logging": {"level": "INFO", "verbose": False}}
    with pytest.raises(QuizConfigError, match="Expected table"):
        merge_defaults(base, {"logging": "loud"})
    with pytest.raises(QuizConfigError, match="Expected bool"):
        merge_defaults(base, {"logging": {"verbose": "yes"}})
    merge_defaults(base, {"logging": {"level": "ERROR"}})
    assert base["logging"]["level"] == "ERROR"


def test_empty_encoding_is_rejected(tmp_path):
    path = tmp_path / "enc.toml"
    path.write_text('[files]\nencoding = " "\n', encoding="utf-8")
    with pytest.raises(QuizConfigError, match="files.encoding"):
        load_config(path)


def test_write_template_refuses_overwrite(tmp_path):
    path = tmp_path / "cfg" / "quiz.toml"
    write_template(path)
    assert path.read_text(encoding="utf-8") == read_template()
    with pytest.raises(QuizConfigError, match="already exists"):
        write_template(path)
    write_template(path, overwrite=True)
