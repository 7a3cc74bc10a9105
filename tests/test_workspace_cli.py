from __future__ import annotations

from study_quiz import workspace_cli
from study_quiz.core import load_config, read_template


def test_init_creates_workspace_and_config(quiz_home, capsys):
    assert workspace_cli.main([]) == 0
    out = capsys.readouterr().out
    assert f"Workspace ready at {quiz_home.absolute()} (created)" in out
    config_path = quiz_home / "config" / "quiz.toml"
    assert config_path.exists()
    assert f"Config {config_path.absolute()} (written)" in out
    assert (quiz_home / "logs").is_dir()


def test_init_keeps_existing_config_without_force(quiz_home, capsys):
    config_path = quiz_home / "config" / "quiz.toml"
    config_path.parent.mkdir(parents=True)
    config_path.write_text('[logging]\nlevel = "ERROR"\n', encoding="utf-8")

    assert workspace_cli.main(["--quiet"]) == 0
    assert capsys.readouterr().out == ""
    assert "ERROR" in config_path.read_text(encoding="utf-8")

    assert workspace_cli.main(["--force", "--quiet"]) == 0
    assert config_path.read_text(encoding="utf-8") == read_template()


def test_init_honours_explicit_path(tmp_path):
    target = tmp_path / "elsewhere"
    assert workspace_cli.main(["--path", str(target), "--quiet"]) == 0
    assert (target / "config" / "quiz.toml").exists()


def test_written_template_loads_as_defaults(quiz_home):
    workspace_cli.main(["--quiet"])
    config = load_config(quiz_home / "config" / "quiz.toml")
    assert config.log_level == "INFO"
    assert config.verbose is False
    assert config.encoding == "utf-8"


def test_init_reports_workspace_file_conflict(tmp_path, capsys):
    target = tmp_path / "a-file"
    target.write_text("x", encoding="utf-8")
    assert workspace_cli.main(["--path", str(target)]) == 1
    assert "not a directory" in capsys.readouterr().err
