from pathlib import Path

import config


def test_defaults_without_config_file(tmp_path):
    assert config.get_user_tasks_dir() == ""
    assert config.get_user_theme() == config.DEFAULT_THEME
    assert config.resolve_tasks_dir() == tmp_path / "xdg" / "teal" / "tasks"


def test_env_override_wins(tmp_path, monkeypatch):
    monkeypatch.setenv(config.TASKS_DIR_ENV, str(tmp_path / "env"))
    config.set_user_tasks_dir(str(tmp_path / "cfg"))
    assert config.resolve_tasks_dir(Path("/explicit")) == tmp_path / "env"


def test_explicit_beats_config_file(tmp_path):
    config.set_user_tasks_dir(str(tmp_path / "cfg"))
    assert config.resolve_tasks_dir(tmp_path / "explicit") == tmp_path / "explicit"
    assert config.resolve_tasks_dir() == tmp_path / "cfg"


def test_clearing_last_setting_removes_file(isolated_config):
    config.set_user_theme("mono")
    assert isolated_config.exists()
    config.set_user_theme("")
    assert not isolated_config.exists()
    assert config.get_user_theme() == config.DEFAULT_THEME


def test_broken_config_is_ignored(isolated_config):
    isolated_config.write_text("theme: [oops", encoding="utf-8")
    assert config.get_user_theme() == config.DEFAULT_THEME
