import pytest
from prompt_toolkit.application import create_app_session

import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.teal_config.yaml and TEAL_TASKS_DIR."""
    monkeypatch.setattr(config, "USER_CONFIG_PATH", tmp_path / "teal_config.yaml")
    monkeypatch.delenv(config.TASKS_DIR_ENV, raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
    return tmp_path / "teal_config.yaml"


@pytest.fixture(autouse=True)
def isolated_prompt_toolkit_session():
    """Fresh prompt_toolkit session per test so its output binds to the current (captured) stdout."""
    with create_app_session():
        yield
