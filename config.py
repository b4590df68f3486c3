from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

USER_CONFIG_PATH = Path.home() / ".teal_config.yaml"
TASKS_DIR_ENV = "TEAL_TASKS_DIR"
DEFAULT_THEME = "default"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def default_data_dir() -> Path:
    xdg = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".local" / "share"
    return base / "teal"


def get_user_tasks_dir() -> str:
    return str(_load_config().get("tasks_dir", "") or "").strip()


def set_user_tasks_dir(value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data["tasks_dir"] = value
    else:
        data.pop("tasks_dir", None)
    _save_config(data)


def set_user_theme(value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data["theme"] = value
    else:
        data.pop("theme", None)
    _save_config(data)


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip() or DEFAULT_THEME


def resolve_tasks_dir(explicit: Optional[Path] = None) -> Path:
    """Where task files live.

    Priority:
    1. TEAL_TASKS_DIR env variable (for tests).
    2. Explicit directory (``--tasks-dir``).
    3. ``tasks_dir`` from the user config file.
    4. ``<data dir>/teal/tasks``.
    """
    env_tasks_dir = os.environ.get(TASKS_DIR_ENV)
    if env_tasks_dir:
        return Path(env_tasks_dir).expanduser()
    if explicit is not None:
        return Path(explicit).expanduser()
    configured = get_user_tasks_dir()
    if configured:
        return Path(configured).expanduser()
    return default_data_dir() / "tasks"
