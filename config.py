from __future__ import annotations

import logging
import yaml
from pathlib import Path
from typing import Dict, Any

USER_CONFIG_PATH = Path.home() / ".todo_config.yaml"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logging.getLogger("todo.config").warning("Ignoring unreadable config %s: %s", USER_CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def get_user_mono_select() -> bool:
    return bool(_load_config().get("mono_select", False))


def get_user_data_dir() -> str:
    return str(_load_config().get("data_dir", "") or "").strip()


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()
