from pathlib import Path
import os

from config import get_user_data_dir


def get_data_dir(data_dir: Path | str | None = None) -> Path:
    """Unified resolver for the directory holding db*.json and the workspace pointer.

    Priority:
    1. Explicit data_dir if provided (``--data-dir``).
    2. TODO_DATA_DIR env variable.
    3. data_dir from ~/.todo_config.yaml.
    4. Current working directory.
    """
    if data_dir:
        return Path(data_dir).expanduser().resolve()

    env_data_dir = os.environ.get("TODO_DATA_DIR")
    if env_data_dir:
        env_path = Path(env_data_dir).expanduser().resolve()
        env_path.mkdir(parents=True, exist_ok=True)
        return env_path

    configured = get_user_data_dir()
    if configured:
        configured_path = Path(configured).expanduser().resolve()
        configured_path.mkdir(parents=True, exist_ok=True)
        return configured_path

    return Path.cwd().resolve()


__all__ = ["get_data_dir"]
