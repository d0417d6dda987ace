"""Configuration loading helpers for the CLI entrypoint."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

CONFIG_DIR = Path.home() / ".config" / "symbol-crawler"
CONFIG_ENV_FILE = CONFIG_DIR / ".env"


def load_config(
    *,
    config_env_file: Path,
    cwd: Path,
    load_env: Callable[[Path], bool],
) -> Optional[Path]:
    """Load .env configuration with fallback to the user config directory.

    Search order:
    1. .env in the current working directory
    2. ~/.config/symbol-crawler/.env

    Returns the file that was loaded, or None.
    """
    local_env = cwd / ".env"
    if local_env.is_file():
        load_env(local_env)
        return local_env

    if config_env_file.is_file():
        load_env(config_env_file)
        return config_env_file

    return None
