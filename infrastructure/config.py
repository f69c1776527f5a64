"""Configuration utilities for infrastructure layer.

All settings come from environment variables; ``load_env_file`` lets a
local ``.env`` provide them during development.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MACRO_STRATEGY = "weight_anchored"


def load_env_file(path: Optional[Path] = None) -> bool:
    """
    Load variables from a .env file without overriding the environment.

    Args:
        path: Explicit file; defaults to ``.env`` beside this project

    Returns:
        True if a file was found and loaded
    """
    env_path = path or Path(__file__).parent.parent / ".env"
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=False)


def get_log_level() -> str:
    """
    Get logging level name.

    Returns:
        Upper-cased LOG_LEVEL env var, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_macro_strategy() -> str:
    """
    Get the configured macro split strategy name.

    Returns:
        Lower-cased MACRO_STRATEGY env var, defaults to "weight_anchored"
    """
    return os.getenv("MACRO_STRATEGY", DEFAULT_MACRO_STRATEGY).strip().lower()


def get_app_version() -> str:
    """Version from APP_VERSION (set by the Docker build), defaults to dev."""
    return os.getenv("APP_VERSION", "0.0.0-dev")
