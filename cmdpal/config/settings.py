"""Configuration utilities for cmdpal."""

import os
from pathlib import Path

from .constants import CMDPAL_CONFIG_DIR, CONFIG_DIR_ENV_VAR, STATE_FILE_NAME


def get_config_dir() -> Path:
    """Get the config directory, respecting the CMDPAL_CONFIG_DIR environment variable.

    Tests point CMDPAL_CONFIG_DIR at a temp directory so they never touch
    the user's real recently-used list.
    """
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    config_dir = Path(override) if override else CMDPAL_CONFIG_DIR
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_state_path() -> Path:
    """
    Get path to the persisted palette state file.

    Returns:
        Path to <config dir>/state.json
    """
    return get_config_dir() / STATE_FILE_NAME
