"""Configuration for cmdpal."""

from .constants import CMDPAL_CONFIG_DIR, MAX_EMPTY_QUERY_RESULTS, MAX_RECENT, RECENT_KEY
from .settings import get_config_dir, get_state_path

__all__ = [
    "CMDPAL_CONFIG_DIR",
    "MAX_EMPTY_QUERY_RESULTS",
    "MAX_RECENT",
    "RECENT_KEY",
    "get_config_dir",
    "get_state_path",
]
