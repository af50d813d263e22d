"""
Centralized constants for cmdpal.

Limits, storage keys and timing values used by the palette engine and the
demo host live here so they can be tuned in one place.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

CMDPAL_CONFIG_DIR = Path.home() / ".config" / "cmdpal"
STATE_FILE_NAME = "state.json"
LOG_FILE_NAME = "cmdpal.log"

# Overrides the config directory (tests, sandboxes)
CONFIG_DIR_ENV_VAR = "CMDPAL_CONFIG_DIR"

# =============================================================================
# RECENCY
# =============================================================================

MAX_RECENT = 5  # Ids kept in the recently-used list
RECENT_KEY = "cmdpal_recent_commands"  # Storage key for the recently-used list

# =============================================================================
# RANKING
# =============================================================================

MAX_EMPTY_QUERY_RESULTS = 12  # Cap on the grouped list shown before typing

SECTION_RECENT = "Recent"
SECTION_NAVIGATE = "Navigate"
SECTION_CREATE = "Create"

# =============================================================================
# KEYBOARD
# =============================================================================

SEQUENCE_TIMEOUT_SECONDS = 0.8  # Window for the second key of "g d" style sequences
