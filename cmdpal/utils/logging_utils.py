"""Simple logging utilities for cmdpal.

Standard Logger Initialization Pattern
--------------------------------------
Modules use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

Use `get_logger()` only when a module needs file-based logging without the
application having configured anything (e.g. a standalone script).
`setup_tui_logging()` is called by the Textual host so that nothing is ever
written to the terminal the TUI is drawing on.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from cmdpal.config.constants import LOG_FILE_NAME
from cmdpal.config.settings import get_config_dir

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _log_dir() -> Path:
    return get_config_dir()


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = RotatingFileHandler(
            _log_dir() / LOG_FILE_NAME,
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_BACKUP_COUNT,
            delay=True,
        )
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def setup_tui_logging(module_name: str) -> tuple[logging.Logger, logging.Logger]:
    """
    Set up logging for the Textual host.

    The root logger is set to WARNING to avoid noise from third-party libs.
    cmdpal's own loggers (cmdpal.*) are set to INFO. Key events get a
    separate file.

    Returns:
        tuple: (main_logger, key_events_logger)
    """
    log_dir = _log_dir()

    if not logging.getLogger().handlers:
        handler = RotatingFileHandler(
            log_dir / "tui_debug.log", maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
        )
        handler.setFormatter(logging.Formatter(_FORMAT))
        logging.basicConfig(level=logging.WARNING, handlers=[handler])

    logging.getLogger("cmdpal").setLevel(logging.INFO)

    key_logger = logging.getLogger("key_events")
    if not key_logger.handlers:
        key_handler = RotatingFileHandler(
            log_dir / "key_events.log", maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
        )
        key_handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
        key_logger.addHandler(key_handler)
        key_logger.setLevel(logging.WARNING)  # Only errors, not every keystroke

    return logging.getLogger(module_name), key_logger


def configure_cli_logging(verbose: bool = False) -> None:
    """Route cmdpal.* records to the rotating log file for CLI runs."""
    logger = get_logger("cmdpal")
    if verbose:
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)
