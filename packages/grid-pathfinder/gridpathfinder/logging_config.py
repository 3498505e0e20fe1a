"""
Logging configuration for the Grid Pathfinder package.

Importing this module installs the package logging setup once:

- Command-line runs log to ``logs/pathfinder_<UTC timestamp>.log`` in the
  working directory. If that file cannot be created, records go to stderr.
- Test runs log WARNING and above to stderr and never touch the disk.

The CLI adjusts verbosity afterwards with ``set_log_level``.
"""

import logging
import os
import sys
from datetime import UTC, datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DIR_NAME = "logs"
LOG_FILE_PREFIX = "pathfinder"
QUIET_LOGGERS = ("matplotlib", "PIL")


def running_under_pytest() -> bool:
    """Whether the interpreter was started by pytest or with ``TESTING=1``."""
    # PYTEST_CURRENT_TEST is only set once a test starts running
    return (
        "PYTEST_CURRENT_TEST" in os.environ
        or os.environ.get("TESTING") == "1"
        or "pytest" in sys.modules
        or bool(sys.argv and sys.argv[0].endswith("pytest"))
    )


def log_file_path(log_dir: Path, now: datetime | None = None) -> Path:
    """Return the timestamped log file for a run started at ``now``."""
    now = now or datetime.now(UTC)
    return log_dir / f"{LOG_FILE_PREFIX}_{now.strftime('%Y%m%d_%H%M%S')}.log"


def configure_logging(log_dir: Path | None = None, *, to_file: bool = True) -> Path | None:
    """
    Install the root handlers for the package.

    Parameters
    ----------
    log_dir : Path | None
        Directory for the log file, ``./logs`` by default.
    to_file : bool
        Whether to write a log file at all.

    Returns
    -------
    Path | None
        The log file in use, or None when logging to stderr.
    """
    if not to_file:
        logging.basicConfig(format=LOG_FORMAT, level=logging.WARNING)
        return None

    log_dir = log_dir or Path.cwd() / LOG_DIR_NAME
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_file_path(log_dir)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        logging.basicConfig(format=LOG_FORMAT, level=logging.WARNING)
        logging.getLogger(__name__).warning(
            "Failed to initialize file logging in %s: %s. Falling back to stderr logging.",
            log_dir,
            exc,
        )
        return None

    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(format=LOG_FORMAT, handlers=[file_handler])
    return log_file


configure_logging(to_file=not running_under_pytest())

for _name in QUIET_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


def set_log_level(level: str) -> None:
    """
    Apply a log level to the package logger and the root handlers.

    Parameters
    ----------
    level : str
        One of the standard level names, or ``"NONE"`` to silence the logger.
    """
    level = level.upper()
    if level == "NONE":
        logger.disabled = True
        return

    logger.disabled = False
    logger.setLevel(level)
    for handler in logging.getLogger().handlers:
        handler.setLevel(level)
