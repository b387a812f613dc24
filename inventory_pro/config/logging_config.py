# inventory_pro/config/logging_config.py

"""Per-run logging for InventoryPro.

Every launch (TUI or headless command) writes to its own file in
``logs/``, e.g. ``logs/run_20260214_153045.log``.  Loggers below the
``inventory_pro`` namespace propagate into that file; the console only
receives warnings so the TUI and JSON output on stdout stay clean.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from inventory_pro.config.settings import Settings

ROOT_LOGGER_NAME = "inventory_pro"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    logs_dir: Path | None = None,
    console_level: int = logging.WARNING,
) -> Path:
    """Attach the file and console handlers to the ``inventory_pro`` logger.

    Args:
        logs_dir: Directory for the run log. Defaults to
            :attr:`Settings.LOGS_DIR`.
        console_level: Minimum level echoed to stderr.

    Returns:
        Path of the log file for this run.  Repeated calls reuse the
        handlers installed by the first call.
    """
    directory = logs_dir or Settings.LOGS_DIR
    directory.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)

    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = directory / f"run_{stamp}.log"

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    root_logger.info("Logging initialised, writing to %s", log_file)

    return log_file


def shutdown_logging() -> None:
    """Close and detach every handler on the ``inventory_pro`` logger."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
