"""Log to a persistent file (timestamped) and to stdout (plain) at the same time."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "computer_naming"
FILE_FORMAT = "%(asctime)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(log_file: Path) -> logging.Logger:
    """
    (Re)attach the file and stdout handlers to the package logger.

    The log directory is created if missing. When the file cannot be opened
    (e.g. a non-root run against /var/log) only stdout is used so the run can
    still report why it stopped.
    """
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.INFO)
    logger.propagate = False

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console)

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as e:
        print(f"WARN: cannot write log file {log_file}: {e}")
        return logger

    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)
    return logger
