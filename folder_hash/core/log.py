import logging
import sys
from typing import Optional


# ============================================================
# Loggers (one per concern)
# ============================================================

ROOT_LOGGER = "folder_hash"

match_log = logging.getLogger(f"{ROOT_LOGGER}.match")
params_log = logging.getLogger(f"{ROOT_LOGGER}.params")
err_log = logging.getLogger(f"{ROOT_LOGGER}.err")
symlink_log = logging.getLogger(f"{ROOT_LOGGER}.symlink")
queue_log = logging.getLogger(f"{ROOT_LOGGER}.queue")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Attach console (stderr) and optional file output to the package logger.

    Library code never calls this; the command line does.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers = []

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
