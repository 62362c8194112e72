"""
Logging setup for the hex view tools.
"""

import logging
import os
from typing import Optional

DEFAULT_LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  format_str: Optional[str] = None, date_format: Optional[str] = None) -> None:
    """
    Set up logging configuration for the application.

    Records only go to a file, console output would corrupt the curses
    screen. Without a log file a NullHandler is installed.

    Args:
        level: Logging level (default: INFO)
        log_file: Path to the log file, None to discard records
        format_str: Log message format string
        date_format: Date format string
    """

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if log_file is None:
        root_logger.addHandler(logging.NullHandler())
        return

    log_dir = os.path.dirname(os.path.abspath(log_file))
    os.makedirs(log_dir, exist_ok=True)

    formatter = logging.Formatter(format_str or DEFAULT_LOG_FORMAT, date_format or DEFAULT_DATE_FORMAT)
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    logging.info("Logging to file: %s", log_file)
