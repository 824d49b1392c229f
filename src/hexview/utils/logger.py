"""
Logging setup for hexview.

The curses screen owns stdout while the viewer runs, so log records only go
to a rotating file.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

DEFAULT_LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

DEFAULT_LOG_FILE = os.path.expanduser('~/.hexview/hexview.log')


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None,
                  max_size: int = 1048576, backup_count: int = 3) -> logging.Logger:
    """
    Set up logging for the hexview package.

    Args:
        level: Logging level (default: WARNING)
        log_file: Path to log file (default: ~/.hexview/hexview.log)
        max_size: Maximum log file size in bytes before rotation (default: 1MB)
        backup_count: Number of backup log files to keep (default: 3)

    Returns:
        The configured 'hexview' logger
    """

    if log_file is None:
        log_file = DEFAULT_LOG_FILE

    log_dir = os.path.dirname(os.path.abspath(log_file))
    os.makedirs(log_dir, exist_ok=True)

    package_logger = logging.getLogger('hexview')
    package_logger.setLevel(level)

    for handler in package_logger.handlers[:]:
        if isinstance(handler, RotatingFileHandler):
            package_logger.removeHandler(handler)
            handler.close()

    file_handler = RotatingFileHandler(log_file, maxBytes=max_size, backupCount=backup_count)
    file_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, DEFAULT_DATE_FORMAT))
    package_logger.addHandler(file_handler)

    package_logger.debug("Logging to file: %s", log_file)
    return package_logger
