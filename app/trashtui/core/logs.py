"""Logging setup.

The interactive browser owns the terminal, so log records go to a file in
the state directory instead of stderr.
"""

import logging
from pathlib import Path

from trashtui.core.paths import ensure_state_dir, get_log_path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False, log_path: Path | None = None) -> Path | None:
    """Route trashtui log records to a log file.

    Args:
        verbose: Log at DEBUG instead of WARNING.
        log_path: Log file to write. If None, uses the state directory.

    Returns:
        Path of the log file, or None if it could not be opened (logging
        is then disabled for the package).
    """
    package_logger = logging.getLogger("trashtui")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    try:
        if log_path is None:
            ensure_state_dir()
            log_path = get_log_path()
        handler = logging.FileHandler(log_path, encoding="utf-8")
    except (OSError, RuntimeError):
        package_logger.addHandler(logging.NullHandler())
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return log_path
