"""Sets up logging for indelcal runs"""

import sys
import logging

from pathlib import Path
from typing import Any

__all__ = ['setup_logging', 'LOG_DETAIL']

LOG_DETAIL = {
    "LOW": "%(levelname)s:%(name)s:%(message)s",
    "MEDIUM": "%(asctime)s:%(levelname)s:%(name)s:%(message)s",
    "HIGH": "%(asctime)s:%(levelname)s:%(name)s:line %(lineno)s:%(message)s",
}


def setup_logging(
        omit_log: bool,
        directory: str | Path,
        filename: str,
        severity: str,
        verbosity: str,
        silent_mode: bool = False) -> Path | None:
    """
    Configure logging for the run

    :param omit_log: Set to skip writing a log file
    :param directory: Directory to store the log in.
    :param filename: Name to give the log. If it is an absolute path, directory is ignored.
    :param severity: Lowest severity of events that will be tracked (DEBUG, INFO, WARNING, ERROR)
    :param verbosity: Amount of detail in each log line (LOW, MEDIUM, HIGH)
    :param silent_mode: Set to keep log messages off of stdout.
    :return: The path of the log file, or None if no file is being written.
    """

    kwargs: dict[str, Any] = {
        "force": True,
        "format": LOG_DETAIL.get(verbosity.upper(), LOG_DETAIL['MEDIUM']),
        "handlers": []
    }

    log_file = None
    if not omit_log:
        log_file = Path(directory) / filename
        log_file.parent.mkdir(parents=True, exist_ok=True)
        kwargs['handlers'].append(logging.FileHandler(log_file))

    if not silent_mode:
        kwargs['handlers'].append(logging.StreamHandler(sys.stdout))

    # An empty handler list would make basicConfig fall back to stderr
    if not kwargs['handlers']:
        kwargs['handlers'].append(logging.NullHandler())

    kwargs['level'] = getattr(logging, severity.upper(), logging.INFO)

    logging.basicConfig(**kwargs)

    return log_file
