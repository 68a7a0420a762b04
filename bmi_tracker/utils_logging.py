from __future__ import annotations

"""Logging utilities.

Set up a consistent logging configuration to both console and a file
in the `logs/` directory. Only the root logger is configured, once per run.
"""

import logging
from pathlib import Path

LOG_FILE_NAME = "bmi_tracker.log"


def configure_logging(log_dir: Path, debug: bool = False) -> Path:
    """Configure root logging for the application.

    - Creates the log directory if missing
    - Streams logs to both stderr and `logs/bmi_tracker.log`
    - Uses DEBUG level if `debug=True`, otherwise INFO

    Returns the path of the log file.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    level = logging.DEBUG if debug else logging.INFO
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    logging.basicConfig(
        level=level,
        format=fmt,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, mode="a", encoding="utf-8"),
        ],
    )
    # requests/urllib3 are chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return log_file
