"""
Centralized logging configuration.

Logs are written to both console (stdout) and a daily log file under
LOG_DIR (default logs/ in the working directory). Every module obtains its logger through
get_logger(__name__) so the module hierarchy shows up in each line.

Personal contact details (email, phone) must never be passed to a logger;
log counts and scores instead.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


# Module-level flag to prevent duplicate handler registration
_logging_configured = False

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty at DEBUG level
NOISY_LOGGERS = ("httpx", "httpcore", "groq", "urllib3")


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Configure application-wide logging.

    This function should be called once at application startup.
    Repeated calls are no-ops.

    Args:
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files. Defaults to 'logs/' under the
            current working directory.

    Returns:
        Configured root logger instance

    Example:
        >>> from wellness.core.logging_config import setup_logging
        >>> logger = setup_logging("INFO")
        >>> logger.info("Application started")
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger()

    if log_dir is None:
        log_dir = Path.cwd() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: timestamp | level | module:line | message
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(getattr(logging, log_level.upper()))

    log_file = log_dir / f"wellness_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)  # File captures everything

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _logging_configured = True

    root_logger.debug(f"Logging configured: level={log_level}, file={log_file}")

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Logger instance for the specified name

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Scoring survey")
        2024-01-15 10:30:45 | INFO     | wellness.scoring.scorer:42 | Scoring survey
    """
    return logging.getLogger(name)
