"""
Centralized logging configuration.

Logs are written to both console (stdout) and a daily log file, using one
format across all modules:

    timestamp | level | module:line | message

The log directory comes from LOG_DIR (see Settings.log_dir) and defaults
to ./logs under the working directory the server runs in.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


# Module-level flag to prevent duplicate handler registration
_logging_configured = False

DEFAULT_LOG_DIR_NAME = "logs"


def default_log_dir() -> Path:
    """Directory used when no LOG_DIR is configured."""
    return Path.cwd() / DEFAULT_LOG_DIR_NAME


def setup_logging(log_level: str = "INFO", log_dir: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Configure application-wide logging.

    This function should be called once at application startup.
    Repeated calls return the already configured root logger.

    Args:
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files. Defaults to 'logs/' in the
            current working directory. If it cannot be created, only the
            console handler is installed.

    Returns:
        Configured root logger instance

    Example:
        >>> from chronus_ai.core.logging_config import setup_logging
        >>> logger = setup_logging("INFO", "/var/log/chronus")
        >>> logger.info("Application started")
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Console handler - always enabled for immediate feedback
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)

    # File handler - daily log files for persistence
    log_dir = Path(log_dir) if log_dir else default_log_dir()
    log_file = log_dir / f"app_{datetime.now().strftime('%Y%m%d')}.log"
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        root_logger.warning(f"Cannot write logs to {log_dir} ({e}); logging to console only")
        log_file = None
    else:
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)  # File captures everything
        root_logger.addHandler(file_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)

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
        >>> from chronus_ai.core.logging_config import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Resolving template")
        2024-01-15 10:30:45 | INFO     | chronus_ai.llm.templates:42 | Resolving template
    """
    return logging.getLogger(name)
