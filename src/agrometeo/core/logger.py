"""
Logging configuration for the agro-meteorological formula library.

Modules log through logging.getLogger(__name__), i.e. children of the
"agrometeo" package logger. The formula functions only ever log at DEBUG
and attach no handlers; AgroMeteoCalculator configures the package logger
from Config (logging.level, logging.file) via setup_logger() unless it is
given a logger of its own.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from datetime import datetime


def setup_logger(
    name: str = "agrometeo",
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Configure the package logger that all agrometeo module loggers propagate to.

    A console handler is always attached; a file handler only when a log file
    is configured. Calling it again replaces the previous handlers.

    Args:
        name: Logger name, the package logger by default
        log_file: Path to log file. If None, uses LOG_FILE env var; no file
                  handler is attached when neither is set
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    if log_file is None:
        log_file = os.getenv("LOG_FILE")

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Replace handlers from a previous setup, closing any open log file
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    detailed_formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_formatter = logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logger.level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


class LoggerContext:
    """
    Context manager logging start, duration and failure of a batch calculation.

    Exceptions are logged with traceback and re-raised.
    """

    def __init__(self, logger: logging.Logger, operation: str):
        """
        Initialize logger context.

        Args:
            logger: Logger instance
            operation: Name of the operation being logged
        """
        self.logger = logger
        self.operation = operation
        self.start_time = None

    def __enter__(self):
        """Enter context and log start."""
        self.start_time = datetime.now()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context and log completion or error."""
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is not None:
            self.logger.error(
                f"Failed {self.operation} after {duration:.2f}s: {exc_val}",
                exc_info=True
            )
            return False

        self.logger.info(f"Completed {self.operation} in {duration:.2f}s")
        return False
