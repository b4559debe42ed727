"""
Logging helpers for the design engine.
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

ROOT_LOGGER_NAME = "design_engine"


class LogFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    RESET = '\033[0m'

    LEVEL_COLORS = {
        'DEBUG': '\033[34m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[31m\033[1m'
    }

    def __init__(self, colored: bool = True, **kwargs):
        # No ANSI colors on Windows consoles or when output is piped
        self.colored = colored and sys.platform != 'win32' and sys.stderr.isatty()
        super().__init__(**kwargs)

    def format(self, record: logging.LogRecord) -> str:
        formatted_msg = super().format(record)

        if self.colored and record.levelname in self.LEVEL_COLORS:
            colored_level = f"{self.LEVEL_COLORS[record.levelname]}{record.levelname}{self.RESET}"
            formatted_msg = formatted_msg.replace(record.levelname, colored_level, 1)

        return formatted_msg


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "WARNING",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for the design engine.

    Args:
        log_file: Path to log file (None for no file logging)
        console_level: Console logging level
        file_level: File logging level
        component: Optional component name for the logger

    Returns:
        logging.Logger: Configured logger
    """
    logger_name = ROOT_LOGGER_NAME
    if component:
        logger_name = f"{logger_name}.{component}"

    logger = logging.getLogger(logger_name)

    # Already configured by an earlier call
    if logger.handlers:
        return logger

    console = LOG_LEVELS.get(console_level.upper(), logging.WARNING)
    logger.setLevel(min(console, LOG_LEVELS.get(file_level.upper(), logging.DEBUG)) if log_file else console)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console)
    console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    console_handler.setFormatter(LogFormatter(colored=True, fmt=console_format, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(LOG_LEVELS.get(file_level.upper(), logging.DEBUG))

        # File output carries the source location
        file_format = ("%(asctime)s [%(levelname)s] %(name)s "
                       "(%(filename)s:%(lineno)d): %(message)s")
        file_handler.setFormatter(logging.Formatter(file_format, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """
    Log an exception together with its traceback.

    Args:
        logger: Logger to use
        exception: Exception to log
        message: Message to log with the exception
    """
    exc_info = (type(exception), exception, exception.__traceback__)
    logger.error(f"{message}: {exception}", exc_info=exc_info)


class PerformanceLogger:
    """Times named operations and logs their duration."""

    def __init__(self, logger: logging.Logger, component: str):
        """
        Initialize performance logger.

        Args:
            logger: Logger to use
            component: Component name prefixed to every message
        """
        self.logger = logger
        self.component = component
        self.start_times: Dict[str, float] = {}

    def start(self, name: str) -> None:
        self.start_times[name] = time.perf_counter()

    def end(self, name: str, level: str = "DEBUG") -> float:
        """
        Stop timing an operation and log the duration.

        Args:
            name: Operation name
            level: Log level

        Returns:
            float: Duration in seconds (0 if the operation was never started)
        """
        started = self.start_times.pop(name, None)
        if started is None:
            self.logger.warning(f"No start time found for {name}")
            return 0.0

        duration = time.perf_counter() - started
        self.log(name, duration, level)
        return duration

    def log(self, name: str, duration: float, level: str = "DEBUG") -> None:
        log_func = getattr(self.logger, level.lower())
        log_func(f"{self.component} {name} took {duration:.4f} seconds")

    @contextmanager
    def measure(self, name: str, level: str = "DEBUG") -> Iterator[None]:
        """Time the body of a ``with`` block."""
        self.start(name)
        try:
            yield
        finally:
            self.end(name, level)
