"""Logging configuration for the buddy read API."""

import logging
import logging.handlers
import sys
from pathlib import Path

import colorlog

BASE_LOG_FORMAT = (
    "%(asctime)s %(levelname)8s %(message)s (%(name)s@%(filename)s:%(lineno)d)"
)
DATE_FORMAT = "%m-%d %H:%M:%S"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

# Loggers that flood the console at DEBUG level
NOISY_LOGGERS = ("sqlalchemy.engine", "multipart", "httpx")


def setup_logging(
    level: int | str = logging.INFO,
    use_colors: bool = True,
    enable_file_logging: bool = False,
    log_dir: Path | None = None,
    is_test_env: bool = False,
) -> None:
    """Configure the root logger.

    Args:
        level: Logging level, either numeric or a level name such as "DEBUG"
        use_colors: Whether to use colored console output
        enable_file_logging: Whether to also write records to a log file
        log_dir: Directory for log files (defaults to ./logs or ./logs/test)
        is_test_env: Whether this is a test run
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    if log_dir is None:
        log_dir = Path("logs")
        if is_test_env:
            log_dir = log_dir / "test"

    handlers = [_create_console_handler(use_colors)]
    if enable_file_logging:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_create_file_handler(log_dir, is_test_env))

    logging.basicConfig(level=level, handlers=handlers, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def _create_console_handler(use_colors: bool) -> logging.Handler:
    """Create console handler with a colored or plain formatter."""
    console_handler = logging.StreamHandler(sys.stdout)

    if use_colors:
        console_formatter: logging.Formatter = colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)8s%(reset)s %(message)s "
            "\033[90m(%(name)s@%(filename)s:%(lineno)d)\033[0m",
            datefmt=DATE_FORMAT,
            log_colors=LOG_COLORS,
            style="%",
        )
    else:
        console_formatter = logging.Formatter(BASE_LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler.setFormatter(console_formatter)
    return console_handler


def _create_file_handler(log_dir: Path, is_test_env: bool) -> logging.Handler:
    """Create file handler; test runs overwrite, other runs rotate."""
    file_handler: logging.Handler
    if is_test_env:
        file_handler = logging.FileHandler(log_dir / "test.log", mode="w")
    else:
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "buddyread.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=4,
            encoding="utf-8",
        )

    file_handler.setFormatter(logging.Formatter(BASE_LOG_FORMAT, datefmt=DATE_FORMAT))
    return file_handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically for __name__)."""
    return logging.getLogger(name)


def setup_production_logging(level: int | str = logging.INFO) -> None:
    """Setup logging for production with file rotation."""
    setup_logging(level=level, enable_file_logging=True, is_test_env=False)


def setup_test_logging(level: int | str = logging.DEBUG) -> None:
    """Setup logging for tests with an overwritten log file."""
    setup_logging(
        level=level,
        use_colors=False,
        enable_file_logging=True,
        is_test_env=True,
    )
