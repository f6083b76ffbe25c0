"""Logging configuration for schemasmith."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import colorlog

if TYPE_CHECKING:
    from schemasmith.config import DatabaseSettings

BASE_LOG_FORMAT = (
    "%(asctime)s %(levelname)8s %(message)s (%(name)s@%(filename)s:%(lineno)d)"
)
DATE_FORMAT = "%m-%d %H:%M:%S"
LOG_FILE_NAME = "schemasmith.log"


def setup_logging(
    level: int | str = logging.INFO,
    format_string: str | None = None,
    use_colors: bool = True,
    log_dir: Path | None = None,
) -> None:
    """Configure the root logger.

    Args:
        level: Logging level, as a number or a name such as ``"DEBUG"``
        format_string: Custom format string for console messages
        use_colors: Whether to color console output
        log_dir: Directory for a rotating log file; no file output when omitted
    """
    console_format = format_string or _get_console_format(use_colors)
    handlers = [_create_console_handler(console_format, use_colors)]

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_create_file_handler(log_dir / LOG_FILE_NAME))

    logging.basicConfig(
        level=_resolve_level(level),
        handlers=handlers,
        force=True,
    )


def setup_logging_from_settings(settings: "DatabaseSettings") -> None:
    """Configure logging with the level named in the settings."""
    setup_logging(level=settings.log_level)


def setup_test_logging(level: int = logging.DEBUG) -> None:
    """Setup logging for the test suite: plain console output, verbose level."""
    setup_logging(level=level, use_colors=False)


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level}")
    return resolved


def _get_console_format(use_colors: bool) -> str:
    if use_colors:
        return (
            "%(asctime)s %(log_color)s%(levelname)8s%(reset)s %(message)s "
            "\033[90m(%(name)s@%(filename)s:%(lineno)d)\033[0m"
        )
    return BASE_LOG_FORMAT


def _create_console_handler(format_string: str, use_colors: bool) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stdout)

    if use_colors:
        console_formatter: logging.Formatter = colorlog.ColoredFormatter(
            format_string,
            datefmt=DATE_FORMAT,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
            style="%",
        )
    else:
        console_formatter = logging.Formatter(format_string, datefmt=DATE_FORMAT)

    console_handler.setFormatter(console_formatter)
    return console_handler


def _create_file_handler(log_file: Path) -> logging.Handler:
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=4,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(BASE_LOG_FORMAT, datefmt=DATE_FORMAT))
    return file_handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
