"""
Logging configuration for the Custom Query Blocks admin package.

Provides structured logging with configurable levels and formatting.
"""

import copy
import logging
import sys
from typing import Optional


_RESET = "\033[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\033[2;36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;37;41m",
}
"""ANSI prefix per level for console output."""


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name on terminals."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno) if self.use_colors else None
        if color is None:
            return super().format(record)
        # Other handlers see the same record; color a copy.
        colored = copy.copy(record)
        colored.levelname = f"{color}{record.levelname}{_RESET}"
        return super().format(colored)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure logging for the ``ptam`` logger tree.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output

    Example:
        >>> setup_logging(level="DEBUG")
        >>> logger = get_logger(__name__)
        >>> logger.info("Admin settings bootstrapped")
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger("ptam")
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    # Console output goes to stderr so `ptam render` output stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)

    if numeric_level <= logging.DEBUG:
        console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        console_formatter = ColoredFormatter(console_format, datefmt="%H:%M:%S")
    else:
        console_format = "[%(levelname)s] %(message)s"
        console_formatter = ColoredFormatter(console_format)

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_format = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"
        file_handler.setFormatter(ColoredFormatter(file_format, use_colors=False))
        root_logger.addHandler(file_handler)

    # Textual and markdown-it are chatty at DEBUG
    logging.getLogger("textual").setLevel(logging.WARNING)
    logging.getLogger("markdown_it").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger under the ``ptam`` namespace
    """
    if not name.startswith("ptam"):
        name = f"ptam.{name}"

    return logging.getLogger(name)


def format_exception_summary(error: BaseException, *, max_length: int = 180) -> str:
    """
    One-line ``Type: message`` summary for CLI error output.

    Whitespace in the message is collapsed; summaries longer than
    ``max_length`` are cut and end in ``...``.
    """
    name = type(error).__name__
    detail = " ".join(str(error).split())
    summary = f"{name}: {detail}" if detail else name
    if max_length <= 3 or len(summary) <= max_length:
        return summary
    return summary[: max_length - 3].rstrip() + "..."


def configure_logging_from_args(verbose: bool = False, log_level: Optional[str] = None,
                                log_file: Optional[str] = None) -> None:
    """
    Configure logging based on CLI arguments.

    Args:
        verbose: If True, set level to DEBUG
        log_level: Explicit log level (overrides verbose)
        log_file: Optional file for log output
    """
    if log_level:
        level = log_level.upper()
    elif verbose:
        level = "DEBUG"
    else:
        level = "WARNING"

    setup_logging(level=level, log_file=log_file)
