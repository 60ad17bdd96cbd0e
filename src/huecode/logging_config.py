#!/usr/bin/env python3
"""
Logging configuration for huecode.

This module provides centralized logging configuration with support for
different log levels, formatters, and output destinations.
"""
from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional, Union

from .constants import (
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    LOG_FILE_BACKUP_COUNT,
    MAX_LOG_FILE_SIZE,
    RESET_SEQUENCE,
)

ROOT_LOGGER_NAME = "huecode"


class ColoredFormatter(logging.Formatter):
    """Formatter that colors level names using huecode attribute directives.

    ``tier`` is the support tier the directives are compiled for. When None it
    is detected from the environment on first use, so NO_COLOR and friends
    are honored; ``HuecodeLogger.set_color_tier`` replaces it later.
    """

    LEVEL_DIRECTIVES = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold magenta",
    }

    def __init__(self, fmt: Optional[str] = None, tier: Optional[int] = None, **kwargs):
        super().__init__(fmt, **kwargs)
        self.tier = tier
        self._prefixes: Dict[int, Dict[str, str]] = {}

    def _resolve_tier(self) -> Optional[int]:
        if self.tier is None:
            # Imported late: detection logs through this module
            from . import detect

            evaluate = getattr(detect, "evaluate", None)
            if evaluate is None:
                # detect is still being imported; stay plain until it is ready
                return None
            self.tier = int(evaluate(detect.build_context()).tier)
        return self.tier

    def _level_prefixes(self, tier: int) -> Dict[str, str]:
        if tier not in self._prefixes:
            from .compiler import compile_directives

            self._prefixes[tier] = {
                name: compile_directives(directives, tier)
                for name, directives in self.LEVEL_DIRECTIVES.items()
            }
        return self._prefixes[tier]

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with colors."""
        tier = self._resolve_tier()
        prefix = self._level_prefixes(tier).get(record.levelname) if tier else None
        if not prefix:
            return super().format(record)

        original = record.levelname
        record.levelname = f"{prefix}{original}{RESET_SEQUENCE}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _coerce_level(level: Union[str, int]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper())
    return level


class HuecodeLogger:
    """Centralized logger configuration for huecode."""

    _configured = False
    _loggers: Dict[str, logging.Logger] = {}

    @classmethod
    def setup_logging(
        cls,
        level: Union[str, int] = DEFAULT_LOG_LEVEL,
        log_file: Optional[Union[str, Path]] = None,
        console_output: bool = True,
        colored_output: bool = True,
        format_string: Optional[str] = None,
        max_file_size: int = MAX_LOG_FILE_SIZE * 1024 * 1024,
        backup_count: int = LOG_FILE_BACKUP_COUNT,
        color_tier: Optional[int] = None,
        force: bool = False,
    ) -> None:
        """
        Configure logging for huecode.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Path to log file (None to disable file logging)
            console_output: Whether to output logs to stderr
            colored_output: Whether to color level names on a TTY
            format_string: Custom format string for log messages
            max_file_size: Maximum size of log file before rotation (bytes)
            backup_count: Number of backup log files to keep
            color_tier: Support tier for colored level names (None detects it)
            force: Reconfigure even if logging was already set up
        """
        if cls._configured and not force:
            return

        level = _coerce_level(level)

        if format_string is None:
            format_string = DEFAULT_LOG_FORMAT

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        if console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)

            if colored_output and sys.stderr.isatty():
                console_formatter: logging.Formatter = ColoredFormatter(
                    format_string, tier=color_tier
                )
            else:
                console_formatter = logging.Formatter(format_string)

            console_handler.setFormatter(console_formatter)
            root_logger.addHandler(console_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=max_file_size,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(format_string))
            root_logger.addHandler(file_handler)

        # Prevent propagation to avoid duplicate messages
        root_logger.propagate = False

        cls._configured = True

        cls.get_logger("logging_config").debug(
            "Logging configured - Level: %s, Console: %s, File: %s",
            logging.getLevelName(level),
            console_output,
            log_file,
        )

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get a logger instance for the given module name.

        Args:
            name: Logger name (typically __name__ from the calling module)

        Returns:
            Configured logger instance
        """
        if not cls._configured:
            cls.setup_logging()

        if not name.startswith(ROOT_LOGGER_NAME):
            logger_name = f"{ROOT_LOGGER_NAME}.{name}"
        else:
            logger_name = name

        if logger_name not in cls._loggers:
            cls._loggers[logger_name] = logging.getLogger(logger_name)

        return cls._loggers[logger_name]

    @classmethod
    def set_level(cls, level: Union[str, int]) -> None:
        """
        Change the logging level for all huecode loggers.

        Args:
            level: New logging level
        """
        level = _coerce_level(level)

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(level)

        for handler in root_logger.handlers:
            handler.setLevel(level)

    @classmethod
    def set_color_tier(cls, tier: int) -> None:
        """
        Change the support tier used for colored level names.

        Args:
            tier: Support tier, 0 for plain level names
        """
        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
            if isinstance(handler.formatter, ColoredFormatter):
                handler.formatter.tier = int(tier)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    This is the primary function that modules should use to get their logger.

    Example:
        logger = get_logger(__name__)
        logger.debug("Detected tier %d", tier)
    """
    return HuecodeLogger.get_logger(name)


def setup_logging(
    level: Union[str, int] = DEFAULT_LOG_LEVEL,
    log_file: Optional[Union[str, Path]] = None,
    **kwargs,
) -> None:
    """
    Setup logging configuration.

    Args:
        level: Logging level
        log_file: Optional log file path
        **kwargs: Additional arguments passed to HuecodeLogger.setup_logging
    """
    HuecodeLogger.setup_logging(level=level, log_file=log_file, **kwargs)


__all__ = [
    "HuecodeLogger",
    "ColoredFormatter",
    "get_logger",
    "setup_logging",
]
