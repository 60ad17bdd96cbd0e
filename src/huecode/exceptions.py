#!/usr/bin/env python3
"""
Exception hierarchy for huecode.

Detection and attribute compilation never raise; these exceptions cover the
surrounding layers (configuration, platform queries, the command line).
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence


class HuecodeError(Exception):
    """
    Base exception for all huecode operations.

    All huecode specific exceptions should inherit from this class
    to provide a consistent error handling interface.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# ──────────────────────────────────────────────────────────────────────────────
# Configuration Errors
# ──────────────────────────────────────────────────────────────────────────────


class ConfigurationError(HuecodeError):
    """Raised when there's an issue with configuration."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        config_path: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        details = {}
        if config_key:
            details["config_key"] = config_key
        if config_value is not None:
            details["config_value"] = config_value
        if config_path:
            details["config_path"] = config_path

        super().__init__(message, details, cause)
        self.config_key = config_key
        self.config_value = config_value
        self.config_path = config_path


# ──────────────────────────────────────────────────────────────────────────────
# Platform Errors
# ──────────────────────────────────────────────────────────────────────────────


class PlatformError(HuecodeError):
    """Raised when an OS command used for platform inspection fails."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        cause: Optional[Exception] = None,
    ):
        details = {}
        if command:
            details["command"] = " ".join(command)
        if returncode is not None:
            details["returncode"] = returncode

        super().__init__(message, details, cause)
        self.command = list(command) if command else None
        self.returncode = returncode


# ──────────────────────────────────────────────────────────────────────────────
# CLI and User Interface Errors
# ──────────────────────────────────────────────────────────────────────────────


class CLIError(HuecodeError):
    """Raised when CLI operations fail."""

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        arguments: Optional[List[str]] = None,
        cause: Optional[Exception] = None,
    ):
        details = {}
        if command:
            details["command"] = command
        if arguments:
            details["arguments"] = " ".join(arguments)

        super().__init__(message, details, cause)
        self.command = command
        self.arguments = arguments


class ArgumentError(CLIError):
    """Raised when command-line arguments are invalid."""

    def __init__(
        self,
        message: str,
        argument_name: Optional[str] = None,
        argument_value: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        details = {}
        if argument_name:
            details["argument"] = argument_name
        if argument_value:
            details["value"] = argument_value

        super().__init__(message, None, None, cause)
        self.details.update(details)
        self.argument_name = argument_name
        self.argument_value = argument_value


# ──────────────────────────────────────────────────────────────────────────────
# Export all exception classes
# ──────────────────────────────────────────────────────────────────────────────

__all__ = [
    "HuecodeError",
    "ConfigurationError",
    "PlatformError",
    "CLIError",
    "ArgumentError",
]
