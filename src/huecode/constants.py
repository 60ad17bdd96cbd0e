#!/usr/bin/env python3
"""Constants for huecode.

This module centralizes environment variable names, version thresholds, escape
sequence pieces and logging defaults used throughout the huecode codebase.
"""
from __future__ import annotations

# ──────────────────────────────────────────────────────────────────────────────
# Escape Sequences
# ──────────────────────────────────────────────────────────────────────────────

# Control Sequence Introducer
CSI = "\x1b["

# Full SGR reset appended by apply() and format()
RESET_SEQUENCE = "\x1b[m"

# Highest support tier (24-bit truecolor)
MAX_TIER = 3

# ──────────────────────────────────────────────────────────────────────────────
# Detection Environment Variables
# ──────────────────────────────────────────────────────────────────────────────

ENV_FORCE_COLOR = "FORCE_COLOR"
ENV_NO_COLOR = "NO_COLOR"
ENV_TERM = "TERM"
ENV_COLORTERM = "COLORTERM"
ENV_TERM_PROGRAM = "TERM_PROGRAM"
ENV_TERM_PROGRAM_VERSION = "TERM_PROGRAM_VERSION"
ENV_CI = "CI"
ENV_CI_NAME = "CI_NAME"
ENV_TEAMCITY_VERSION = "TEAMCITY_VERSION"

# Azure Pipelines agents set both of these
AZURE_PIPELINES_MARKERS = ("TF_BUILD", "AGENT_NAME")

# CI providers whose log viewers render truecolor
TRUECOLOR_CI_MARKERS = ("GITHUB_ACTIONS", "GITEA_ACTIONS")

# CI providers that render basic colors only
BASIC_CI_MARKERS = ("TRAVIS", "CIRCLECI", "APPVEYOR", "GITLAB_CI", "BUILDKITE", "DRONE")

CODESHIP_CI_NAME = "codeship"

# ──────────────────────────────────────────────────────────────────────────────
# Terminal Identification
# ──────────────────────────────────────────────────────────────────────────────

DUMB_TERM = "dumb"
KITTY_TERM = "xterm-kitty"
TRUECOLOR_COLORTERM = "truecolor"

ITERM_PROGRAM = "iTerm.app"
APPLE_TERMINAL_PROGRAM = "Apple_Terminal"

# iTerm.app gained truecolor support in 3.x
ITERM_TRUECOLOR_MAJOR = 3

TERM_256_SUFFIXES = ("-256", "-256color")

# TERM prefixes that imply basic color support
BASIC_TERM_PREFIXES = ("screen", "xterm", "vt100", "vt220", "rxvt")

# TERM substrings that imply basic color support
BASIC_TERM_SUBSTRINGS = ("color", "ansi", "cygwin", "linux")

# ──────────────────────────────────────────────────────────────────────────────
# Windows Versions
# ──────────────────────────────────────────────────────────────────────────────

# Windows 10 builds after this one accept VT sequences
WINDOWS_VT_BUILD = 10586

# Windows 10 builds from this one on accept 24-bit color
WINDOWS_TRUECOLOR_BUILD = 14931

# Anniversary update; SetConsoleMode accepts ENABLE_VIRTUAL_TERMINAL_PROCESSING
WINDOWS_CONSOLE_VT_BUILD = 14393

# STD_OUTPUT_HANDLE / STD_ERROR_HANDLE
WINDOWS_STD_OUTPUT_HANDLE = -11
WINDOWS_STD_ERROR_HANDLE = -12

# ENABLE_PROCESSED_OUTPUT | ENABLE_WRAP_AT_EOL_OUTPUT | ENABLE_VIRTUAL_TERMINAL_PROCESSING
WINDOWS_VT_CONSOLE_MODE = 7

# Timeout for the one-time `ver` query in seconds
PLATFORM_QUERY_TIMEOUT = 5

ENV_ANSICON = "ANSICON"
DEFAULT_ANSICON = "ansicon"

VT_REGISTRY_KEY = "HKCU\\CONSOLE"
VT_REGISTRY_VALUE = "VirtualTerminalLevel"

# ──────────────────────────────────────────────────────────────────────────────
# Configuration
# ──────────────────────────────────────────────────────────────────────────────

ENV_CONFIG_PATH = "HUECODE_CONFIG"
ENV_CONFIG_LEVEL = "HUECODE_LEVEL"
ENV_CONFIG_COLOR = "HUECODE_COLOR"
ENV_CONFIG_LOG_LEVEL = "HUECODE_LOG_LEVEL"

COLOR_MODES = ("auto", "always", "never")

DEFAULT_CONFIG_FILE = "huecode.yml"

# ──────────────────────────────────────────────────────────────────────────────
# Logging and Debugging
# ──────────────────────────────────────────────────────────────────────────────

# Default log level
DEFAULT_LOG_LEVEL = "WARNING"

# Maximum log file size in MB
MAX_LOG_FILE_SIZE = 10

# Number of log files to keep in rotation
LOG_FILE_BACKUP_COUNT = 3

# Log format string
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ──────────────────────────────────────────────────────────────────────────────
# Export all constants
# ──────────────────────────────────────────────────────────────────────────────

__all__ = [
    # Escape Sequences
    "CSI",
    "RESET_SEQUENCE",
    "MAX_TIER",
    # Detection Environment Variables
    "ENV_FORCE_COLOR",
    "ENV_NO_COLOR",
    "ENV_TERM",
    "ENV_COLORTERM",
    "ENV_TERM_PROGRAM",
    "ENV_TERM_PROGRAM_VERSION",
    "ENV_CI",
    "ENV_CI_NAME",
    "ENV_TEAMCITY_VERSION",
    "AZURE_PIPELINES_MARKERS",
    "TRUECOLOR_CI_MARKERS",
    "BASIC_CI_MARKERS",
    "CODESHIP_CI_NAME",
    # Terminal Identification
    "DUMB_TERM",
    "KITTY_TERM",
    "TRUECOLOR_COLORTERM",
    "ITERM_PROGRAM",
    "APPLE_TERMINAL_PROGRAM",
    "ITERM_TRUECOLOR_MAJOR",
    "TERM_256_SUFFIXES",
    "BASIC_TERM_PREFIXES",
    "BASIC_TERM_SUBSTRINGS",
    # Windows Versions
    "WINDOWS_VT_BUILD",
    "WINDOWS_TRUECOLOR_BUILD",
    "WINDOWS_CONSOLE_VT_BUILD",
    "WINDOWS_STD_OUTPUT_HANDLE",
    "WINDOWS_STD_ERROR_HANDLE",
    "WINDOWS_VT_CONSOLE_MODE",
    "PLATFORM_QUERY_TIMEOUT",
    "ENV_ANSICON",
    "DEFAULT_ANSICON",
    "VT_REGISTRY_KEY",
    "VT_REGISTRY_VALUE",
    # Configuration
    "ENV_CONFIG_PATH",
    "ENV_CONFIG_LEVEL",
    "ENV_CONFIG_COLOR",
    "ENV_CONFIG_LOG_LEVEL",
    "COLOR_MODES",
    "DEFAULT_CONFIG_FILE",
    # Logging and Debugging
    "DEFAULT_LOG_LEVEL",
    "MAX_LOG_FILE_SIZE",
    "LOG_FILE_BACKUP_COUNT",
    "DEFAULT_LOG_FORMAT",
]
