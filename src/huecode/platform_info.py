#!/usr/bin/env python3
"""
Platform version lookup used by color detection and the Windows VT enabler.

The Windows version is read once, at import, by running ``ver``. Anything that
goes wrong leaves the version unresolved (``None``) and the Windows specific
detection rule is skipped.
"""
from __future__ import annotations

import re
import subprocess  # nosec B404: subprocess is used with fixed internal commands
import sys
from typing import NamedTuple, Optional, Sequence

from .constants import PLATFORM_QUERY_TIMEOUT
from .exceptions import PlatformError
from .logging_config import get_logger

logger = get_logger(__name__)

# e.g. "Microsoft Windows [Version 10.0.19045.3570]"; the label is localized
_VER_PATTERN = re.compile(r"\[\S+ (\d+)\.(\d+)\.(\d+)[^\]]*\]\s*$")


class PlatformVersion(NamedTuple):
    major: int
    minor: int
    build: int


def is_windows() -> bool:
    return sys.platform == "win32"


def run_command(args: Sequence[str], timeout: float = PLATFORM_QUERY_TIMEOUT) -> str:
    """
    Run a command without a shell and return its stdout.

    Raises
    ------
    PlatformError
        If the command is missing, times out, or exits with non-zero status.
    """
    try:
        res = subprocess.run(
            list(args), capture_output=True, text=True, timeout=timeout
        )  # nosec B603: args are internally constructed
    except (OSError, subprocess.SubprocessError) as e:
        raise PlatformError(f"Could not run {args[0]}", command=args, cause=e) from e

    if res.returncode != 0:
        raise PlatformError(
            f"{args[0]} exited with an error", command=args, returncode=res.returncode
        )
    return res.stdout


def parse_ver_output(output: str) -> Optional[PlatformVersion]:
    """Parse the output of the Windows ``ver`` command."""
    match = _VER_PATTERN.search(output.strip())
    if not match:
        return None
    major, minor, build = (int(part) for part in match.groups())
    return PlatformVersion(major, minor, build)


def get_platform_version() -> Optional[PlatformVersion]:
    """Return the Windows (major, minor, build) version, or None when unknown."""
    if not is_windows():
        return None

    try:
        output = run_command(["cmd", "/c", "ver"])
    except PlatformError as e:
        logger.debug("Windows version query failed: %s", e)
        return None

    version = parse_ver_output(output)
    if version is None:
        logger.debug("Unrecognized ver output: %r", output)
    return version


PLATFORM_VERSION: Optional[PlatformVersion] = get_platform_version()

__all__ = [
    "PlatformVersion",
    "PLATFORM_VERSION",
    "is_windows",
    "run_command",
    "parse_ver_output",
    "get_platform_version",
]
