#!/usr/bin/env python3
"""
Enable VT (ANSI) sequence processing in the Windows console.

Three methods, picked by Windows version:

- Windows before 10, or Windows 10 before the Anniversary update (build
  14393): ANSICON (https://github.com/adoxa/ansicon) must be installed.
- Later builds: ``SetConsoleMode`` through kernel32.
- If kernel32 cannot be reached: the ``HKCU\\CONSOLE\\VirtualTerminalLevel``
  registry value. Writing it needs the caller's consent.

Color detection never depends on this module; it only reads the same
platform version information.
"""
from __future__ import annotations

import ctypes
import os
from typing import Callable, Optional, Tuple

from .constants import (
    DEFAULT_ANSICON,
    ENV_ANSICON,
    VT_REGISTRY_KEY,
    VT_REGISTRY_VALUE,
    WINDOWS_CONSOLE_VT_BUILD,
    WINDOWS_STD_ERROR_HANDLE,
    WINDOWS_STD_OUTPUT_HANDLE,
    WINDOWS_VT_CONSOLE_MODE,
)
from .exceptions import PlatformError
from .logging_config import get_logger
from .platform_info import PLATFORM_VERSION, PlatformVersion, is_windows, run_command

logger = get_logger(__name__)

NOT_WINDOWS = "not windows"
ANSICON_METHOD = "ansicon method"
WINAPI_METHOD = "winapi method"
REGISTRY_METHOD = "registry method"


def _succeeds(args) -> bool:
    try:
        run_command(args)
    except PlatformError as e:
        logger.debug("%s", e)
        return False
    return True


def _needs_ansicon(version: Optional[PlatformVersion]) -> bool:
    if version is None:
        return False
    if version.major < 10:
        return True
    return version.major == 10 and version.build < WINDOWS_CONSOLE_VT_BUILD


def _kernel32():
    windll = getattr(ctypes, "windll", None)
    if windll is None:
        return None
    try:
        return windll.kernel32
    except OSError as e:
        logger.debug("kernel32 unavailable: %s", e)
        return None


def _enable_with_winapi(kernel32) -> bool:
    ok = True
    for std_handle in (WINDOWS_STD_OUTPUT_HANDLE, WINDOWS_STD_ERROR_HANDLE):
        handle = kernel32.GetStdHandle(std_handle)
        if not kernel32.SetConsoleMode(handle, WINDOWS_VT_CONSOLE_MODE):
            logger.debug("SetConsoleMode failed for std handle %d", std_handle)
            ok = False
    return ok


def _enable_with_registry(
    skip_registry: bool, confirm: Optional[Callable[[], bool]]
) -> bool:
    if skip_registry:
        return False

    if _succeeds(["reg", "query", VT_REGISTRY_KEY, "/v", VT_REGISTRY_VALUE]):
        return True

    if confirm is None or not confirm():
        return False

    return _succeeds(
        [
            "reg", "add", VT_REGISTRY_KEY, "/f",
            "/v", VT_REGISTRY_VALUE, "/t", "REG_DWORD", "/d", "1",
        ]
    )


def windows_enable_vt(
    skip_registry: bool = False,
    confirm: Optional[Callable[[], bool]] = None,
    platform_version: Optional[PlatformVersion] = None,
    on_windows: Optional[bool] = None,
) -> Tuple[bool, str]:
    """
    Try to make the Windows console interpret ANSI escape sequences.

    Args:
        skip_registry: Never touch the registry
        confirm: Asked before the registry is edited; editing is skipped if None
        platform_version: Version to use instead of the one read at import
        on_windows: Platform override; when None the running platform is used

    Returns:
        (success, name of the method that was tried)
    """
    if on_windows is None:
        on_windows = is_windows()
        platform_version = PLATFORM_VERSION
    if not on_windows:
        return False, NOT_WINDOWS

    if _needs_ansicon(platform_version):
        ansicon = os.getenv(ENV_ANSICON) or DEFAULT_ANSICON
        return _succeeds([ansicon, "-p"]), ANSICON_METHOD

    kernel32 = _kernel32()
    if kernel32 is None:
        return _enable_with_registry(skip_registry, confirm), REGISTRY_METHOD

    return _enable_with_winapi(kernel32), WINAPI_METHOD


__all__ = [
    "NOT_WINDOWS",
    "ANSICON_METHOD",
    "WINAPI_METHOD",
    "REGISTRY_METHOD",
    "windows_enable_vt",
]
