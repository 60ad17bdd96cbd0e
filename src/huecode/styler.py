#!/usr/bin/env python3
"""
Styling entry points.

A Styler owns the support tier used for every compilation. The tier is
detected lazily on first use and cached; ``level`` can be overridden at any
time (``0`` forces plain output) and ``reset_level`` goes back to detection.

The module-level functions delegate to ``default_styler``, which holds the
process-wide tier.

Example:
    from huecode.styler import apply, format

    print(apply("done", ["bold green"]))
    print(format("%{red}error:%{reset} disk full"))
"""
from __future__ import annotations

import re
import threading
from typing import Callable, Iterable, Optional, Union

from .compiler import compile_directives
from .constants import RESET_SEQUENCE
from .detect import detect
from .tiers import SupportTier, coerce_tier

RESET = RESET_SEQUENCE

_PLACEHOLDER = re.compile(r"%\{(.*?)\}", re.DOTALL)

Detector = Callable[[], int]


class Styler:
    """Compiles directives against a cached, overridable support tier."""

    def __init__(
        self,
        level: Optional[Union[int, str]] = None,
        detector: Detector = detect,
    ):
        self._detector = detector
        self._lock = threading.RLock()
        self._level: Optional[SupportTier] = (
            coerce_tier(level) if level is not None else None
        )

    @property
    def level(self) -> SupportTier:
        with self._lock:
            if self._level is None:
                self._level = coerce_tier(self._detector())
            return self._level

    @level.setter
    def level(self, value: Union[int, str]) -> None:
        tier = coerce_tier(value)
        with self._lock:
            self._level = tier

    def reset_level(self) -> None:
        """Drop any override; the next read detects again."""
        with self._lock:
            self._level = None

    def compile(self, directives: str) -> str:
        return compile_directives(directives, self.level)

    def raw_apply(self, text: str, attrs: Iterable[str]) -> str:
        """Prefix ``text`` with the compiled attribute groups."""
        return self.compile(" ".join(attrs)) + text

    def apply(self, text: str, attrs: Iterable[str]) -> str:
        """Like raw_apply, followed by a full reset."""
        return self.raw_apply(text, attrs) + RESET

    def raw_format(self, template: str) -> str:
        """Replace every ``%{...}`` placeholder with its compiled directives."""
        tier = self.level
        return _PLACEHOLDER.sub(
            lambda m: compile_directives(m.group(1), tier), template
        )

    def format(self, template: str) -> str:
        """Like raw_format, followed by a full reset."""
        return self.raw_format(template) + RESET


default_styler = Styler()


def get_level() -> SupportTier:
    return default_styler.level


def set_level(value: Union[int, str]) -> None:
    default_styler.level = value


def reset_level() -> None:
    default_styler.reset_level()


def compile(directives: str) -> str:
    return default_styler.compile(directives)


def raw_apply(text: str, attrs: Iterable[str]) -> str:
    return default_styler.raw_apply(text, attrs)


def apply(text: str, attrs: Iterable[str]) -> str:
    return default_styler.apply(text, attrs)


def raw_format(template: str) -> str:
    return default_styler.raw_format(template)


def format(template: str) -> str:
    return default_styler.format(template)


__all__ = [
    "RESET",
    "Styler",
    "default_styler",
    "get_level",
    "set_level",
    "reset_level",
    "compile",
    "raw_apply",
    "apply",
    "raw_format",
    "format",
]
