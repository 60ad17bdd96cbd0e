#!/usr/bin/env python3
"""
Attribute table: attribute names mapped to SGR codes or parametrized renderers.

Every entry exposes ``min_tier`` and ``render(args)``. Fixed codes need basic
color support and ignore arguments. Parametrized entries build their sequence
from the directive arguments and return None when those are malformed.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple, Union

from .constants import CSI
from .tiers import SupportTier

Renderer = Callable[[Sequence[str]], Optional[str]]


@dataclass(frozen=True)
class FixedCode:
    """A constant SGR parameter, e.g. bold=1 or red=31."""

    code: int
    min_tier: int = SupportTier.BASIC

    def render(self, args: Sequence[str] = ()) -> str:
        return f"{CSI}{self.code}m"


@dataclass(frozen=True)
class Parametrized:
    """An SGR sequence computed from directive arguments."""

    min_tier: int
    renderer: Renderer

    def render(self, args: Sequence[str] = ()) -> str:
        return self.renderer(args) or ""


AttributeSpec = Union[FixedCode, Parametrized]


def hex2rgb(value: str) -> Tuple[int, int, int]:
    """Convert ``#rrggbb`` (the ``#`` is optional) into an (r, g, b) tuple."""
    digits = value[1:] if value.startswith("#") else value
    if len(digits) != 6:
        raise ValueError(f"Expected six hex digits: {value!r}")
    # int() alone would accept signs, spaces and underscores
    if any(c not in "0123456789abcdefABCDEF" for c in digits):
        raise ValueError(f"Invalid hex color: {value!r}")
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def _channel(value: str) -> Optional[int]:
    if not (value.isascii() and value.isdecimal()):
        return None
    n = int(value)
    return n if 0 <= n <= 255 else None


def _palette(layer: int) -> Renderer:
    def render(args: Sequence[str]) -> Optional[str]:
        if len(args) != 1:
            return None
        n = _channel(args[0])
        if n is None:
            return None
        return f"{CSI}{layer};5;{n}m"

    return render


def _rgb(layer: int) -> Renderer:
    def render(args: Sequence[str]) -> Optional[str]:
        if len(args) != 3:
            return None
        channels = [_channel(arg) for arg in args]
        if any(c is None for c in channels):
            return None
        r, g, b = channels
        return f"{CSI}{layer};2;{r};{g};{b}m"

    return render


def _hex(layer: int) -> Renderer:
    def render(args: Sequence[str]) -> Optional[str]:
        if len(args) != 1:
            return None
        try:
            r, g, b = hex2rgb(args[0])
        except ValueError:
            return None
        return f"{CSI}{layer};2;{r};{g};{b}m"

    return render


_FOREGROUND = 38
_BACKGROUND = 48

_COLOR_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

_STYLES = {
    "reset": 0,
    "bright": 1,
    "bold": 1,
    "dim": 2,
    "dark": 2,
    "italic": 3,
    "underline": 4,
    "underl": 4,
    "blink": 5,
    "inverse": 7,
    "reverse": 7,
    "hidden": 8,
    "invisible": 8,
    "strikethrough": 9,
    "strike": 9,
}


def _build_table() -> Mapping[str, AttributeSpec]:
    table: Dict[str, AttributeSpec] = {
        name: FixedCode(code) for name, code in _STYLES.items()
    }

    for offset, color in enumerate(_COLOR_NAMES):
        table[color] = FixedCode(30 + offset)
        table[f"bg-{color}"] = FixedCode(40 + offset)
        table[f"bright-{color}"] = FixedCode(90 + offset)
        table[f"bg-bright-{color}"] = FixedCode(100 + offset)
    table["default"] = FixedCode(39)
    table["bg-default"] = FixedCode(49)

    table["color256"] = Parametrized(SupportTier.EXTENDED, _palette(_FOREGROUND))
    table["bg-color256"] = Parametrized(SupportTier.EXTENDED, _palette(_BACKGROUND))
    table["rgb"] = Parametrized(SupportTier.TRUECOLOR, _rgb(_FOREGROUND))
    table["bg-rgb"] = Parametrized(SupportTier.TRUECOLOR, _rgb(_BACKGROUND))
    table["hex"] = Parametrized(SupportTier.TRUECOLOR, _hex(_FOREGROUND))
    table["bg-hex"] = Parametrized(SupportTier.TRUECOLOR, _hex(_BACKGROUND))

    return MappingProxyType(table)


ATTRIBUTES: Mapping[str, AttributeSpec] = _build_table()


def lookup(name: str) -> Optional[AttributeSpec]:
    return ATTRIBUTES.get(name)


__all__ = [
    "AttributeSpec",
    "FixedCode",
    "Parametrized",
    "Renderer",
    "ATTRIBUTES",
    "hex2rgb",
    "lookup",
]
