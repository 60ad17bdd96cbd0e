#!/usr/bin/env python3
"""
Attribute compiler: turns a directive string into ANSI escape text.

A directive string is a whitespace separated list of ``name[:args]`` tokens,
for example ``"bold red"`` or ``"bg-rgb:10,20,30 underline"``. Arguments are
separated by commas or semicolons.

Compilation never raises. Unknown names, malformed tokens, bad arguments and
attributes the current tier cannot show all contribute an empty string.
"""
from __future__ import annotations

import re
from typing import NamedTuple, Optional, Tuple

from .attributes import lookup
from .logging_config import get_logger

logger = get_logger(__name__)

_ARG_SPLIT = re.compile(r"[,;]+")


class Directive(NamedTuple):
    name: str
    args: Tuple[str, ...] = ()


def parse_directive(token: str) -> Optional[Directive]:
    """
    Split a token into name and arguments.

    Returns None for tokens with an empty name or more than one colon.
    """
    name, sep, rest = token.partition(":")
    if not name or ":" in rest:
        return None
    args = tuple(arg for arg in _ARG_SPLIT.split(rest) if arg) if sep else ()
    return Directive(name, args)


def compile_directive(token: str, tier: int) -> str:
    directive = parse_directive(token)
    if directive is None:
        logger.debug("Ignoring malformed directive %r", token)
        return ""

    spec = lookup(directive.name)
    if spec is None:
        logger.debug("Ignoring unknown attribute %r", directive.name)
        return ""

    if tier < spec.min_tier:
        return ""
    return spec.render(directive.args)


def compile_directives(directives: str, tier: int) -> str:
    """Compile a directive string for the given support tier."""
    return "".join(compile_directive(token, tier) for token in directives.split())


__all__ = [
    "Directive",
    "parse_directive",
    "compile_directive",
    "compile_directives",
]
