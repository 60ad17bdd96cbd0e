"""Terminal color support tiers."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from .constants import MAX_TIER


class SupportTier(IntEnum):
    """How rich a palette the terminal accepts; higher tiers include lower ones."""

    NONE = 0  # plain text only
    BASIC = 1  # 8/16 colors and text attributes
    EXTENDED = 2  # 256-color palette
    TRUECOLOR = 3  # 24-bit RGB


def coerce_tier(value: Union[int, str, SupportTier]) -> SupportTier:
    """Clamp an int-like value into a SupportTier.

    Raises ValueError when the value is not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Invalid support tier: {value!r}")
    if isinstance(value, str):
        value = int(value.strip())
    return SupportTier(min(MAX_TIER, max(0, value)))
