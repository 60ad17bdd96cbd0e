#!/usr/bin/env python3
"""
Terminal color support detection.

Classifies the runtime environment into a SupportTier by walking an ordered
list of rules. Each rule looks at a DetectionContext (an environment snapshot
plus platform facts) and either returns a tier, which ends the walk, or None
to defer to the next rule. When no rule decides, the FORCE_COLOR floor is used.

Rules can be exercised individually by building a context from a synthetic
environment mapping; nothing here reads ``os.environ`` unless asked to.
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Callable, Mapping, NamedTuple, Optional, Tuple

from .constants import (
    APPLE_TERMINAL_PROGRAM,
    AZURE_PIPELINES_MARKERS,
    BASIC_CI_MARKERS,
    BASIC_TERM_PREFIXES,
    BASIC_TERM_SUBSTRINGS,
    CODESHIP_CI_NAME,
    DUMB_TERM,
    ENV_CI,
    ENV_CI_NAME,
    ENV_COLORTERM,
    ENV_FORCE_COLOR,
    ENV_NO_COLOR,
    ENV_TEAMCITY_VERSION,
    ENV_TERM,
    ENV_TERM_PROGRAM,
    ENV_TERM_PROGRAM_VERSION,
    ITERM_PROGRAM,
    ITERM_TRUECOLOR_MAJOR,
    KITTY_TERM,
    MAX_TIER,
    TERM_256_SUFFIXES,
    TRUECOLOR_CI_MARKERS,
    TRUECOLOR_COLORTERM,
    WINDOWS_TRUECOLOR_BUILD,
    WINDOWS_VT_BUILD,
)
from .logging_config import get_logger
from .platform_info import PLATFORM_VERSION, PlatformVersion, is_windows
from .tiers import SupportTier

logger = get_logger(__name__)

_TEAMCITY_9_PATTERN = re.compile(r"^9\.(0*[1-9]\d*)\.")
_TEAMCITY_MODERN_PATTERN = re.compile(r"\d{2,}\.")
_LEADING_DIGITS = re.compile(r"^(\d+)")


@dataclass(frozen=True)
class DetectionContext:
    """Everything a detection rule may look at."""

    env: Mapping[str, str]
    floor: int = 0
    on_windows: bool = False
    platform_version: Optional[PlatformVersion] = None

    def present(self, name: str) -> bool:
        """True when the variable is defined, even if empty."""
        return self.env.get(name) is not None

    def filled(self, name: str) -> bool:
        """True when the variable is defined and non-empty."""
        return bool(self.env.get(name))

    @property
    def term(self) -> str:
        return self.env.get(ENV_TERM) or ""


Rule = Callable[[DetectionContext], Optional[int]]


class Detection(NamedTuple):
    tier: SupportTier
    rule: str


def force_color_floor(env: Mapping[str, str]) -> int:
    """Minimum tier requested through FORCE_COLOR (0 when unset)."""
    raw = env.get(ENV_FORCE_COLOR)
    if not raw:
        return 0
    try:
        level = int(raw.strip())
    except ValueError:
        return 1
    return min(MAX_TIER, max(0, level))


# ──────────────────────────────────────────────────────────────────────────────
# Rules, in priority order
# ──────────────────────────────────────────────────────────────────────────────


def no_color_rule(ctx: DetectionContext) -> Optional[int]:
    # NO_COLOR beats FORCE_COLOR
    return 0 if ctx.filled(ENV_NO_COLOR) else None


def azure_pipelines_rule(ctx: DetectionContext) -> Optional[int]:
    if all(ctx.present(name) for name in AZURE_PIPELINES_MARKERS):
        return 1
    return None


def dumb_terminal_rule(ctx: DetectionContext) -> Optional[int]:
    return ctx.floor if ctx.term == DUMB_TERM else None


def windows_build_rule(ctx: DetectionContext) -> Optional[int]:
    version = ctx.platform_version
    if not ctx.on_windows or version is None:
        return None
    if version.major >= 10 and version.build > WINDOWS_VT_BUILD:
        return 3 if version.build >= WINDOWS_TRUECOLOR_BUILD else 2
    return None


def ci_rule(ctx: DetectionContext) -> Optional[int]:
    if not ctx.present(ENV_CI):
        return None
    if any(ctx.present(name) for name in TRUECOLOR_CI_MARKERS):
        return 3
    if any(ctx.present(name) for name in BASIC_CI_MARKERS):
        return 1
    if ctx.env.get(ENV_CI_NAME) == CODESHIP_CI_NAME:
        return 1
    return None


def teamcity_rule(ctx: DetectionContext) -> Optional[int]:
    version = ctx.env.get(ENV_TEAMCITY_VERSION)
    if version is None:
        return None
    if _TEAMCITY_9_PATTERN.match(version) or _TEAMCITY_MODERN_PATTERN.search(version):
        return 1
    return 0


def colorterm_truecolor_rule(ctx: DetectionContext) -> Optional[int]:
    return 3 if ctx.env.get(ENV_COLORTERM) == TRUECOLOR_COLORTERM else None


def kitty_rule(ctx: DetectionContext) -> Optional[int]:
    return 3 if ctx.term == KITTY_TERM else None


def term_program_rule(ctx: DetectionContext) -> Optional[int]:
    program = ctx.env.get(ENV_TERM_PROGRAM)
    if program is None:
        return None

    match = _LEADING_DIGITS.match(ctx.env.get(ENV_TERM_PROGRAM_VERSION) or "")
    major = int(match.group(1)) if match else 0

    if program == ITERM_PROGRAM:
        return 3 if major >= ITERM_TRUECOLOR_MAJOR else 2
    if program == APPLE_TERMINAL_PROGRAM:
        return 2
    return None


def term_256_rule(ctx: DetectionContext) -> Optional[int]:
    return 2 if ctx.term.endswith(TERM_256_SUFFIXES) else None


def term_basic_rule(ctx: DetectionContext) -> Optional[int]:
    term = ctx.term
    if term.startswith(BASIC_TERM_PREFIXES):
        return 1
    if any(part in term for part in BASIC_TERM_SUBSTRINGS):
        return 1
    return None


def colorterm_any_rule(ctx: DetectionContext) -> Optional[int]:
    return 1 if ctx.filled(ENV_COLORTERM) else None


RULES: Tuple[Tuple[str, Rule], ...] = (
    ("no_color", no_color_rule),
    ("azure_pipelines", azure_pipelines_rule),
    ("dumb_terminal", dumb_terminal_rule),
    ("windows_build", windows_build_rule),
    ("ci", ci_rule),
    ("teamcity", teamcity_rule),
    ("colorterm_truecolor", colorterm_truecolor_rule),
    ("kitty", kitty_rule),
    ("term_program", term_program_rule),
    ("term_256", term_256_rule),
    ("term_basic", term_basic_rule),
    ("colorterm_any", colorterm_any_rule),
)

FALLBACK_RULE = "fallback"


# ──────────────────────────────────────────────────────────────────────────────
# Entry points
# ──────────────────────────────────────────────────────────────────────────────


def build_context(
    env: Optional[Mapping[str, str]] = None,
    platform_version: Optional[PlatformVersion] = None,
    on_windows: Optional[bool] = None,
) -> DetectionContext:
    """
    Snapshot the inputs for detection.

    When ``on_windows`` is None both platform facts come from the running
    process; otherwise ``platform_version`` is taken as given.
    """
    if env is None:
        env = dict(os.environ)
    if on_windows is None:
        on_windows = is_windows()
        platform_version = PLATFORM_VERSION
    return DetectionContext(
        env=env,
        floor=force_color_floor(env),
        on_windows=on_windows,
        platform_version=platform_version,
    )


def evaluate(ctx: DetectionContext) -> Detection:
    """Walk RULES against a prepared context."""
    for name, rule in RULES:
        tier = rule(ctx)
        if tier is not None:
            return Detection(SupportTier(tier), name)
    return Detection(SupportTier(ctx.floor), FALLBACK_RULE)


def explain(
    env: Optional[Mapping[str, str]] = None,
    platform_version: Optional[PlatformVersion] = None,
    on_windows: Optional[bool] = None,
) -> Detection:
    """Detect the support tier and report which rule decided it."""
    result = evaluate(build_context(env, platform_version, on_windows))
    logger.debug("Color support tier %d (rule: %s)", result.tier, result.rule)
    return result


def detect(
    env: Optional[Mapping[str, str]] = None,
    platform_version: Optional[PlatformVersion] = None,
    on_windows: Optional[bool] = None,
) -> SupportTier:
    """Detect the color support tier of the current (or given) environment."""
    return explain(env, platform_version, on_windows).tier


__all__ = [
    "DetectionContext",
    "Detection",
    "Rule",
    "RULES",
    "FALLBACK_RULE",
    "force_color_floor",
    "build_context",
    "evaluate",
    "explain",
    "detect",
]
