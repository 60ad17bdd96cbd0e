#!/usr/bin/env python3
"""Detect and attributes commands for the huecode CLI.

Reports what the capability detector decided and lists the attribute table.
"""
from __future__ import annotations

from ..attributes import ATTRIBUTES, FixedCode
from ..detect import explain
from ..helpfmt import ColorDefaultsFormatter
from ..styler import default_styler
from ..tiers import SupportTier
from .colors import dim_text, section_header

# Arguments used to preview parametrized attributes
_PREVIEW_ARGS = {
    "color256": ("208",),
    "bg-color256": ("236",),
    "rgb": ("255", "136", "0"),
    "bg-rgb": ("40", "40", "40"),
    "hex": ("#ff8800",),
    "bg-hex": ("#282828",),
}


def add_detect_subcommands(subparsers) -> None:
    """Add detect and attributes subcommands to the parser."""
    detect_parser = subparsers.add_parser(
        "detect",
        help="Show the detected color support tier",
        formatter_class=ColorDefaultsFormatter,
        description="""
Print the color support tier: 0 none, 1 basic, 2 256-color, 3 truecolor.
The tier in effect can differ from the detected one when --level, --no-color
or a config file overrides it.
        """,
    )
    detect_parser.add_argument(
        "--explain",
        action="store_true",
        help="Also show the rule that decided the tier",
    )
    detect_parser.set_defaults(func=cmd_detect)

    attributes_parser = subparsers.add_parser(
        "attributes",
        help="List available attributes",
        formatter_class=ColorDefaultsFormatter,
        description="List every attribute name with the tier it needs and a preview.",
    )
    attributes_parser.set_defaults(func=cmd_attributes)


def cmd_detect(args) -> None:
    """Execute the detect command."""
    detection = explain()
    effective = default_styler.level

    if not args.explain:
        print(int(effective))
        return

    print(f"detected: {int(detection.tier)} ({detection.tier.name.lower()})")
    print(f"rule:     {detection.rule}")
    if effective != detection.tier:
        print(f"in effect: {int(effective)} ({effective.name.lower()}, overridden)")


def _describe(name: str, spec) -> str:
    if isinstance(spec, FixedCode):
        return f"SGR {spec.code}"
    args = _PREVIEW_ARGS.get(name, ())
    return f"{name}:{','.join(args)}"


def cmd_attributes(args) -> None:
    """Execute the attributes command."""
    print(section_header("Attributes"))
    width = max(len(name) for name in ATTRIBUTES)
    for name, spec in ATTRIBUTES.items():
        directive = _describe(name, spec)
        preview_token = name if isinstance(spec, FixedCode) else directive
        preview = default_styler.apply("sample", [preview_token])
        tier = SupportTier(spec.min_tier).name.lower()
        print(f"  {name:<{width}}  {dim_text(f'{tier:<9}')}  {directive:<22} {preview}")
