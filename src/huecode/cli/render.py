#!/usr/bin/env python3
"""Rendering commands for the huecode CLI: both, format and apply."""
from __future__ import annotations

from ..helpfmt import ColorDefaultsFormatter
from ..styler import default_styler
from .colors import example, subsection_header


def _attr_groups(args) -> list[str]:
    return [" ".join(args.attributes)]


def add_render_subcommands(subparsers) -> None:
    """Add both, format and apply subcommands to the parser."""
    both_parser = subparsers.add_parser(
        "both",
        help="Expand %%{...} placeholders and apply attributes (default)",
        formatter_class=ColorDefaultsFormatter,
        description=f"""
Expand %{{...}} placeholders in TEXT, then apply ATTRIBUTES to the whole of it.
This is what runs when the first argument is not a command.

{subsection_header("EXAMPLES:")}
  {example("# Bold red warning")}
  huecode "warning: disk almost full" bold red

  {example("# Mix placeholders and attributes")}
  huecode "%{{green}}ok%{{reset}} all checks passed" underline
        """,
    )
    both_parser.add_argument("text", help="Text or format template")
    both_parser.add_argument(
        "attributes", nargs="*", help="Attribute directives, e.g. bold hex:#ff8800"
    )
    both_parser.set_defaults(func=cmd_both)

    format_parser = subparsers.add_parser(
        "format",
        help="Expand %%{...} placeholders",
        formatter_class=ColorDefaultsFormatter,
        description=f"""
Replace each %{{...}} placeholder with the escape sequence for its directives.

{subsection_header("EXAMPLES:")}
  huecode format "%{{bold}}build%{{reset}} %{{green}}passed"
  huecode format "%{{rgb:255,136,0 bg-color256:236}}orange on grey"
        """,
    )
    format_parser.add_argument("template", help="Format template")
    format_parser.set_defaults(func=cmd_format)

    apply_parser = subparsers.add_parser(
        "apply",
        help="Apply attributes to text",
        formatter_class=ColorDefaultsFormatter,
        description=f"""
Prefix TEXT with the escape sequence for ATTRIBUTES and reset afterwards.
Placeholders in TEXT are left alone.

{subsection_header("EXAMPLES:")}
  huecode apply "deploy finished" bold green
        """,
    )
    apply_parser.add_argument("text", help="Text to style")
    apply_parser.add_argument("attributes", nargs="*", help="Attribute directives")
    apply_parser.set_defaults(func=cmd_apply)


def cmd_both(args) -> None:
    """Execute the both command."""
    print(default_styler.format(default_styler.apply(args.text, _attr_groups(args))))


def cmd_format(args) -> None:
    """Execute the format command."""
    print(default_styler.format(args.template))


def cmd_apply(args) -> None:
    """Execute the apply command."""
    print(default_styler.apply(args.text, _attr_groups(args)))
