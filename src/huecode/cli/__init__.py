#!/usr/bin/env python3
"""Command-line interface for huecode.

Each command lives in its own module; this package wires them into one
argparse parser and handles global options, configuration and exit codes.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..config import HuecodeConfig, apply_config
from ..exceptions import HuecodeError
from ..helpfmt import ColorDefaultsFormatter
from ..logging_config import HuecodeLogger, get_logger
from ..platform_info import is_windows
from ..styler import default_styler
from ..windows import windows_enable_vt
from .colors import error_text, example, subsection_header
from .config import add_config_subcommand, cmd_config_init, cmd_config_show
from .detect import add_detect_subcommands, cmd_attributes, cmd_detect
from .render import add_render_subcommands, cmd_apply, cmd_both, cmd_format

logger = get_logger(__name__)

COMMANDS = ("both", "format", "apply", "detect", "attributes", "config")

# Global options that consume the following argument
_VALUED_OPTIONS = ("--level", "--config", "--log-level")


def _command_index(argv: List[str]) -> int:
    """Index of the first argument that is not a global option."""
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--" or not arg.startswith("-"):
            return i
        i += 2 if arg in _VALUED_OPTIONS else 1
    return len(argv)


def _insert_default_command(argv: List[str]) -> List[str]:
    """Treat ``huecode TEXT [ATTR ...]`` as ``huecode both TEXT [ATTR ...]``."""
    i = _command_index(argv)
    if i == len(argv):
        return argv
    if argv[i] == "--":
        return argv[:i] + ["both"] + argv[i + 1 :]
    if argv[i] in COMMANDS:
        return argv
    return argv[:i] + ["both"] + argv[i:]


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--level",
        type=int,
        choices=range(4),
        help="Force a support tier: 0 none, 1 basic, 2 256-color, 3 truecolor",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable all styling (same as --level 0)"
    )
    parser.add_argument("--config", metavar="PATH", help="Path to a YAML config file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level for diagnostics on stderr",
    )


def _parse_global_options(argv: List[str]) -> argparse.Namespace:
    """Parse only the options given before the command name.

    Help text is styled while the full parser is built, so the tier has to be
    settled from these options first.
    """
    parser = argparse.ArgumentParser(prog="huecode", add_help=False)
    _add_global_options(parser)
    global_argv = [arg for arg in argv[: _command_index(argv)] if arg not in ("-h", "--help")]
    return parser.parse_args(global_argv)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huecode",
        formatter_class=ColorDefaultsFormatter,
        description=f"""
Style text with ANSI escape sequences suited to the current terminal.

{subsection_header("ATTRIBUTES:")}
  bold dim italic underline blink reverse hidden strike reset
  red green ... white default, bg-red ..., bright-red ..., bg-bright-red ...
  color256:N  rgb:R,G,B  hex:#RRGGBB  (and bg- variants)

{subsection_header("EXAMPLES:")}
  {example("# Default mode: placeholders and attributes")}
  huecode "%{{bold}}note:%{{reset}} cache rebuilt" cyan

  {example("# What does this terminal support?")}
  huecode detect --explain
        """,
    )
    _add_global_options(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        metavar="{" + ",".join(COMMANDS) + "}",
    )
    add_render_subcommands(subparsers)
    add_detect_subcommands(subparsers)
    add_config_subcommand(subparsers)
    return parser


def _configure(options: argparse.Namespace) -> HuecodeConfig:
    """Settle logging and the support tier from config and global options."""
    config = HuecodeConfig.load(options.config)

    HuecodeLogger.set_level(options.log_level or config.log_level)
    apply_config(config, default_styler)

    if options.no_color:
        default_styler.level = 0
    elif options.level is not None:
        default_styler.level = options.level

    HuecodeLogger.set_color_tier(default_styler.level)

    if is_windows() and default_styler.level > 0:
        enabled, method = windows_enable_vt(skip_registry=True)
        logger.debug("Console VT processing enabled=%s via %s", enabled, method)

    return config


def _report_error(e: HuecodeError) -> int:
    logger.debug("huecode failed", exc_info=True)
    print(error_text(f"Error: {e}"), file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]
    argv = _insert_default_command(list(argv))

    try:
        config = _configure(_parse_global_options(argv))
    except HuecodeError as e:
        return _report_error(e)

    parser = build_parser()
    args = parser.parse_args(argv)
    args.loaded_config = config

    if not args.command:
        parser.print_help()
        return 1

    try:
        args.func(args)
        return 0
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130
    except HuecodeError as e:
        return _report_error(e)


__all__ = [
    "main",
    "build_parser",
    "COMMANDS",
    "cmd_both",
    "cmd_format",
    "cmd_apply",
    "cmd_detect",
    "cmd_attributes",
    "cmd_config_show",
    "cmd_config_init",
]
