#!/usr/bin/env python3
"""Config command implementation for huecode CLI.

Shows the effective configuration and writes new configuration files.
"""
from __future__ import annotations

from pathlib import Path

from ..config import HuecodeConfig
from ..constants import DEFAULT_CONFIG_FILE
from ..exceptions import ArgumentError
from ..helpfmt import ColorDefaultsFormatter
from ..styler import default_styler
from .colors import example, subsection_header


def add_config_subcommand(subparsers) -> None:
    """Add config subcommand to the parser."""
    config_parser = subparsers.add_parser(
        "config",
        help="Show or create configuration",
        formatter_class=ColorDefaultsFormatter,
        description=f"""
Show the effective configuration or write a new YAML config file.

{subsection_header("SOURCES (later wins):")}
  • huecode.yml, .huecode.yml, ~/.config/huecode/config.yml or $HUECODE_CONFIG
  • HUECODE_COLOR, HUECODE_LEVEL, HUECODE_LOG_LEVEL
  • --config, --level, --no-color, --log-level

{subsection_header("EXAMPLES:")}
  {example("# Show what is in effect")}
  huecode config show

  {example("# Always use basic colors, even when not detected")}
  huecode config init --color-mode always
        """,
    )
    config_sub = config_parser.add_subparsers(dest="config_command", metavar="{show,init}")

    show_parser = config_sub.add_parser("show", help="Show current configuration")
    show_parser.set_defaults(func=cmd_config_show)

    init_parser = config_sub.add_parser("init", help="Initialize configuration file")
    init_parser.add_argument(
        "config_path",
        nargs="?",
        default=DEFAULT_CONFIG_FILE,
        help="Path for new config file",
    )
    init_parser.add_argument(
        "--color-mode", choices=["auto", "always", "never"], default="auto"
    )
    init_parser.add_argument("--level", dest="init_level", type=int, choices=range(4))
    init_parser.add_argument(
        "--force", action="store_true", help="Overwrite existing config file"
    )
    init_parser.set_defaults(func=cmd_config_init)

    config_parser.set_defaults(func=cmd_config_show)


def cmd_config_show(args) -> None:
    """Handle 'huecode config show'."""
    config = args.loaded_config

    print("Current huecode configuration:")
    print("=" * 40)
    print(f"  color_mode: {config.color_mode}")
    print(f"  level: {config.level if config.level is not None else '(not set)'}")
    print(f"  log_level: {config.log_level}")
    print(f"  tier in effect: {int(default_styler.level)}")

    config_file = args.config or HuecodeConfig._find_config_file()
    if config_file:
        print(f"\nConfig file: {config_file}")
    else:
        print("\nNo config file found (using defaults)")


def cmd_config_init(args) -> None:
    """Handle 'huecode config init'."""
    config_path = Path(args.config_path)

    if config_path.exists() and not args.force:
        raise ArgumentError(
            "Config file already exists, use --force to overwrite",
            argument_name="config_path",
            argument_value=str(config_path),
        )

    config = HuecodeConfig(color_mode=args.color_mode, level=args.init_level)
    config.validate()
    config.save(str(config_path))
    print(f"Created config file: {config_path}")

    print("\nGenerated configuration:")
    print("-" * 30)
    print(config_path.read_text(encoding="utf-8"))
