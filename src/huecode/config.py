#!/usr/bin/env python3
"""
Configuration management for huecode.

Supports:
- YAML configuration files
- Environment variable overrides
- Default values
- Validation
"""
from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Callable, Optional

import yaml

from .constants import (
    COLOR_MODES,
    DEFAULT_LOG_LEVEL,
    ENV_CONFIG_COLOR,
    ENV_CONFIG_LEVEL,
    ENV_CONFIG_LOG_LEVEL,
    ENV_CONFIG_PATH,
)
from .exceptions import ConfigurationError
from .logging_config import get_logger
from .tiers import SupportTier, coerce_tier

logger = get_logger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class HuecodeConfig:
    """Configuration for huecode with defaults."""

    # auto: detect, always: at least basic colors, never: plain text
    color_mode: str = "auto"

    # Explicit tier; wins over color_mode when set
    level: Optional[int] = None

    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "HuecodeConfig":
        """Load configuration from file and environment."""
        config = cls()

        if config_path:
            if not Path(config_path).exists():
                raise ConfigurationError(
                    "Config file not found", config_path=str(config_path)
                )
            config._load_from_file(config_path, strict=True)
        else:
            found = cls._find_config_file()
            if found:
                config._load_from_file(found, strict=False)

        config._load_from_env()
        config.validate()
        return config

    @staticmethod
    def _find_config_file() -> Optional[str]:
        """Find config file in standard locations."""
        env_path = os.getenv(ENV_CONFIG_PATH)
        candidates = [env_path] if env_path else []
        candidates += [
            "huecode.yml",
            "huecode.yaml",
            ".huecode.yml",
            ".huecode.yaml",
            os.path.expanduser("~/.config/huecode/config.yml"),
            os.path.expanduser("~/.config/huecode/config.yaml"),
        ]

        for candidate in candidates:
            if Path(candidate).exists():
                return candidate
        return None

    def _load_from_file(self, config_path: str, strict: bool) -> None:
        """Load configuration from a YAML file.

        Problems in an explicitly requested file raise; problems in a
        discovered file are logged and the file is skipped.
        """
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ConfigurationError(
                    "Config file must contain a mapping", config_path=config_path
                )
        except (OSError, yaml.YAMLError) as e:
            if strict:
                raise ConfigurationError(
                    "Could not read config file", config_path=config_path, cause=e
                ) from e
            logger.warning("Error loading config from %s: %s", config_path, e)
            return
        except ConfigurationError as e:
            if strict:
                raise
            logger.warning("%s", e)
            return

        known = {f.name for f in fields(self)}
        for key, value in data.items():
            if key in known:
                setattr(self, key, value)
            else:
                logger.warning("Unknown config key %r in %s", key, config_path)

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        color_mode = os.getenv(ENV_CONFIG_COLOR)
        if color_mode:
            self.color_mode = color_mode.strip().lower()

        level = os.getenv(ENV_CONFIG_LEVEL)
        if level:
            try:
                self.level = int(level)
            except ValueError as e:
                raise ConfigurationError(
                    "Level must be an integer from 0 to 3",
                    config_key=ENV_CONFIG_LEVEL,
                    config_value=level,
                    cause=e,
                ) from e

        log_level = os.getenv(ENV_CONFIG_LOG_LEVEL)
        if log_level:
            self.log_level = log_level.strip().upper()

    def validate(self) -> None:
        if self.color_mode not in COLOR_MODES:
            raise ConfigurationError(
                f"color_mode must be one of {', '.join(COLOR_MODES)}",
                config_key="color_mode",
                config_value=self.color_mode,
            )
        if self.level is not None:
            if isinstance(self.level, bool) or not isinstance(self.level, int):
                raise ConfigurationError(
                    "Level must be an integer from 0 to 3",
                    config_key="level",
                    config_value=self.level,
                )
            if not 0 <= self.level <= 3:
                raise ConfigurationError(
                    "Level must be an integer from 0 to 3",
                    config_key="level",
                    config_value=self.level,
                )
        if str(self.log_level).upper() not in _LOG_LEVELS:
            raise ConfigurationError(
                "Unknown log level",
                config_key="log_level",
                config_value=self.log_level,
            )

    def requests_override(self) -> bool:
        """True when the config pins the tier instead of trusting detection."""
        return self.level is not None or self.color_mode != "auto"

    def resolve_level(self, detector: Callable[[], int]) -> SupportTier:
        """Tier this configuration asks for, calling ``detector`` only if needed."""
        if self.level is not None:
            return coerce_tier(self.level)
        if self.color_mode == "never":
            return SupportTier.NONE
        detected = coerce_tier(detector())
        if self.color_mode == "always":
            return max(detected, SupportTier.BASIC)
        return detected

    def save(self, config_path: str) -> None:
        """Save current configuration to file."""
        data = {key: value for key, value in asdict(self).items() if value is not None}

        Path(config_path).parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=True)


def apply_config(config: HuecodeConfig, styler) -> None:
    """Push the configured tier into a Styler when the config pins one."""
    if not config.requests_override():
        return
    styler.reset_level()
    styler.level = config.resolve_level(lambda: styler.level)
    logger.debug("Support tier set from configuration: %d", styler.level)


__all__ = ["HuecodeConfig", "apply_config"]
