"""
Configuration management for netrange.

Loads settings from environment variables or a .env file.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Check common locations for .env
env_locations = [
    Path.home() / ".netrange" / ".env",
    Path.home() / ".config" / "netrange" / ".env",
    Path.cwd() / ".env",
]
for env_path in env_locations:
    if env_path.exists():
        load_dotenv(env_path)
        break

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_DISPLAY = 256


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass
class NetRangeConfig:
    """Runtime settings for the command-line tool."""

    # Logging
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str | None = None

    # Maximum subnets listed by "netrange split"
    max_display: int = DEFAULT_MAX_DISPLAY

    @classmethod
    def from_env(cls) -> "NetRangeConfig":
        """Load configuration from environment variables."""
        level = os.getenv("NETRANGE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if level not in LOG_LEVELS:
            logging.getLogger(__name__).debug("Ignoring unknown log level %r", level)
            level = DEFAULT_LOG_LEVEL
        return cls(
            log_level=level,
            log_file=os.getenv("NETRANGE_LOG_FILE") or None,
            max_display=_env_int("NETRANGE_MAX_DISPLAY", DEFAULT_MAX_DISPLAY),
        )


# Global config instance
_config: NetRangeConfig | None = None


def get_config() -> NetRangeConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = NetRangeConfig.from_env()
    return _config


def set_config(config: NetRangeConfig | None) -> None:
    """Set the global configuration instance; None reloads from the environment."""
    global _config
    _config = config
