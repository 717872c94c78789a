"""BeerStock configuration module.

This module provides TOML-based configuration with environment variable overrides.

Configuration is loaded from the following locations (in order of priority):
1. Environment variables (highest priority)
2. ./config.toml (project root - for development)
3. ~/.config/beerstock/config.toml (user config)
4. /etc/beerstock/config.toml (system config)
"""

from beerstock.config.schema import (
    BeerstockConfig,
    DatabaseConfig,
    LoggingConfig,
    ServerConfig,
)
from beerstock.config.settings import get_settings, reset_settings, settings

__all__ = [
    "BeerstockConfig",
    "DatabaseConfig",
    "LoggingConfig",
    "ServerConfig",
    "get_settings",
    "reset_settings",
    "settings",
]
