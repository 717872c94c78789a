"""Configuration loader for BeerStock.

Loads configuration from a TOML file. Environment variables can override
any configuration value.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from beerstock.config.schema import BeerstockConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "BEERSTOCK"

# Keys whose environment values are converted before validation
_INT_KEYS = ("port", "min_pool_size", "max_pool_size")
_BOOL_KEYS = ("debug",)
_LIST_KEYS = ("cors_origins",)


def get_config_search_paths() -> list[Path]:
    """Get the list of paths to search for configuration files.

    Returns paths in priority order (first found wins):
    1. ./config.toml (project root - for development)
    2. ~/.config/beerstock/config.toml (user config)
    3. /etc/beerstock/config.toml (system config)
    """
    return [
        Path.cwd() / "config.toml",
        Path.home() / ".config" / "beerstock" / "config.toml",
        Path("/etc/beerstock/config.toml"),
    ]


def find_config_file() -> Path | None:
    """Find the first existing config file from search paths."""
    for path in get_config_search_paths():
        if path.exists() and path.is_file():
            logger.debug("Found config file: %s", path)
            return path
    return None


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def _convert(key: str, value: str) -> Any:
    if key in _INT_KEYS:
        return int(value)
    if key in _BOOL_KEYS:
        return value.lower() in ("true", "1", "yes")
    if key in _LIST_KEYS:
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


def apply_env_overrides(config_dict: dict[str, Any], prefix: str = ENV_PREFIX) -> None:
    """Apply environment variable overrides to configuration dictionary.

    Environment variables are mapped as follows:
    - BEERSTOCK_SERVER_HOST -> config_dict["server"]["host"]
    - BEERSTOCK_DATABASE_MONGODB_URL -> config_dict["database"]["mongodb_url"]
    - BEERSTOCK_LOG_LEVEL -> config_dict["logging"]["level"]
    - etc.

    Note: This modifies config_dict in place.
    """
    env_mappings = {
        f"{prefix}_APP_NAME": (None, "app_name"),
        # Server
        f"{prefix}_SERVER_HOST": ("server", "host"),
        f"{prefix}_SERVER_PORT": ("server", "port"),
        f"{prefix}_SERVER_DEBUG": ("server", "debug"),
        f"{prefix}_SERVER_CORS_ORIGINS": ("server", "cors_origins"),
        f"{prefix}_DEBUG": ("server", "debug"),  # Shorthand
        f"{prefix}_HOST": ("server", "host"),  # Shorthand
        f"{prefix}_PORT": ("server", "port"),  # Shorthand
        # Database
        f"{prefix}_DATABASE_MONGODB_URL": ("database", "mongodb_url"),
        f"{prefix}_DATABASE_MONGODB_DATABASE": ("database", "mongodb_database"),
        f"{prefix}_DATABASE_MIN_POOL_SIZE": ("database", "min_pool_size"),
        f"{prefix}_DATABASE_MAX_POOL_SIZE": ("database", "max_pool_size"),
        f"{prefix}_MONGODB_URL": ("database", "mongodb_url"),  # Shorthand
        f"{prefix}_MONGODB_DATABASE": ("database", "mongodb_database"),  # Shorthand
        # Logging
        f"{prefix}_LOGGING_LEVEL": ("logging", "level"),
        f"{prefix}_LOGGING_FORMAT": ("logging", "format"),
        f"{prefix}_LOG_LEVEL": ("logging", "level"),  # Shorthand
    }

    for env_var, (section, key) in env_mappings.items():
        value = os.environ.get(env_var)
        if value is None:
            continue

        if section is None:
            config_dict[key] = _convert(key, value)
            continue

        # Ensure section exists
        config_dict.setdefault(section, {})
        if key == "level":
            value = value.upper()
        config_dict[section][key] = _convert(key, value)


def load_config(config_file: Path | None = None) -> BeerstockConfig:
    """Load configuration from TOML file with environment variable overrides.

    Args:
        config_file: Optional path to config file. If not provided,
                     searches default locations.

    Returns:
        BeerstockConfig instance with all settings loaded.
    """
    config_dict: dict[str, Any] = {}

    if config_file is None:
        config_file = find_config_file()

    if config_file and config_file.exists():
        logger.info("Loading config from: %s", config_file)
        config_dict = load_toml_file(config_file)
    else:
        logger.info("No config file found, using defaults with env overrides")

    apply_env_overrides(config_dict)

    return BeerstockConfig(**config_dict)
