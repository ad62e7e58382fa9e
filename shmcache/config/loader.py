"""YAML configuration loader with environment variable overrides.

Configuration is loaded in layers (later layers override earlier):

  1. config/config.yaml  -- static defaults checked into the repo
  2. .env file           -- local developer overrides
  3. Environment vars    -- set at deploy time

``load_config`` reads the YAML file first, then deep-merges the values
resolved by :class:`Settings` on top.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from shmcache.config.settings import Settings
from shmcache.utils.errors import ConfigurationError

# Settings field -> (section, key) in the resolved configuration.
_FIELD_PATHS = {
    "app_env": ("app", "env"),
    "shmcache_max_entries": ("store", "max_entries"),
    "log_level": ("logging", "level"),
}


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge with environment-based Settings.

    Args:
        path: Path to the YAML configuration file.  A missing file yields
              an empty base layer.
        settings: Pre-built settings; a fresh ``Settings()`` when omitted.

    Returns:
        Fully resolved configuration dictionary.

    Raises:
        ConfigurationError: If the environment or .env file holds a value
                            the settings cannot parse.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path) as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    if settings is None:
        try:
            settings = Settings()
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid environment settings: {exc}") from exc

    env_overrides: dict = {
        "app": {"env": settings.app_env},
        "store": {"max_entries": settings.shmcache_max_entries},
        "logging": {"level": settings.log_level},
    }

    # Fields left at their defaults do not mask values from the YAML file.
    for field, (section, key) in _FIELD_PATHS.items():
        yaml_section = yaml_config.get(section)
        if (
            field not in settings.model_fields_set
            and isinstance(yaml_section, dict)
            and key in yaml_section
        ):
            del env_overrides[section][key]

    _deep_merge(yaml_config, env_overrides)
    return yaml_config


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
