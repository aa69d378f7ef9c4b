"""YAML configuration loader with environment variable overrides.

Configuration is loaded in layers (later layers override earlier):

  1. A YAML file (``config/cache.yaml`` by default) -- static defaults
  2. ``.env`` file                                  -- local overrides
  3. ``ASIDECACHE_*`` environment variables          -- deploy-time overrides

The YAML file may hold the settings at the top level or under a
``cache:`` section::

    cache:
      write_timeout: 2.0
      storage_backend: sqlite
      sqlite_path: /var/lib/app/cache.db
"""

from pathlib import Path
from typing import Any

import yaml

from asidecache.config.settings import CacheSettings
from asidecache.utils.errors import ConfigurationError


def load_config(path: str | Path = "config/cache.yaml") -> CacheSettings:
    """Load YAML config and layer environment-based settings on top.

    Args:
        path: Path to the YAML configuration file. A missing file is not
              an error; environment variables and defaults still apply.

    Returns:
        Fully resolved CacheSettings.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path) as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    if not isinstance(yaml_config, dict):
        raise ConfigurationError(f"{config_path}: expected a mapping at the top level")

    file_values: dict[str, Any] = yaml_config.get("cache", yaml_config)
    if not isinstance(file_values, dict):
        raise ConfigurationError(f"{config_path}: 'cache' section must be a mapping")

    # Fields the environment (or .env) supplied explicitly win over the file.
    env_settings = CacheSettings()
    env_values = env_settings.model_dump(include=env_settings.model_fields_set)

    merged = {**file_values, **env_values}
    return CacheSettings(**merged)
