"""Configuration module: exports CacheSettings, load_config and the factories."""

from asidecache.config.factory import build_client, build_storage
from asidecache.config.loader import load_config
from asidecache.config.settings import CacheSettings

__all__ = ["CacheSettings", "build_client", "build_storage", "load_config"]
