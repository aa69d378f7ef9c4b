"""Cache settings loaded from environment variables via pydantic-settings.

Values are read (in priority order) from:

  1. Environment variables prefixed ``ASIDECACHE_``, e.g.
     ``ASIDECACHE_WRITE_TIMEOUT=1.5``
  2. A ``.env`` file in the working directory
  3. The defaults below
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheSettings(BaseSettings):
    """asidecache settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASIDECACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Client ===
    # Seconds a single cache write may take before it is abandoned.
    write_timeout: float = Field(default=3.0, gt=0)

    # === Storage ===
    storage_backend: Literal["memory", "sqlite"] = "memory"
    memory_max_size: int = Field(default=1000, gt=0)
    memory_ttl: float | None = None  # None = entries live until evicted
    sqlite_path: str = "data/cache.db"

    # === Logging ===
    app_env: str = "development"
    log_level: str = "INFO"
    log_json: bool = False
