"""Library settings loaded from environment variables via pydantic-settings.

Values are read from, in priority order:

  1. Environment variables, e.g. ``SHMCACHE_MAX_ENTRIES=1024``
  2. A ``.env`` file in the working directory
  3. The defaults declared below

Field names map to upper-cased environment variable names.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """shmcache settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Shared store ===
    # Capacity of the process-wide segment, in entries.
    shmcache_max_entries: int = 65536

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"
