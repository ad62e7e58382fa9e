"""Configuration module -- exports Settings and load_config.

Settings are resolved when ``load_config`` runs, never at import time.
"""

from shmcache.config.loader import load_config
from shmcache.config.settings import Settings

__all__ = ["Settings", "load_config"]
