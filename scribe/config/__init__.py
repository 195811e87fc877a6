"""Configuration loading for Scribe.

Configuration is read from TOML files with environment variable overrides.

Usage:
    from scribe.config import get_settings

    settings = get_settings()
    backend = settings.storage.audit.backend
"""

from functools import lru_cache

from scribe.config.loader import load_config
from scribe.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings instance.

    Call ``get_settings.cache_clear()`` or ``reload_settings()`` to re-read
    configuration files and the environment.
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
