"""Configuration loading for supportdesk.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from supportdesk.config import get_settings

    settings = get_settings()
    threshold = settings.reasoning.escalation_urgency_threshold
"""

from functools import lru_cache

from supportdesk.config.loader import load_config
from supportdesk.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings instance.

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` or `reload_settings()` to reload.
    """
    config_dict = load_config()
    set_toml_config(config_dict)

    # pydantic-settings gives env vars priority over the TOML source
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
