# src/typeinject/config/base_settings.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class InjectSettings(BaseSettings):
    """
    Registry behaviour switches.
    Read from INJECT_* environment variables or a local .env file.
    """

    coerce_named: bool = True
    trace_resolution: bool = False
    request_registry_attr: str = "registry"

    model_config = SettingsConfigDict(
        env_prefix="INJECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> InjectSettings:
    """Process-wide settings; call get_settings.cache_clear() to reload."""
    return InjectSettings()
