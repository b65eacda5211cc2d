"""
Configuration management for the Zuri organization client.

Settings are read from environment variables prefixed with ``ZURI_`` using
Pydantic settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from zurichat.utils.logger import logger


class ZuriSettings(BaseSettings):
    """Configuration for the Zuri core API."""

    model_config = SettingsConfigDict(
        case_sensitive=False, extra="ignore", env_prefix="ZURI_"
    )

    core_base_url: str = Field(
        default="https://api.zuri.chat",
        description="Base URL of the Zuri core API",
    )
    timeout: int = Field(default=30, description="Request timeout in seconds")


_zuri_settings: ZuriSettings | None = None


def get_zuri_settings() -> ZuriSettings:
    """
    Get the global Zuri settings instance.

    Returns:
        ZuriSettings: The global settings instance
    """
    global _zuri_settings
    if _zuri_settings is None:
        _zuri_settings = ZuriSettings()
        logger.info("ZuriSettings loaded", core_base_url=_zuri_settings.core_base_url)
    return _zuri_settings


def set_zuri_settings(settings: ZuriSettings | None) -> None:
    """
    Set the global Zuri settings instance.

    Passing ``None`` resets it so the next lookup reads the environment again.

    Args:
        settings: The settings to set
    """
    global _zuri_settings
    _zuri_settings = settings
