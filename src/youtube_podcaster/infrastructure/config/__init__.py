"""Configuration providers and models."""

from youtube_podcaster.infrastructure.config.models import (
    AppConfig,
    HttpSettings,
    LoggingConfig,
    ProcessingSettings,
)
from youtube_podcaster.infrastructure.config.yaml_provider import YamlConfigurationProvider

__all__ = [
    "AppConfig",
    "HttpSettings",
    "LoggingConfig",
    "ProcessingSettings",
    "YamlConfigurationProvider",
]
