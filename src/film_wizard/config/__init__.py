"""Configuration management module."""

from .config_manager import ConfigManager
from .models import Config, LoggingConfig, SuggestionConfig, TMDbConfig

__all__ = [
    "ConfigManager",
    "Config",
    "TMDbConfig",
    "SuggestionConfig",
    "LoggingConfig",
]
