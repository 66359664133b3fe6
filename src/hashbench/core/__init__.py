"""
Core Module

Foundational components used across the application including configuration
management and custom exceptions.
"""

from .config import get_config, set_config, reload_config, AppConfig
from .exceptions import (
    HashBenchException,
    ConfigurationError,
    UsageError,
    HashProviderError,
    TableShapeError,
    ResultStorageError,
)

__all__ = [
    "get_config",
    "set_config",
    "reload_config",
    "AppConfig",
    "HashBenchException",
    "ConfigurationError",
    "UsageError",
    "HashProviderError",
    "TableShapeError",
    "ResultStorageError",
]
