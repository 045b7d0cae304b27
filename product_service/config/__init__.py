"""Configuration module."""

from product_service.config.configuration import (
    AppConfig,
    ConfigurationError,
    CosmosDBConfig,
    LoggingConfig,
    StoreConfig,
    get_config,
    load_config,
    reset_config,
)

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "CosmosDBConfig",
    "LoggingConfig",
    "StoreConfig",
    "get_config",
    "load_config",
    "reset_config",
]
