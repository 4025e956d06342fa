"""Configuration module."""

from product_api.config.configuration import (
    AppConfig,
    ConfigurationError,
    CosmosDBConfig,
    LoggingConfig,
    ServerConfig,
    StorageConfig,
    get_config,
    get_environment,
    load_config,
    reset_config,
)

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "CosmosDBConfig",
    "LoggingConfig",
    "ServerConfig",
    "StorageConfig",
    "get_config",
    "get_environment",
    "load_config",
    "reset_config",
]
