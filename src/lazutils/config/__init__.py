"""Configuration models and loaders for lazutils."""

from .loader import (
    ConfigError,
    DEFAULT_CONFIG_PATH,
    ENV_HASH_WIDTH,
    ENV_LOG_LEVEL,
    dump_example_config,
    load_config,
)
from .models import HashingConfig, LazUtilsConfig, LoaderConfig, LoggingConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "ENV_HASH_WIDTH",
    "ENV_LOG_LEVEL",
    "HashingConfig",
    "LazUtilsConfig",
    "LoaderConfig",
    "LoggingConfig",
    "dump_example_config",
    "load_config",
]
