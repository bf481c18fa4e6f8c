"""Core subpackage.

- config: GameConfig, the field table and the generic transfer
- codecs: text <-> typed value translation for config fields
- paths: per-platform default config directory
- errors: typed configuration errors
- logging_setup: application-wide logging configuration
"""
from .config import (
    CONFIG_FIELDS,
    ConfigField,
    GameConfig,
    GameSettings,
    ParseType,
    TransferResult,
    default_ini_text,
    transfer,
)
from .errors import ConfigDirectoryError, ConfigError, ConfigErrorKind
from .paths import PlatformKind, current_platform, default_config_dir

__all__ = [
    "CONFIG_FIELDS",
    "ConfigField",
    "GameConfig",
    "GameSettings",
    "ParseType",
    "TransferResult",
    "default_ini_text",
    "transfer",
    "ConfigDirectoryError",
    "ConfigError",
    "ConfigErrorKind",
    "PlatformKind",
    "current_platform",
    "default_config_dir",
]
