"""Config subpackage.

- defaults: directory/file names, field defaults, and logging knobs
"""
# Import constants explicitly to avoid F403
from .defaults import (
    CONFIG_DIRECTORY_NAME,
    DEFAULT_CONFIG_NAME,
    DEFAULT_GAME_PATH,
    DEFAULT_GAME_LANGUAGE,
    DEFAULT_INVERT_Y,
    LOG_LEVEL_ENV,
    LOG_SESSIONS_KEPT,
)

__all__ = [
    "CONFIG_DIRECTORY_NAME",
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_GAME_PATH",
    "DEFAULT_GAME_LANGUAGE",
    "DEFAULT_INVERT_Y",
    "LOG_LEVEL_ENV",
    "LOG_SESSIONS_KEPT",
]
