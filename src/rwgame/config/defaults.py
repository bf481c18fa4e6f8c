"""Configuration constants.

This module contains the static values shared by the config loader, the
default directory resolution and the logging setup.
"""

# Directory created under the per-user config base (XDG, Library/Preferences)
CONFIG_DIRECTORY_NAME = "OpenRW"
DEFAULT_CONFIG_NAME = "openrw.ini"

# Field defaults
DEFAULT_GAME_PATH = "/opt/games/Grand Theft Auto 3"  # seed text only, never applied on load
DEFAULT_GAME_LANGUAGE = "american"
DEFAULT_INVERT_Y = False

# Logging
LOG_LEVEL_ENV = "RWGAME_LOG_LEVEL"
LOG_SESSIONS_KEPT = 3
