"""Startup entry point.

Loads the game configuration, initializes logging next to it and seeds a
default config file on first run.
"""

import logging
import os
import sys
from pathlib import Path

# Allow running this file directly: put the src directory on the path
src_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from rwgame.config import DEFAULT_CONFIG_NAME
from rwgame.core.config import GameConfig, default_ini_text
from rwgame.core.errors import ConfigDirectoryError
from rwgame.core.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def seed_default_config(path: str) -> bool:
    """Write the default INI text to path (creates parent directories)."""
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(default_ini_text(), encoding="utf-8")
    except OSError as e:
        logger.error("Could not write default config %s: %s", path, e)
        return False
    logger.info("Wrote default config to %s", path)
    return True


def main(config_name: str = DEFAULT_CONFIG_NAME, config_path: str = "") -> int:
    """Load the config and report whether the game can start.

    Returns 0 when the configuration is valid, 1 otherwise. The caller decides
    whether a non-zero result halts startup.
    """
    try:
        config = GameConfig(config_name, config_path)
    except ConfigDirectoryError as e:
        logger.error("Cannot locate the configuration directory: %s", e)
        return 1

    try:
        setup_logging(config)
    except OSError as e:
        logger.error("Cannot set up logging beside %s: %s", config.config_file(), e)
        return 1

    if config.is_valid():
        logger.info(
            "Configuration OK: game.path=%s game.language=%s input.invert_y=%s",
            config.game_path, config.game_language, config.input_invert_y,
        )
        return 0

    for err in config.errors:
        logger.error("Invalid configuration: %s", err)

    config_file = config.config_file()
    if not Path(config_file).exists() and seed_default_config(config_file):
        logger.error("A default configuration was created at %s; set game.path and restart.", config_file)
    else:
        logger.error("Fix the configuration file at %s and restart.", config_file)
    return 1


if __name__ == "__main__":
    sys.exit(main())
