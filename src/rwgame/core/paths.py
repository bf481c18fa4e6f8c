"""Default config directory resolution.

The platform and the environment lookup are both parameters so the rules can
be exercised without touching the real process environment.
"""
from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, Optional

from ..config import CONFIG_DIRECTORY_NAME
from .errors import ConfigDirectoryError

logger = logging.getLogger(__name__)

EnvLookup = Callable[[str], Optional[str]]


class PlatformKind(Enum):
    UNIX = "unix"
    MACOS = "macos"
    OTHER = "other"


def current_platform(platform_name: Optional[str] = None) -> PlatformKind:
    """Map ``sys.platform`` (or the given name) onto a PlatformKind."""
    name = (platform_name or sys.platform).lower()
    if name == "darwin":
        return PlatformKind.MACOS
    if name.startswith(("linux", "freebsd", "netbsd", "openbsd")):
        return PlatformKind.UNIX
    return PlatformKind.OTHER


def default_config_dir(
    platform: Optional[PlatformKind] = None,
    getenv: EnvLookup = os.environ.get,
) -> str:
    """Return the per-user directory holding the config file.

    - UNIX: $XDG_CONFIG_HOME/OpenRW, else $HOME/.config/OpenRW
    - MACOS: $HOME/Library/Preferences/OpenRW
    - OTHER: the current directory

    Raises ConfigDirectoryError on UNIX/MACOS when none of the variables are
    set.
    """
    kind = platform or current_platform()

    if kind is PlatformKind.OTHER:
        return "."

    if kind is PlatformKind.UNIX:
        config_home = getenv("XDG_CONFIG_HOME")
        if config_home:
            return f"{config_home}/{CONFIG_DIRECTORY_NAME}"
        home = getenv("HOME")
        if home:
            return f"{home}/.config/{CONFIG_DIRECTORY_NAME}"
    else:
        home = getenv("HOME")
        if home:
            return f"{home}/Library/Preferences/{CONFIG_DIRECTORY_NAME}"

    logger.error("No default config path found (platform=%s)", kind.value)
    raise ConfigDirectoryError(f"No default config path found for platform {kind.value}")
