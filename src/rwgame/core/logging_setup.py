"""Logging setup utilities for rwgame.

Provides a single setup function to configure application-wide logging with:
- Session-based file handler next to the config file
- Console handler for quick inspection during development
- Level from the RWGAME_LOG_LEVEL environment variable unless given explicitly
- Automatic retention of the last 3 sessions

Usage:
    from rwgame.core.logging_setup import setup_logging
    setup_logging(game_config)

This will create logs/session-YYYYmmdd_HHMMSS/rwgame.log next to openrw.ini
(e.g. ~/.config/OpenRW/logs).
"""
from __future__ import annotations

import logging
import os
import platform
import shutil
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from ..config import LOG_LEVEL_ENV, LOG_SESSIONS_KEPT

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_from_str(value: Optional[str]) -> int:
    if not value:
        return logging.INFO
    v = str(value).strip().upper()
    mapping = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }
    return mapping.get(v, logging.INFO)


def get_log_dir(game_config) -> Path:
    """Return the logs/ directory beside the config file, creating it."""
    log_dir = Path(game_config.config_path) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_session_dir(log_dir: Path) -> Path:
    """Create and return a new session directory under log_dir."""
    session = log_dir / datetime.now().strftime("session-%Y%m%d_%H%M%S")
    session.mkdir(parents=True, exist_ok=True)
    return session


def prune_old_sessions(log_dir: Path, keep: int = LOG_SESSIONS_KEPT) -> None:
    """Keep only the most recent 'keep' session directories inside log_dir."""
    entries = [p for p in log_dir.iterdir() if p.is_dir() and p.name.startswith("session-")]
    # Names embed the timestamp, so they sort chronologically
    entries.sort(key=lambda p: p.name, reverse=True)
    for old in entries[keep:]:
        shutil.rmtree(old, ignore_errors=True)


def _write_session_info(session_dir: Path, game_config) -> None:
    """Write session_info.txt with system details and the loaded settings."""
    info_file = session_dir / "session_info.txt"
    try:
        with open(info_file, "w", encoding="utf-8") as f:
            f.write("RWGAME SESSION INFORMATION\n")
            f.write("=" * 50 + "\n\n")
            f.write(f"Session Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
            f.write(f"Session Directory: {session_dir.name}\n\n")

            f.write("SYSTEM INFORMATION:\n")
            f.write("-" * 20 + "\n")
            f.write(f"Operating System: {platform.system()} {platform.release()}\n")
            f.write(f"Platform: {platform.platform()}\n")
            f.write(f"Python Version: {sys.version}\n\n")

            f.write("CONFIGURATION:\n")
            f.write("-" * 14 + "\n")
            f.write(f"Config File: {game_config.config_file()}\n")
            f.write(f"Valid: {game_config.is_valid()}\n")
            for attr in ("game_path", "game_language", "input_invert_y"):
                f.write(f"{attr}: {getattr(game_config.settings, attr)}\n")
            for err in game_config.errors:
                f.write(f"error: {err}\n")
    except OSError as e:
        logging.getLogger(__name__).warning("Could not write %s: %s", info_file, e)


def setup_logging(game_config, level: Optional[Union[str, int]] = None) -> Path:
    """Configure root logger with a session-based file and console handler.

    Returns the created session directory Path.

    - File: logs/session-YYYYmmdd_HHMMSS/rwgame.log (keep last 3 sessions)
    - Console: INFO+ by default
    - Level: from parameter if provided, else RWGAME_LOG_LEVEL, else INFO
    """
    if isinstance(level, str):
        lvl = _level_from_str(level)
    elif isinstance(level, int):
        lvl = level
    else:
        lvl = _level_from_str(os.environ.get(LOG_LEVEL_ENV))

    logger = logging.getLogger()
    logger.setLevel(lvl)

    # Clear existing handlers to avoid duplicates on re-run
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    log_dir = get_log_dir(game_config)
    session_dir = get_session_dir(log_dir)

    file_path = session_dir / "rwgame.log"
    fh = logging.FileHandler(file_path, encoding="utf-8", delay=True)
    fh.setLevel(lvl)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    prune_old_sessions(log_dir)
    _write_session_info(session_dir, game_config)

    # Console handler (INFO+ to keep noise lower by default)
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO if lvl < logging.INFO else lvl)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    logger.info("Logging initialized: level=%s, file=%s", logging.getLevelName(lvl), str(file_path))
    return session_dir
