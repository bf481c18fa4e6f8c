"""core.config
Configuration core: load/save the game settings from an INI file.

Every setting is described once in CONFIG_FIELDS (dotted key, attribute,
default, codec, required flag). A single transfer() pass walks that table for
any pair of directions: DEFAULT/CONFIG/FILE/STRING as the source and
CONFIG/FILE/STRING as the destination. GameConfig wraps it with the small
API the game uses: is_valid(), load_from_file(), save_config() and
default_text().
"""
from __future__ import annotations

import io
import logging
from configparser import ConfigParser, Error as IniError
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..config import (
    DEFAULT_CONFIG_NAME,
    DEFAULT_GAME_LANGUAGE,
    DEFAULT_GAME_PATH,
    DEFAULT_INVERT_Y,
)
from . import codecs
from .errors import ConfigError, ConfigErrorKind
from .paths import default_config_dir

logger = logging.getLogger(__name__)


class ParseType(Enum):
    DEFAULT = "default"
    CONFIG = "config"
    FILE = "file"
    STRING = "string"


@dataclass
class GameSettings:
    game_path: str = ""
    game_language: str = DEFAULT_GAME_LANGUAGE
    input_invert_y: bool = DEFAULT_INVERT_Y


@dataclass(frozen=True)
class ConfigField:
    key: str
    attr: str
    default: Any
    codec: Any
    required: bool = False

    @property
    def section(self) -> str:
        return self.key.split(".", 1)[0]

    @property
    def option(self) -> str:
        return self.key.split(".", 1)[1]


# New settings go here (and into GameSettings and the tests).
CONFIG_FIELDS: Tuple[ConfigField, ...] = (
    ConfigField("game.path", "game_path", DEFAULT_GAME_PATH, codecs.STRING, required=True),
    ConfigField("game.language", "game_language", DEFAULT_GAME_LANGUAGE, codecs.STRING),
    ConfigField("input.invert_y", "input_invert_y", DEFAULT_INVERT_Y, codecs.BOOL),
)


@dataclass
class TransferResult:
    """Outcome of one transfer pass.

    - ok: True only if every field resolved and the output was written
    - output: INI text when the destination is STRING
    - values: resolved field values keyed by attribute name
    - errors: every problem found, in detection order
    """

    ok: bool
    output: str = ""
    values: Dict[str, Any] = field(default_factory=dict)
    errors: List[ConfigError] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.ok


def _new_tree() -> ConfigParser:
    # "[DEFAULT]" is an ordinary section here; its keys must not leak into others
    tree = ConfigParser(strict=True, interpolation=None, default_section="\0")
    tree.optionxform = str  # keys are case-sensitive
    return tree


def _trim_lines(text: str) -> str:
    """Strip leading whitespace so indented lines are never continuations."""
    return "\n".join(line.lstrip() for line in text.splitlines())


def _record(errors: List[ConfigError], kind: ConfigErrorKind, key: Optional[str], message: str) -> None:
    err = ConfigError(kind, key, message)
    errors.append(err)
    if kind in (ConfigErrorKind.MISSING_REQUIRED_FIELD, ConfigErrorKind.TYPE_MISMATCH):
        logger.warning("config: %s", err)
    else:
        logger.error("config: %s", err)


def _read_source(src_kind: ParseType, src_data: str, errors: List[ConfigError]) -> Optional[ConfigParser]:
    """Parse a FILE/STRING source into a tree. Returns None on failure."""
    tree = _new_tree()
    if src_kind not in (ParseType.FILE, ParseType.STRING):
        return tree
    try:
        if src_kind is ParseType.STRING:
            tree.read_string(_trim_lines(src_data), source="<string>")
        else:
            with open(src_data, "r", encoding="utf-8") as fh:
                text = fh.read()
            tree.read_string(_trim_lines(text), source=str(src_data))
    except IniError as e:
        # Duplicate sections/keys, lines outside a section, bad structure
        _record(errors, ConfigErrorKind.SYNTAX, None, str(e))
        return None
    except (OSError, UnicodeDecodeError) as e:
        _record(errors, ConfigErrorKind.READ_ERROR, None, f"cannot read {src_data}: {e}")
        return None
    return tree


def _resolve(
    fd: ConfigField,
    src_kind: ParseType,
    tree: ConfigParser,
    settings: Optional[GameSettings],
    errors: List[ConfigError],
) -> Tuple[bool, Any]:
    """Find the value of one field in the source. Returns (found, value)."""
    if src_kind is ParseType.DEFAULT:
        return True, fd.default
    if src_kind is ParseType.CONFIG:
        return True, getattr(settings, fd.attr)

    raw = tree.get(fd.section, fd.option, raw=True, fallback=None)
    if raw is None:
        if fd.required:
            _record(errors, ConfigErrorKind.MISSING_REQUIRED_FIELD, fd.key, "required key is missing")
            return False, None
        return True, fd.default

    value = fd.codec.decode(raw)
    if value is None:
        _record(
            errors, ConfigErrorKind.TYPE_MISMATCH, fd.key,
            f"invalid data {raw!r} for {fd.codec.name} value",
        )
        return False, None
    return True, value


def _put(tree: ConfigParser, fd: ConfigField, value: Any) -> None:
    if not tree.has_section(fd.section):
        tree.add_section(fd.section)
    tree.set(fd.section, fd.option, fd.codec.encode(value))


def _serialize(tree: ConfigParser) -> str:
    buf = io.StringIO()
    tree.write(buf, space_around_delimiters=False)
    return buf.getvalue()


def transfer(
    settings: Optional[GameSettings],
    src_kind: ParseType,
    src_data: str = "",
    dst_kind: ParseType = ParseType.CONFIG,
    dst_data: str = "",
) -> TransferResult:
    """Run every field in CONFIG_FIELDS from one direction to another.

    src_data is the INI text (STRING) or file path (FILE); dst_data is the
    file path for a FILE destination. A CONFIG destination does not touch
    ``settings``; the resolved values are returned in result.values and
    applying them is left to the caller. Nothing is written unless every
    field resolved.
    """
    if src_kind is ParseType.CONFIG and settings is None:
        raise ValueError("CONFIG source requires a settings record")

    errors: List[ConfigError] = []
    tree = _read_source(src_kind, src_data, errors)
    if tree is None:
        return TransferResult(ok=False, errors=errors)

    if dst_kind is ParseType.DEFAULT:
        _record(errors, ConfigErrorKind.INVALID_TARGET, None, "target cannot be DEFAULT")
        return TransferResult(ok=False, errors=errors)

    values: Dict[str, Any] = {}
    for fd in CONFIG_FIELDS:
        found, value = _resolve(fd, src_kind, tree, settings, errors)
        if not found:
            continue
        _put(tree, fd, value)
        values[fd.attr] = value

    if errors:
        return TransferResult(ok=False, values=values, errors=errors)

    output = ""
    try:
        if dst_kind is ParseType.STRING:
            output = _serialize(tree)
        elif dst_kind is ParseType.FILE:
            path = Path(dst_data)
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as fh:
                tree.write(fh, space_around_delimiters=False)
    except OSError as e:
        _record(errors, ConfigErrorKind.WRITE_ERROR, None, f"cannot write {dst_data}: {e}")
        return TransferResult(ok=False, values=values, errors=errors)

    return TransferResult(ok=True, output=output, values=values, errors=errors)


def default_ini_text() -> str:
    """Return INI text with every field at its default, without file I/O."""
    return transfer(None, ParseType.DEFAULT, "", ParseType.STRING).output


class GameConfig:
    """Game settings backed by an INI file.

    Behaviour:
    - Loads ``<config_path>/<config_name>`` on construction; is_valid()
      reports whether that load succeeded.
    - Falls back to a per-user directory (XDG_CONFIG_HOME or ~/.config on
      Unix, ~/Library/Preferences on macOS) when no directory is given.
    - A failed load leaves the current settings untouched.
    """

    def __init__(self, config_name: str = DEFAULT_CONFIG_NAME, config_path: str = "") -> None:
        self.config_name = config_name
        self.config_path = config_path or default_config_dir()
        self.settings = GameSettings()
        self.errors: List[ConfigError] = []

        self._valid = self.load_from_file(self.config_file())

    def config_file(self) -> str:
        return str(Path(self.config_path) / self.config_name)

    def is_valid(self) -> bool:
        return self._valid

    @property
    def game_path(self) -> str:
        return self.settings.game_path

    @property
    def game_language(self) -> str:
        return self.settings.game_language

    @property
    def input_invert_y(self) -> bool:
        return self.settings.input_invert_y

    def transfer(
        self,
        src_kind: ParseType,
        src_data: str = "",
        dst_kind: ParseType = ParseType.CONFIG,
        dst_data: str = "",
    ) -> TransferResult:
        """Run a transfer against this config's settings and apply the result."""
        result = transfer(self.settings, src_kind, src_data, dst_kind, dst_data)
        self.errors = list(result.errors)
        if result.ok and dst_kind is ParseType.CONFIG:
            for attr, value in result.values.items():
                setattr(self.settings, attr, value)
        return result

    def load_from_file(self, path: str) -> bool:
        ok = bool(self.transfer(ParseType.FILE, path, ParseType.CONFIG))
        if ok:
            logger.info("Loaded config from %s", path)
        else:
            logger.warning("Config %s is invalid (%d error(s))", path, len(self.errors))
        return ok

    def load_from_string(self, text: str) -> bool:
        return bool(self.transfer(ParseType.STRING, text, ParseType.CONFIG))

    def save_config(self) -> bool:
        """Persist current settings to config_file() (creates parent directories)."""
        path = self.config_file()
        ok = bool(self.transfer(ParseType.CONFIG, "", ParseType.FILE, path))
        if ok:
            logger.info("Saved config to %s", path)
        return ok

    def to_ini_text(self) -> str:
        result = self.transfer(ParseType.CONFIG, "", ParseType.STRING)
        return result.output

    def default_text(self) -> str:
        return default_ini_text()
