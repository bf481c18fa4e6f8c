"""Error taxonomy for configuration loading and saving.

Transfers never raise for bad config content. Each problem is recorded as a
ConfigError so callers can tell a syntax error from a missing key or a value
of the wrong type without parsing log text.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ConfigErrorKind(Enum):
    SYNTAX = "syntax"
    READ_ERROR = "read_error"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_TARGET = "invalid_target"
    WRITE_ERROR = "write_error"


@dataclass(frozen=True)
class ConfigError:
    kind: ConfigErrorKind
    key: Optional[str]
    message: str

    def __str__(self) -> str:
        if self.key:
            return f"{self.kind.value} [{self.key}]: {self.message}"
        return f"{self.kind.value}: {self.message}"


class ConfigDirectoryError(RuntimeError):
    """Raised when no default config directory can be resolved."""
