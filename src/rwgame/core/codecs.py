"""Codecs translating between INI text and typed field values.

decode() returns None when the text cannot be read as the codec's type;
the caller decides whether that is an error.
"""
from __future__ import annotations

import re
from typing import Optional

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def strip_comments(text: str) -> str:
    """Drop a trailing ``;``/``#`` comment and trailing whitespace."""
    for i, ch in enumerate(text):
        if ch in ";#":
            text = text[:i]
            break
    return text.rstrip(" \n\r\t")


def parse_int_prefix(text: str) -> Optional[int]:
    """Read a leading integer token, ignoring anything after the digits.

    Mirrors C ``stoi``: ``" 12px"`` gives 12, ``"yes"`` gives None. Values
    outside the signed 32-bit range are rejected.
    """
    m = _INT_PREFIX.match(strip_comments(text))
    if not m:
        return None
    value = int(m.group(1))
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


class StringCodec:
    name = "string"

    def decode(self, text: str) -> Optional[str]:
        return strip_comments(text)

    def encode(self, value: str) -> str:
        return value


class BoolCodec:
    """Integer-backed boolean: any nonzero number is true, written as 1/0."""

    name = "bool"

    def decode(self, text: str) -> Optional[bool]:
        value = parse_int_prefix(text)
        if value is None:
            return None
        return value != 0

    def encode(self, value: bool) -> str:
        return "1" if value else "0"


class IntCodec:
    name = "int"

    def decode(self, text: str) -> Optional[int]:
        return parse_int_prefix(text)

    def encode(self, value: int) -> str:
        return str(int(value))


STRING = StringCodec()
BOOL = BoolCodec()
INT = IntCodec()
