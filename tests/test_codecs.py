import pytest

from rwgame.core.codecs import BOOL, INT, STRING, parse_int_prefix, strip_comments


@pytest.mark.parametrize("text,expected", [
    ("american ; default", "american"),
    ("american# note", "american"),
    ("american", "american"),
    ("  spaced value \t", "  spaced value"),
    ("; only a comment", ""),
    ("", ""),
])
def test_strip_comments(text, expected):
    assert strip_comments(text) == expected


def test_string_codec_strips_comment_and_passes_through_on_write():
    assert STRING.decode("/opt/games/gta3 ; install dir") == "/opt/games/gta3"
    assert STRING.encode("/opt/games/gta3") == "/opt/games/gta3"


@pytest.mark.parametrize("text,expected", [
    ("1", True),
    ("2", True),
    ("-1", True),
    ("0", False),
    ("0 ; off", False),
    (" 1", True),
])
def test_bool_codec_decode(text, expected):
    assert BOOL.decode(text) is expected


@pytest.mark.parametrize("text", ["yes", "true", "", "  ", "; 1"])
def test_bool_codec_rejects_non_numeric(text):
    assert BOOL.decode(text) is None


def test_bool_codec_encode():
    assert BOOL.encode(True) == "1"
    assert BOOL.encode(False) == "0"


def test_int_codec():
    assert INT.decode("42") == 42
    assert INT.decode("-7 # negative") == -7
    assert INT.decode("+3") == 3
    assert INT.decode("abc") is None
    assert INT.encode(42) == "42"


def test_int_prefix_ignores_trailing_text():
    assert parse_int_prefix("1abc") == 1
    assert parse_int_prefix("12px") == 12


def test_int_prefix_rejects_out_of_range():
    assert parse_int_prefix(str(2 ** 31 - 1)) == 2 ** 31 - 1
    assert parse_int_prefix(str(-(2 ** 31))) == -(2 ** 31)
    assert parse_int_prefix(str(2 ** 31)) is None
