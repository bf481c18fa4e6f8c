import logging

import pytest

from rwgame.core.config import GameConfig
from rwgame.core.logging_setup import _level_from_str, prune_old_sessions, setup_logging


@pytest.fixture
def valid_config(write_ini):
    cfg_dir = write_ini("[game]\npath=/data/games/gta3\n")
    return GameConfig("openrw.ini", str(cfg_dir))


@pytest.mark.parametrize("value,expected", [
    ("debug", logging.DEBUG),
    ("WARN", logging.WARNING),
    (" error ", logging.ERROR),
    ("bogus", logging.INFO),
    (None, logging.INFO),
])
def test_level_from_str(value, expected):
    assert _level_from_str(value) == expected


def test_setup_creates_session_next_to_config(valid_config, tmp_path, restore_root_logging):
    session = setup_logging(valid_config, level="DEBUG")
    assert session.parent == tmp_path / "logs"
    assert session.name.startswith("session-")
    assert logging.getLogger().level == logging.DEBUG

    logging.getLogger("rwgame.test").info("hello from test")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "hello from test" in (session / "rwgame.log").read_text(encoding="utf-8")


def test_session_info_lists_settings(valid_config, restore_root_logging):
    session = setup_logging(valid_config)
    info = (session / "session_info.txt").read_text(encoding="utf-8")
    assert "game_path: /data/games/gta3" in info
    assert "Valid: True" in info


def test_level_from_environment(valid_config, monkeypatch, restore_root_logging):
    monkeypatch.setenv("RWGAME_LOG_LEVEL", "WARNING")
    setup_logging(valid_config)
    assert logging.getLogger().level == logging.WARNING


def test_explicit_int_level_wins(valid_config, monkeypatch, restore_root_logging):
    monkeypatch.setenv("RWGAME_LOG_LEVEL", "WARNING")
    setup_logging(valid_config, level=logging.ERROR)
    assert logging.getLogger().level == logging.ERROR


def test_prune_keeps_most_recent(tmp_path):
    for stamp in ["20260101_000000", "20260102_000000", "20260103_000000", "20260104_000000"]:
        (tmp_path / f"session-{stamp}").mkdir()
    (tmp_path / "unrelated").mkdir()
    prune_old_sessions(tmp_path, keep=3)
    remaining = sorted(p.name for p in tmp_path.iterdir())
    assert remaining == [
        "session-20260102_000000",
        "session-20260103_000000",
        "session-20260104_000000",
        "unrelated",
    ]
