"""Pytest configuration.

Ensures src/ is on sys.path so tests can import `rwgame.*` without an install,
and restores root logger handlers after tests that call setup_logging().
"""

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


@pytest.fixture
def write_ini(tmp_path):
    """Write INI text to tmp_path/openrw.ini and return the directory."""
    def _write(text: str, name: str = "openrw.ini") -> Path:
        (tmp_path / name).write_text(text, encoding="utf-8")
        return tmp_path
    return _write
