from rwgame.core.config import default_ini_text
from rwgame.core.errors import ConfigDirectoryError
from rwgame.main import main, seed_default_config


def test_valid_config_starts(write_ini, restore_root_logging):
    cfg_dir = write_ini("[game]\npath=/data/games/gta3\n")
    assert main("openrw.ini", str(cfg_dir)) == 0


def test_first_run_seeds_default_config(tmp_path, restore_root_logging):
    assert main("openrw.ini", str(tmp_path)) == 1
    assert (tmp_path / "openrw.ini").read_text(encoding="utf-8") == default_ini_text()


def test_existing_invalid_config_is_not_overwritten(write_ini, restore_root_logging):
    cfg_dir = write_ini("[game]\nlanguage=german\n")
    assert main("openrw.ini", str(cfg_dir)) == 1
    assert (cfg_dir / "openrw.ini").read_text(encoding="utf-8") == "[game]\nlanguage=german\n"


def test_unresolvable_directory_returns_failure(monkeypatch):
    def _raise():
        raise ConfigDirectoryError("no HOME")

    monkeypatch.setattr("rwgame.core.config.default_config_dir", _raise)
    assert main("openrw.ini", "") == 1


def test_seed_default_config_creates_directories(tmp_path):
    target = tmp_path / "a" / "b" / "openrw.ini"
    assert seed_default_config(str(target))
    assert target.read_text(encoding="utf-8").startswith("[game]\n")


def test_logging_setup_failure_returns_failure(write_ini, monkeypatch, restore_root_logging):
    cfg_dir = write_ini("[game]\npath=/data/games/gta3\n")

    def _raise(config):
        raise PermissionError("read-only directory")

    monkeypatch.setattr("rwgame.main.setup_logging", _raise)
    assert main("openrw.ini", str(cfg_dir)) == 1
