from pathlib import Path

from herbmarket.data import paths


def test_get_config_path_base_path(tmp_path: Path) -> None:
    assert paths.get_config_path(tmp_path) == tmp_path / "herb-market.config.toml"


def test_get_config_path_accepts_str(tmp_path: Path) -> None:
    assert paths.get_config_path(str(tmp_path)) == tmp_path / paths.CONFIG_FILENAME


def test_get_config_path_defaults_to_working_directory(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    assert paths.get_config_path() == tmp_path / paths.CONFIG_FILENAME


def test_repo_root_ships_sample_config() -> None:
    assert paths.get_config_path(paths.get_repo_root()).exists()
