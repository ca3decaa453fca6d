"""Tests for config file discovery and loading."""

from pathlib import Path

import pytest

from tplresolve.config.discovery import CONFIG_ENV_VAR, find_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_walks_up(self, tmp_path: Path) -> None:
        cfg = tmp_path / "tplresolve.toml"
        cfg.write_text("")
        nested = tmp_path / "x" / "y"
        nested.mkdir(parents=True)
        assert find_config(nested) == cfg

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        other = tmp_path / "other.toml"
        other.write_text("")
        (tmp_path / "tplresolve.toml").write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "absent.toml"))
        assert find_config(tmp_path) is None

    def test_none_when_absent(self, tmp_path: Path) -> None:
        nested = tmp_path / "empty"
        nested.mkdir()
        found = find_config(nested)
        assert found is None or tmp_path not in found.parents
