"""Tests for Config."""

from __future__ import annotations

from pathlib import Path

import pytest

from inikit.config import Config
from inikit.errors import ConfigError, ConfigNotFoundError


class TestConfigGet:
    def test_dot_path(self) -> None:
        config = Config({"loader": {"encoding": "cp1251"}})
        assert config.get("loader.encoding") == "cp1251"

    def test_default_for_missing(self) -> None:
        config = Config({"loader": {}})
        assert config.get("loader.encoding", "utf-8") == "utf-8"
        assert config.get("nothing.at.all") is None

    def test_non_dict_intermediate(self) -> None:
        config = Config({"loader": "flat"})
        assert config.get("loader.encoding", "x") == "x"


class TestConfigFromYaml:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("loader:\n  encoding: latin-1\n  create_default: true\n")
        config = Config.from_yaml(path)
        assert config.get("loader.encoding") == "latin-1"
        assert config.get("loader.create_default") is True

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert Config.from_yaml(path).get("loader") is None

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFoundError):
            Config.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("{{invalid: yaml: ---")
        with pytest.raises(ConfigError):
            Config.from_yaml(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            Config.from_yaml(path)
