"""Tests for config discovery and loading."""

from pathlib import Path

import click
import pytest

from fragstrings.config.discovery import CONFIG_FILENAME, find_config, load_config
from fragstrings.config.models import FragConfig


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[descriptors]\nuser = "%s%d"\n')
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv("FRAGSTRINGS_CONFIG", str(config_file))
        assert find_config(tmp_path / "elsewhere") == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv("FRAGSTRINGS_CONFIG", str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None

    def test_explicit_path_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        explicit = tmp_path / "explicit.toml"
        explicit.write_text("")
        monkeypatch.setenv("FRAGSTRINGS_CONFIG", str(tmp_path / CONFIG_FILENAME))
        assert find_config(tmp_path, explicit=explicit) == explicit

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config(tmp_path, explicit=str(tmp_path / "missing.toml")) is None


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path: Path) -> None:
        config = load_config(cwd=tmp_path)
        assert config == FragConfig()
        assert config.descriptors == {}

    def test_loads_sections(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[descriptors]\nuser = "%s%d?"\n[output]\njson = true\n')
        config = load_config(path)
        assert config.descriptors == {"user": "%s%d?"}
        assert config.output.json_output is True
        assert config.output.quiet is False

    def test_rejects_bad_alias_name(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[descriptors]\n"bad name" = "%s"\n')
        with pytest.raises(click.ClickException, match="Invalid descriptor alias name"):
            load_config(path)

    def test_log_level_is_read(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('log_level = "debug"\n')
        assert load_config(path).log_level == "debug"

    def test_invalid_toml_names_file(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[descriptors\n")
        with pytest.raises(click.ClickException, match="Invalid TOML in") as exc_info:
            load_config(path)
        assert str(path) in exc_info.value.message
