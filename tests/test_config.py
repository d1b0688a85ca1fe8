"""Tests for configuration loading.

**Feature: winloss**
"""

from pathlib import Path

import toml

from winloss.config import (
    DEFAULT_CONFIG,
    create_template_config,
    get_storage_path,
    load_config,
)


class TestLoadConfig:
    """Config file fallbacks and merging."""

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "missing.toml")

        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_defaults_not_mutated(self, tmp_path: Path):
        config = load_config(tmp_path / "missing.toml")
        config["log"]["default_filter"] = "week"

        assert DEFAULT_CONFIG["log"]["default_filter"] == "all"

    def test_file_overrides_section_keys(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text('[log]\ndefault_filter = "week"\n')

        config = load_config(path)

        assert config["log"]["default_filter"] == "week"
        assert config["storage"] == DEFAULT_CONFIG["storage"]
        assert config["logging"]["level"] == "WARNING"

    def test_unreadable_toml_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text("[log\ndefault_filter = ")

        assert load_config(path) == DEFAULT_CONFIG

    def test_non_table_section_ignored(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text('storage = "x"\n')

        config = load_config(path)

        assert config["storage"] == DEFAULT_CONFIG["storage"]
        assert get_storage_path(config) == Path(DEFAULT_CONFIG["storage"]["path"]).expanduser()

    def test_template_round_trip(self, tmp_path: Path):
        path = create_template_config(tmp_path / "nested" / "config.toml")

        assert path.exists()
        assert toml.load(path) == DEFAULT_CONFIG
        assert load_config(path) == DEFAULT_CONFIG


class TestStoragePath:
    """Storage path resolution."""

    def test_expands_home(self):
        config = {"storage": {"path": "~/winloss/defaults.db"}}

        path = get_storage_path(config)

        assert path == Path.home() / "winloss" / "defaults.db"

    def test_absolute_path_unchanged(self, tmp_path: Path):
        config = {"storage": {"path": str(tmp_path / "d.db")}}

        assert get_storage_path(config) == tmp_path / "d.db"
