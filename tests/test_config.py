"""Tests for the config module."""

import json

from favicon_factory.config import (
    DEFAULT_CONFIG,
    DEFAULT_SIZE_LIST,
    FaviconConfig,
    is_production,
    load_config_file,
)


class TestFromMapping:
    """Tests for FaviconConfig.from_mapping."""

    def test_defaults_without_overrides(self):
        config = FaviconConfig.from_mapping()
        assert config.output_folder == "favicon"
        assert config.prefix_name == "favicon"
        assert config.manifest_generate is True
        assert config.run_only_dev_mode is True
        assert config.tab_indent == 2
        assert config.size_list == tuple(DEFAULT_SIZE_LIST)

    def test_overrides_are_merged_onto_defaults(self):
        config = FaviconConfig.from_mapping({"output_folder": "icons", "size_list": [16, 512]})
        assert config.output_folder == "icons"
        assert config.size_list == (16, 512)
        assert config.manifest_name == "manifest"

    def test_unknown_keys_are_ignored(self, capsys):
        config = FaviconConfig.from_mapping({"colour": "red"})
        assert not hasattr(config, "colour")
        assert "colour" in capsys.readouterr().err

    def test_manifest_data_is_replaced_shallowly(self):
        config = FaviconConfig.from_mapping({"manifest_data": {"name": "Site"}})
        assert dict(config.manifest_data) == {"name": "Site"}
        assert config.manifest_field("name") == "Site"
        assert config.manifest_field("display") == "standalone"

    def test_invalid_size_list_becomes_empty(self):
        assert FaviconConfig.from_mapping({"size_list": None}).size_list == ()
        assert FaviconConfig.from_mapping({"size_list": "16,32"}).size_list == ()

    def test_defaults_are_not_mutated(self):
        FaviconConfig.from_mapping({"manifest_data": {"name": "Other"}})
        assert DEFAULT_CONFIG["manifest_data"]["name"] == "MyApp"


class TestLoadConfigFile:
    """Tests for load_config_file."""

    def test_missing_file(self, tmp_path):
        assert load_config_file(tmp_path / "favicon.json") == {}

    def test_reads_json_object(self, tmp_path):
        path = tmp_path / "favicon.json"
        path.write_text(json.dumps({"prefix_name": "icon"}), encoding="utf-8")
        assert load_config_file(path) == {"prefix_name": "icon"}

    def test_non_object_is_ignored(self, tmp_path):
        path = tmp_path / "favicon.json"
        path.write_text("[16, 32]", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_invalid_json_is_logged(self, tmp_path, capsys):
        path = tmp_path / "favicon.json"
        path.write_text("{nope", encoding="utf-8")
        assert load_config_file(path) == {}
        assert "error reading config" in capsys.readouterr().err


class TestIsProduction:
    """Tests for is_production."""

    def test_reads_site_env(self):
        assert is_production({"SITE_ENV": "production"}) is True
        assert is_production({"SITE_ENV": " Production "}) is True

    def test_other_values(self):
        assert is_production({"SITE_ENV": "development"}) is False
        assert is_production({}) is False
