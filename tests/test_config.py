"""Tests for configuration loading."""

import json

import pytest

from graphdot.config import GraphdotConfig, LogLevel, RenderOptions, find_config_file, load_config


class TestConfig:
    """Configuration models and file discovery."""

    def test_defaults(self):
        config = GraphdotConfig()
        assert config.render == RenderOptions()
        assert config.render.fontname is None
        assert config.logging.level == LogLevel.WARN.value

    def test_load_with_aliases(self, tmp_path):
        path = tmp_path / ".graphdot.json"
        path.write_text(json.dumps({
            "render": {"noEdgeLabels": True, "darkTheme": True, "fontname": "Inter"},
            "logging": {"level": "debug"},
        }), encoding="utf-8")

        config = load_config(path)

        assert config.render.no_edge_labels is True
        assert config.render.dark_theme is True
        assert config.render.fontname == "Inter"
        assert config.logging.level == "debug"

    def test_field_names_are_accepted(self):
        options = RenderOptions(no_node_labels=True)
        assert options.no_node_labels is True

    def test_invalid_json(self, tmp_path):
        path = tmp_path / ".graphdot.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_unknown_section(self, tmp_path):
        path = tmp_path / ".graphdot.json"
        path.write_text(json.dumps({"layout": {}}), encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to load config"):
            load_config(path)

    def test_unknown_render_key(self, tmp_path):
        path = tmp_path / ".graphdot.json"
        path.write_text(json.dumps({"render": {"noNodeLabel": True}}), encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to load config"):
            load_config(path)

    def test_unknown_logging_key(self):
        with pytest.raises(ValueError):
            GraphdotConfig.model_validate({"logging": {"lvl": "debug"}})

    def test_non_object_config(self, tmp_path):
        path = tmp_path / ".graphdot.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to load config"):
            load_config(path)

    def test_blank_fontname(self):
        with pytest.raises(ValueError):
            RenderOptions(fontname="  ")

    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        assert load_config(tmp_path / "missing.json") == GraphdotConfig()

    def test_find_config_file_searches_parents(self, tmp_path):
        path = tmp_path / ".graphdot.json"
        path.write_text("{}", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == path.resolve()

    def test_load_config_from_cwd(self, tmp_path, monkeypatch):
        (tmp_path / ".graphdot.json").write_text(json.dumps({"render": {"noArrows": True}}), encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert load_config().render.no_arrows is True
