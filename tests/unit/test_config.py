#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for configuration discovery and loading."""

import json

import pytest

from bvmarkup.config import find_config_in_parents, load_config_file, load_options
from bvmarkup.exceptions import FileError, ParsingError, ValidationError
from bvmarkup.options import AffordanceDefaults, ComponentOptions


@pytest.mark.unit
class TestLoadConfigFile:
    """Tests for load_config_file."""

    def test_toml(self, tmp_path):
        """Test loading a TOML file."""
        path = tmp_path / ".bvmarkup.toml"
        path.write_text('modal-tag = "x-modal"\n\n[popover]\ntrigger = "click"\n', encoding="utf-8")
        assert load_config_file(path) == {"modal-tag": "x-modal", "popover": {"trigger": "click"}}

    def test_yaml(self, tmp_path):
        """Test loading a YAML file."""
        path = tmp_path / ".bvmarkup.yaml"
        path.write_text("tooltip:\n  placement: bottom\n", encoding="utf-8")
        assert load_config_file(path) == {"tooltip": {"placement": "bottom"}}

    def test_empty_yaml(self, tmp_path):
        """Test that an empty YAML file is an empty config."""
        path = tmp_path / ".bvmarkup.yml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_json(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / ".bvmarkup.json"
        path.write_text(json.dumps({"render_markdown": False}), encoding="utf-8")
        assert load_config_file(path) == {"render_markdown": False}

    def test_pyproject_section(self, tmp_path):
        """Test reading the [tool.bvmarkup] table."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "site"\n\n[tool.bvmarkup]\ninline-tag = "i"\n', encoding="utf-8")
        assert load_config_file(path) == {"inline-tag": "i"}

    def test_pyproject_without_section(self, tmp_path):
        """Test that a pyproject without the table is empty."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "site"\n', encoding="utf-8")
        assert load_config_file(path) == {}

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileError."""
        with pytest.raises(FileError):
            load_config_file(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path):
        """Test that malformed TOML raises ParsingError."""
        path = tmp_path / ".bvmarkup.toml"
        path.write_text("modal-tag = ", encoding="utf-8")
        with pytest.raises(ParsingError) as exc_info:
            load_config_file(path)
        assert exc_info.value.parsing_stage == "toml"

    def test_yaml_must_be_mapping(self, tmp_path):
        """Test that a YAML list is rejected."""
        path = tmp_path / ".bvmarkup.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ParsingError):
            load_config_file(path)

    def test_unsupported_extension(self, tmp_path):
        """Test that unknown extensions are rejected."""
        path = tmp_path / "config.ini"
        path.write_text("[x]\n", encoding="utf-8")
        with pytest.raises(ParsingError, match="Unsupported config file format"):
            load_config_file(path)


@pytest.mark.unit
class TestFindConfigInParents:
    """Tests for find_config_in_parents."""

    def test_finds_in_parent(self, tmp_path):
        """Test walking up to a parent directory."""
        config = tmp_path / ".bvmarkup.toml"
        config.write_text("", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == config

    def test_dedicated_file_preferred_over_pyproject(self, tmp_path):
        """Test that dedicated files win in the same directory."""
        (tmp_path / "pyproject.toml").write_text('[tool.bvmarkup]\ninline-tag = "i"\n', encoding="utf-8")
        dedicated = tmp_path / ".bvmarkup.json"
        dedicated.write_text("{}", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == dedicated

    def test_pyproject_without_section_skipped(self, tmp_path):
        """Test that a pyproject without the table is not a config."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        found = find_config_in_parents(tmp_path)
        assert found is None or found.parent != tmp_path


@pytest.mark.unit
class TestLoadOptions:
    """Tests for load_options."""

    def test_from_explicit_file(self, tmp_path):
        """Test building options from an explicit file."""
        path = tmp_path / "site.yaml"
        path.write_text("popover:\n  trigger: click\nmodal_effect_class: mb-slide\n", encoding="utf-8")

        options = load_options(path)

        assert options.popover == AffordanceDefaults(trigger="click")
        assert options.modal_effect_class == "mb-slide"

    def test_discovered(self, tmp_path):
        """Test discovery from a start directory."""
        (tmp_path / ".bvmarkup.toml").write_text("render-markdown = false\n", encoding="utf-8")
        assert load_options(start_dir=tmp_path).render_markdown is False

    def test_invalid_values_mention_file(self, tmp_path):
        """Test that validation errors name the file."""
        path = tmp_path / ".bvmarkup.json"
        path.write_text(json.dumps({"modal_tag": ""}), encoding="utf-8")
        with pytest.raises(ValidationError, match=".bvmarkup.json"):
            load_options(path)

    def test_defaults_when_nothing_found(self, tmp_path, monkeypatch):
        """Test that defaults are returned when no config exists."""
        monkeypatch.setattr("bvmarkup.config.find_config_in_parents", lambda start_dir=None: None)
        assert load_options(start_dir=tmp_path) == ComponentOptions()
