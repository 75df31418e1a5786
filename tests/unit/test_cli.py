"""Unit tests for the bvmarkup command-line interface.

This module tests argument parsing, option building from config files and
flags, and the exit codes returned by ``main``.
"""

import io
import json

import pytest

from bvmarkup.cli import EXIT_FILE_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR, build_options, create_parser, main
from bvmarkup.options import AffordanceDefaults


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    """Keep the caller's environment out of option building."""
    monkeypatch.delenv("BVMARKUP_CONFIG", raising=False)
    monkeypatch.delenv("BVMARKUP_LOG_LEVEL", raising=False)


@pytest.mark.unit
@pytest.mark.cli
class TestBuildOptions:
    """Test option building from parsed arguments."""

    def test_no_config_defaults(self):
        """Test that --no-config gives default options."""
        options = build_options(create_parser().parse_args(["in.html", "--no-config"]))
        assert options.render_markdown is True
        assert options.popover == AffordanceDefaults()

    def test_flag_overrides(self):
        """Test affordance and Markdown flags."""
        args = create_parser().parse_args(
            ["in.html", "--no-config", "--no-markdown", "--popover-trigger", "click", "--tooltip-placement", "left"]
        )

        options = build_options(args)

        assert options.render_markdown is False
        assert options.popover == AffordanceDefaults(trigger="click", placement="top")
        assert options.tooltip == AffordanceDefaults(trigger="hover", placement="left")

    def test_flags_override_config(self, tmp_path):
        """Test that flags take precedence over the config file."""
        config = tmp_path / "site.toml"
        config.write_text('[popover]\ntrigger = "focus"\nplacement = "bottom"\n', encoding="utf-8")
        args = create_parser().parse_args(["in.html", "--config", str(config), "--popover-trigger", "click"])

        options = build_options(args)

        assert options.popover == AffordanceDefaults(trigger="click", placement="bottom")

    def test_config_from_environment(self, tmp_path, monkeypatch):
        """Test the BVMARKUP_CONFIG environment variable."""
        config = tmp_path / "site.json"
        config.write_text(json.dumps({"modal-tag": "x-modal"}), encoding="utf-8")
        monkeypatch.setenv("BVMARKUP_CONFIG", str(config))

        options = build_options(create_parser().parse_args(["in.html"]))

        assert options.modal_tag == "x-modal"

    def test_log_level_case_insensitive(self):
        """Test that log levels are upper-cased."""
        args = create_parser().parse_args(["in.html", "--log-level", "debug"])
        assert args.log_level == "DEBUG"


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Test the main entry point."""

    def test_file_to_stdout(self, tmp_path, capsys):
        """Test normalizing a file to stdout."""
        source = tmp_path / "page.html"
        source.write_text('<modal id="m">Body</modal>', encoding="utf-8")

        assert main([str(source), "--no-config"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert out == '<b-modal id="m" hide-footer="" size="" modal-class="mb-zoom" ref="m">Body</b-modal>'

    def test_stdin_to_file(self, tmp_path, monkeypatch):
        """Test reading stdin and writing --out."""
        monkeypatch.setattr("sys.stdin", io.StringIO('<trigger trigger="click">x</trigger>'))
        target = tmp_path / "out.html"

        assert main(["-", "--no-config", "--out", str(target)]) == EXIT_SUCCESS

        assert target.read_text(encoding="utf-8") == '<trigger trigger="click" class="trigger-click">x</trigger>'

    def test_popover_trigger_flag(self, tmp_path, capsys):
        """Test that the default popover trigger reaches the output."""
        source = tmp_path / "page.html"
        source.write_text("<popover>x</popover>", encoding="utf-8")

        assert main([str(source), "--no-config", "--popover-trigger", "click"]) == EXIT_SUCCESS

        assert "v-b-popover.click.top.html" in capsys.readouterr().out

    def test_missing_input(self, tmp_path, capsys):
        """Test that an unreadable input file returns the file error code."""
        assert main([str(tmp_path / "missing.html"), "--no-config"]) == EXIT_FILE_ERROR
        assert "Cannot read input file" in capsys.readouterr().err

    def test_missing_config(self, tmp_path):
        """Test that an explicit missing config returns the file error code."""
        source = tmp_path / "page.html"
        source.write_text("", encoding="utf-8")
        assert main([str(source), "--config", str(tmp_path / "nope.toml")]) == EXIT_FILE_ERROR

    def test_invalid_config(self, tmp_path, capsys):
        """Test that invalid option values return the validation error code."""
        source = tmp_path / "page.html"
        source.write_text("", encoding="utf-8")
        config = tmp_path / "bad.json"
        config.write_text(json.dumps({"no_such_option": 1}), encoding="utf-8")

        assert main([str(source), "--config", str(config)]) == EXIT_VALIDATION_ERROR
        assert "no_such_option" in capsys.readouterr().err

    def test_malformed_config(self, tmp_path):
        """Test that an unparsable config returns the validation error code."""
        source = tmp_path / "page.html"
        source.write_text("", encoding="utf-8")
        config = tmp_path / "bad.yaml"
        config.write_text("popover: [unclosed\n", encoding="utf-8")

        assert main([str(source), "--config", str(config)]) == EXIT_VALIDATION_ERROR

    def test_blank_flag_value_rejected(self, tmp_path):
        """Test that a blank trigger flag fails validation."""
        source = tmp_path / "page.html"
        source.write_text("", encoding="utf-8")
        assert main([str(source), "--no-config", "--tooltip-trigger", " "]) == EXIT_VALIDATION_ERROR

    def test_summary_and_deprecations(self, tmp_path, capsys):
        """Test the summary tables and deprecation log output."""
        source = tmp_path / "page.html"
        source.write_text('<popover title="Old">x</popover><modal></modal>', encoding="utf-8")

        assert main([str(source), "--no-config", "--summary"]) == EXIT_SUCCESS

        err = capsys.readouterr().err
        assert "Normalized Components" in err
        assert "Deprecated Syntax" in err
        assert "'title' is deprecated" in err

    def test_log_file(self, tmp_path):
        """Test that --log-file receives deprecation warnings."""
        source = tmp_path / "page.html"
        source.write_text('<modal title="T"></modal>', encoding="utf-8")
        log_file = tmp_path / "bvmarkup.log"

        assert main([str(source), "--no-config", "--out", str(tmp_path / "o.html"), "--log-file", str(log_file)]) == 0

        assert "deprecated" in log_file.read_text(encoding="utf-8")
