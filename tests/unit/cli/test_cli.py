"""Tests for CLI formatting and command execution."""

import json

import pytest
import yaml

from pattern_catalog.cli.formatters import format_output
from pattern_catalog.cli.main import main, parse_args
from pattern_catalog.domain.core.exceptions import UnsupportedFormatError

DEMOS = {"demos": [{"name": "memento", "title": "Memento", "category": "behavioral",
                    "summary": "Snapshots", "seeded": False, "options": ["text_history_limit"]}]}
RUNS = {"runs": [{"name": "flyweight", "title": "Flyweight", "category": "structural", "success": True,
                  "seed": 42, "sections": ["Forest"], "lines": ["[Demo] Total trees: 1000"],
                  "duration_ms": 3.2, "error": None}]}


class TestFormatters:
    """Test output formatting."""

    def test_json_output(self):
        """Test JSON output is parseable."""
        assert json.loads(format_output(DEMOS, "json")) == DEMOS

    def test_yaml_output(self):
        """Test YAML output is parseable."""
        assert yaml.safe_load(format_output(DEMOS, "yaml")) == DEMOS

    def test_table_output_lists_demos(self):
        """Test the Rich table contains each demo."""
        output = format_output(DEMOS, "table")

        assert "memento" in output
        assert "behavioral" in output

    def test_list_output_for_runs_includes_transcript(self):
        """Test the list format prints the transcript."""
        output = format_output(RUNS, "list")

        assert output.splitlines()[0] == "=== Flyweight === (seed 42)"
        assert "[Demo] Total trees: 1000" in output

    def test_table_output_for_runs(self):
        """Test run summaries render as a table."""
        output = format_output(RUNS, "table")

        assert "flyweight" in output
        assert "ok" in output

    def test_empty_listing(self):
        """Test empty collections are reported."""
        assert format_output({"demos": []}, "list") == "No demos found."

    def test_config_list_is_flattened(self):
        """Test nested configuration renders as dotted keys."""
        output = format_output({"config": {"CATALOG_CONFIG": {"random_seed": 42}}}, "list")

        assert output == "CATALOG_CONFIG.random_seed: 42"

    def test_unknown_format_raises(self):
        """Test unsupported formats are rejected."""
        with pytest.raises(UnsupportedFormatError):
            format_output(DEMOS, "xml")


class TestCommandLine:
    """Test the command line entry point."""

    def test_parse_global_options(self):
        """Test global options precede the command."""
        args = parse_args(["--format", "json", "run", "flyweight", "--seed", "3"])

        assert args.format == "json"
        assert args.command == "run"
        assert args.name == "flyweight"
        assert args.seed == 3

    def test_list_command(self, capsys):
        """Test listing demos as JSON."""
        exit_code = main(["--format", "json", "list", "--category", "architectural"])

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert [d["name"] for d in output["demos"]] == ["mvc", "mvvm", "coordinator-router"]

    def test_show_command(self, capsys):
        """Test describing one demo."""
        exit_code = main(["--format", "yaml", "show", "singleton"])

        output = yaml.safe_load(capsys.readouterr().out)
        assert exit_code == 0
        assert output["demo"]["options"] == ["cache_max_entries"]

    def test_run_command_prints_transcript(self, capsys):
        """Test running a demo prints its transcript."""
        exit_code = main(["run", "mvc"])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "[Model] User John Doe added" in output

    def test_unknown_demo_exits_with_error(self, capsys):
        """Test domain errors map to exit code 1."""
        exit_code = main(["run", "visitor"])

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().out

    def test_output_file(self, tmp_path, capsys):
        """Test --output writes to a file."""
        target = tmp_path / "demos.json"

        exit_code = main(["--format", "json", "--output", str(target), "list"])

        assert exit_code == 0
        assert len(json.loads(target.read_text())["demos"]) == 21

    def test_config_show(self, capsys):
        """Test showing the effective configuration."""
        exit_code = main(["--format", "json", "config", "show"])

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert "CATALOG_CONFIG" in output["config"]

    def test_missing_command(self, capsys):
        """Test running without a command fails."""
        assert main([]) == 1
