"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from genetic_algorithms.cli import main as cli_main
from genetic_algorithms.cli.main import app
from genetic_algorithms.utils import get_console

runner = CliRunner()


class TestRunCommand:
    def test_text_run(self):
        result = runner.invoke(app, ["run", "-p", "20", "-g", "4", "--seed", "3", "--progress-interval", "2"])

        assert result.exit_code == 0, result.output
        assert "Reference solution:" in result.output
        assert "Generation: 2, Best solution:" in result.output
        assert "Generation: 4, Best solution:" in result.output
        assert "Generation: 3," not in result.output
        assert "Solution found by algorithm:" in result.output

    def test_output_file(self, tmp_path):
        output = tmp_path / "result.json"

        result = runner.invoke(
            app, ["run", "-p", "10", "-g", "3", "-m", "0.5", "--seed", "1", "--silent", "-o", str(output)]
        )

        assert result.exit_code == 0, result.output
        summary = json.loads(output.read_text())
        assert summary["generations"] == 3
        assert summary["population_size"] == 10
        assert summary["mutation_probability"] == 0.5
        assert summary["seed"] == 1
        assert len(summary["reference"]) == 4
        assert len(summary["best"]) == 4
        assert 0 <= summary["best_fitness"] <= 1020

    def test_same_seed_same_result(self, tmp_path):
        first, second = tmp_path / "a.json", tmp_path / "b.json"

        for path in (first, second):
            result = runner.invoke(app, ["run", "-p", "15", "-g", "5", "--seed", "9", "--silent", "-o", str(path)])
            assert result.exit_code == 0, result.output

        assert json.loads(first.read_text()) == json.loads(second.read_text())

    def test_config_file(self, tmp_path):
        config = tmp_path / "run.yaml"
        config.write_text(
            "engine:\n"
            "  population_size: 12\n"
            "  seed: 4\n"
            "color_matching:\n"
            "  generation_limit: 6\n"
            "  selection: tournament\n"
            "output:\n"
            "  save_history: true\n"
        )
        output = tmp_path / "result.json"

        result = runner.invoke(app, ["run", "--config", str(config), "-g", "2", "--silent", "-o", str(output)])

        assert result.exit_code == 0, result.output
        summary = json.loads(output.read_text())
        assert summary["population_size"] == 12
        assert summary["generations"] == 2
        assert [entry["generation"] for entry in summary["history"]] == [1, 2]

    @pytest.mark.parametrize("content", ["engine: [unclosed\n", "- 1\n- 2\n", "engine:\n  population_size: 1\n"])
    def test_invalid_config_file(self, tmp_path, content):
        config = tmp_path / "bad.yaml"
        config.write_text(content)

        result = runner.invoke(app, ["run", "--config", str(config)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Invalid config file" in result.output

    def test_invalid_population_size(self):
        result = runner.invoke(app, ["run", "-p", "1", "-g", "2"])

        assert result.exit_code == 1
        assert "Invalid argument" in result.output

    def test_invalid_mutation_probability(self):
        result = runner.invoke(app, ["run", "-p", "4", "-m", "1.5", "-g", "2"])

        assert result.exit_code == 1
        assert "Invalid argument" in result.output

    def test_invalid_selection(self):
        result = runner.invoke(app, ["run", "-p", "4", "-g", "2", "--selection", "random"])

        assert result.exit_code == 1

    def test_invalid_format(self):
        result = runner.invoke(app, ["run", "-p", "4", "-g", "2", "--format", "xml"])

        assert result.exit_code == 1


class TestVersionCommand:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "genetic-algorithms" in result.output


class TestConsole:
    def test_shares_logging_console(self):
        assert cli_main.console is get_console()
