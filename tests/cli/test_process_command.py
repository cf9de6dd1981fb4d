"""
Tests for cli.process

Covers stdin and file input, explain output, prompt mode and
configuration overrides.
"""

import json

import pytest
from click.testing import CliRunner

from cli import main
from cli.help_texts import ExitCodes


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def response_file(tmp_path, sample_response):
    path = tmp_path / "volcano.txt"
    path.write_text(sample_response, encoding="utf-8")
    return path


class TestProcessCLI:
    def test_stdin(self, runner, sample_response):
        result = runner.invoke(main, ["process", "--log-level", "error"], input=sample_response)

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["source"] == "<stdin>"
        assert data["category_code"] == 11
        assert data["keywords"][:3] == ["volcano", "eruption", "smoke"]

    def test_file_with_explain(self, runner, response_file):
        result = runner.invoke(main, ["process", str(response_file), "--explain", "--log-level", "error"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["source"] == "volcano.txt"
        trace = data["classification"]
        assert trace["code"] == 11
        assert trace["ai_code"] == 11
        assert trace["bias"] is None
        assert trace["scores"]["11"] > 0

    def test_multiple_files_and_output(self, runner, response_file, tmp_path, sample_response):
        second = tmp_path / "second.txt"
        second.write_text(sample_response.replace("Landscapes", "Nature"), encoding="utf-8")
        output = tmp_path / "out" / "metadata.json"

        result = runner.invoke(main, [
            "process", str(response_file), str(second), "-o", str(output), "--log-level", "error",
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert [entry["source"] for entry in data] == ["volcano.txt", "second.txt"]

    def test_prompt_mode(self, runner):
        result = runner.invoke(
            main, ["process", "--mode", "prompt", "--log-level", "error"], input="Prompt: A lighthouse at dusk\n"
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == {"prompt": "A lighthouse at dusk", "source": "<stdin>"}

    def test_keyword_max_override(self, runner, response_file):
        result = runner.invoke(main, [
            "process", str(response_file), "--keyword-max", "5", "--keyword-min", "0", "--log-level", "error",
        ])

        assert result.exit_code == 0, result.output
        assert len(json.loads(result.stdout)["keywords"]) == 5

    def test_config_file(self, runner, response_file, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("processing:\n  extra_stopwords: [lava]\n")

        result = runner.invoke(main, [
            "process", str(response_file), "--config", str(config), "--log-level", "error",
        ])

        assert result.exit_code == 0, result.output
        assert "lava" not in json.loads(result.stdout)["keywords"]

    def test_invalid_config_file(self, runner, response_file, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("log_level: loud\n")

        result = runner.invoke(main, ["process", str(response_file), "--config", str(config)])

        assert result.exit_code == ExitCodes.INVALID_CONFIGURATION
        assert "Configuration Error" in result.output
