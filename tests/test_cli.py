"""
Tests for the tagcloud command line interface.
"""

import json

import pytest
from click.testing import CliRunner

from tagcloud.cli import cli


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


class TestGenerateCommand:
    """Test `tagcloud generate`."""

    def test_generate_with_options(self, runner, sample_file, tmp_path):
        """Test a non-interactive run."""
        output = tmp_path / "cloud.html"
        result = runner.invoke(cli, [
            "generate", "-i", str(sample_file), "-o", str(output), "-n", "4",
        ])
        assert result.exit_code == 0, result.output
        assert "Wrote 4 of" in result.output
        assert output.read_text(encoding="utf-8").count("<span ") == 4

    def test_generate_prompts_for_missing_values(self, runner, sample_file, tmp_path):
        """Test that input, output and count are prompted for."""
        output = tmp_path / "cloud.html"
        result = runner.invoke(cli, ["generate"], input=f"{sample_file}\n{output}\n3\n")
        assert result.exit_code == 0, result.output
        assert "name of an input file" in result.output
        assert "name of an output file" in result.output
        assert output.exists()

    def test_generate_reprompts_for_missing_input(self, runner, sample_file, tmp_path):
        """Test that an unreadable input file is prompted for again."""
        output = tmp_path / "cloud.html"
        missing = tmp_path / "missing.txt"
        result = runner.invoke(
            cli, ["generate"], input=f"{missing}\n{sample_file}\n{output}\n3\n"
        )
        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_generate_negative_count(self, runner, sample_file, tmp_path):
        """Test that a negative count exits with an error."""
        output = tmp_path / "cloud.html"
        result = runner.invoke(cli, [
            "generate", "-i", str(sample_file), "-o", str(output), "-n", "-2",
        ])
        assert result.exit_code == 1
        assert "non-negative integer" in result.output
        assert not output.exists()

    def test_generate_inline_css_and_log_scale(self, runner, sample_file, tmp_path):
        """Test passing config options through the CLI."""
        output = tmp_path / "cloud.html"
        result = runner.invoke(cli, [
            "generate", "-i", str(sample_file), "-o", str(output), "-n", "5",
            "--inline-css", "--scale", "log",
        ])
        assert result.exit_code == 0, result.output
        html = output.read_text(encoding="utf-8")
        assert ".f11 { font-size: 11px; }" in html
        assert 'class="f48"' in html

    def test_generate_bad_environment(self, runner, sample_file, tmp_path, monkeypatch):
        """Test that invalid TAGCLOUD_* settings exit with an error."""
        monkeypatch.setenv("TAGCLOUD_MIN_TIER", "oops")
        result = runner.invoke(cli, [
            "generate", "-i", str(sample_file), "-o", str(tmp_path / "c.html"), "-n", "5",
        ])
        assert result.exit_code == 1
        assert "TAGCLOUD_MIN_TIER" in result.output


class TestTopCommand:
    """Test `tagcloud top`."""

    def test_top_table(self, runner, sample_file):
        """Test the default table output."""
        result = runner.invoke(cli, ["top", str(sample_file), "-n", "3"])
        assert result.exit_code == 0, result.output
        assert "Word" in result.output
        assert "the" in result.output

    def test_top_simple(self, runner, sample_file):
        """Test the one-line-per-word output."""
        result = runner.invoke(cli, ["top", str(sample_file), "-n", "1", "--format", "simple"])
        assert result.exit_code == 0, result.output
        assert "the: 4" in result.output

    def test_top_json(self, runner, sample_file, monkeypatch):
        """Test the JSON output."""
        monkeypatch.setenv("TAGCLOUD_LOG_LEVEL", "WARNING")
        result = runner.invoke(cli, ["top", str(sample_file), "-n", "2", "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["requested_count"] == 2
        assert len(data["entries"]) == 2

    def test_top_missing_file(self, runner, tmp_path):
        """Test that a missing input exits with an error."""
        result = runner.invoke(cli, ["top", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert "Unable to open input file" in result.output

    def test_top_empty_file(self, runner, tmp_path):
        """Test the table output for an empty file."""
        source = tmp_path / "empty.txt"
        source.write_text("", encoding="utf-8")
        result = runner.invoke(cli, ["top", str(source)])
        assert result.exit_code == 0, result.output
        assert "No words found." in result.output
