"""Tests for the command line interface."""

import json

import pandas as pd
import pytest
from click.testing import CliRunner

from urisolve.cli import main

BASE = "http://a/b/c/d;p?q"


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def references_file(tmp_path):
    """Write a reference list with a blank line."""
    path = tmp_path / "links.txt"
    path.write_text("g\n\n../g\n#s\n", encoding="utf-8")
    return path


class TestResolveCommand:
    """Test `urisolve resolve`."""

    def test_prints_target(self, runner):
        result = runner.invoke(main, ["resolve", BASE, "../g"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "http://a/b/g"

    def test_empty_reference(self, runner):
        result = runner.invoke(main, ["resolve", BASE, ""])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == BASE

    def test_json(self, runner):
        result = runner.invoke(main, ["resolve", "--json", BASE, "?y"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["target"] == "http://a/b/c/d;p?y"
        assert payload["kind"] == "query"

    def test_verbose(self, runner):
        result = runner.invoke(main, ["--verbose", "resolve", BASE, "g"])
        assert result.exit_code == 0

    def test_quiet_after_verbose(self, runner):
        """A plain run after a verbose one prints no debug records."""
        runner.invoke(main, ["--verbose", "strip-param", "http://a/b?x=1&y=2", "x"])
        result = runner.invoke(main, ["strip-param", "http://a/b?x=1&y=2", "x"])
        assert result.exit_code == 0
        assert result.output == "http://a/b?y=2\n"


class TestIsAbsoluteCommand:
    """Test `urisolve is-absolute`."""

    def test_absolute(self, runner):
        result = runner.invoke(main, ["is-absolute", "urn:isbn:0451450523"])
        assert result.exit_code == 0
        assert result.output.strip() == "true"

    def test_relative(self, runner):
        result = runner.invoke(main, ["is-absolute", "./g:h"])
        assert result.exit_code == 1
        assert result.output.strip() == "false"


class TestOtherCommands:
    """Test the inspection commands."""

    def test_normalize(self, runner):
        result = runner.invoke(main, ["normalize", "/a/b/c/./../../g"])
        assert result.exit_code == 0
        assert result.output.strip() == "/a/g"

    def test_components(self, runner):
        result = runner.invoke(main, ["components", "http://a/b?x#y"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["authority"] == "a"
        assert payload["path"] == "/b"
        assert payload["query"] == "x"
        assert payload["fragment"] == "y"

    def test_strip_param(self, runner):
        result = runner.invoke(main, ["strip-param", "http://a/b?x=1&y=2", "x"])
        assert result.exit_code == 0
        assert result.output.strip() == "http://a/b?y=2"


class TestBatchCommand:
    """Test `urisolve batch`."""

    def test_csv_output(self, runner, references_file, tmp_path):
        output = tmp_path / "resolved.csv"
        result = runner.invoke(
            main,
            ["batch", "--base", BASE, "--input", str(references_file), "--output", str(output)],
        )
        assert result.exit_code == 0, result.output
        assert "Resolved 3 references" in result.output

        df = pd.read_csv(output)
        assert df["target"].tolist() == [
            "http://a/b/c/g",
            "http://a/b/g",
            "http://a/b/c/d;p?q#s",
        ]

    def test_console_output(self, runner, references_file):
        result = runner.invoke(main, ["batch", "--base", BASE, "--input", str(references_file)])
        assert result.exit_code == 0, result.output
        assert "http://a/b/g" in result.output

    def test_base_from_environment(self, runner, references_file):
        result = runner.invoke(
            main,
            ["batch", "--input", str(references_file)],
            env={"URISOLVE_BASE": "http://example.org/docs/"},
        )
        assert result.exit_code == 0, result.output
        assert "http://example.org/docs/g" in result.output

    def test_missing_input(self, runner, tmp_path):
        result = runner.invoke(
            main, ["batch", "--base", BASE, "--input", str(tmp_path / "missing.txt")]
        )
        assert result.exit_code != 0
