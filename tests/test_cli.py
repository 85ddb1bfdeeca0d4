"""Tests for the root CLI group and global flags."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from utilkit import __version__
from utilkit.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestRootGroup:
    def test_no_args_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage:" in result.output
        assert "check" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"utilkit, version {__version__}" in result.output

    def test_unknown_command(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["frobnicate"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_cwd")
class TestOutputModes:
    def test_default_rich(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["array", "unique", "[1,1,2]"])
        assert result.stdout.splitlines() == ["OK  unique", "  result: [1,2]"]

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "array", "unique", "[1,1,2]"])
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"] == {"result": [1, 2]}
        assert "duration_ms" in data["meta"]

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--quiet", "array", "unique", "[1,1,2]"])
        assert result.stdout == "[1,2]\n"

    def test_verbose_shows_timing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--verbose", "array", "unique", "[1,1,2]"])
        assert result.exit_code == 0
        assert "duration_ms" in result.stdout

    def test_verbose_logs_to_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "--log-json", "array", "unique", "[1]"])
        assert result.exit_code == 0
        events = [json.loads(line) for line in result.stderr.splitlines() if line.strip()]
        assert any(e["event"] == "operation complete" and e["op"] == "unique" for e in events)
        assert result.stdout.splitlines()[0] == "OK  unique"

    def test_env_var_quiet(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UTILKIT_QUIET", "1")
        result = cli_runner.invoke(cli, ["string", "slugify", "A B"])
        assert result.stdout == "a-b\n"
