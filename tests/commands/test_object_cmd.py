"""Tests for the object command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from utilkit.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestObjectCommands:
    def test_pick(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "object", "pick", '{"a":1,"b":2,"c":3}', "a", "c"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"a": 1, "c": 3}

    def test_pick_missing_key_skipped(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "object", "pick", '{"a":1}', "z"])
        assert json.loads(result.stdout) == {}

    def test_omit(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "object", "omit", '{"a":1,"b":2}', "b"])
        assert json.loads(result.stdout) == {"a": 1}

    def test_merge(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "object", "merge", '{"a":1}', '{"a":2,"b":3}'])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["op"] == "merge"
        assert data["data"]["result"] == {"a": 2, "b": 3}

    def test_merge_rejects_array(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["object", "merge", '{"a":1}', "[1]"])
        assert result.exit_code == 1
        assert "merge(): expected an object, but received list" in result.stderr

    def test_verbose_shows_error_detail(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "object", "pick", "[1]", "a"])
        assert result.exit_code == 1
        assert "detail:" in result.stderr
        assert "expected: an object" in result.stderr
