"""Tests for the array command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from utilkit.cli import cli


def _json_result(cli_runner: CliRunner, *args: str) -> object:
    result = cli_runner.invoke(cli, ["--json", "array", *args])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["ok"] is True
    return data["data"]["result"]


@pytest.mark.usefixtures("_isolated_cwd")
class TestChunking:
    def test_chunk(self, cli_runner: CliRunner) -> None:
        assert _json_result(cli_runner, "chunk", "[1,2,3,4,5]", "2") == [[1, 2], [3, 4], [5]]

    def test_chunk_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["array", "chunk", "[1,2,3,4,5]", "2"])
        assert result.exit_code == 0
        assert "OK  chunk" in result.stdout
        assert "index" in result.stdout
        assert "[3,4]" in result.stdout

    def test_chunk_count(self, cli_runner: CliRunner) -> None:
        assert _json_result(cli_runner, "chunk-count", "[1,2,3,4,5]", "2") == 3

    def test_chunk_at(self, cli_runner: CliRunner) -> None:
        assert _json_result(cli_runner, "chunk-at", "[1,2,3,4,5]", "2", "1") == [3, 4]

    def test_chunk_at_out_of_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["array", "chunk-at", "[1,2,3]", "2", "9"])
        assert result.exit_code == 1
        assert "an index in [0, 2)" in result.stderr

    def test_chunk_rejects_non_array(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "array", "chunk", "abc", "2"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["message"] == "chunk(): expected an array, but received str"


@pytest.mark.usefixtures("_isolated_cwd")
class TestReshaping:
    def test_unique(self, cli_runner: CliRunner) -> None:
        assert _json_result(cli_runner, "unique", "[1,2,2,3,4,4,5]") == [1, 2, 3, 4, 5]

    def test_flatten_all(self, cli_runner: CliRunner) -> None:
        assert _json_result(cli_runner, "flatten", "[1,[2,[3,[4]]]]") == [1, 2, 3, 4]

    def test_flatten_depth(self, cli_runner: CliRunner) -> None:
        assert _json_result(cli_runner, "flatten", "[1,[2,[3,[4]]]]", "--depth", "1") == [
            1,
            2,
            [3, [4]],
        ]


@pytest.mark.usefixtures("_isolated_cwd")
class TestSetOperations:
    def test_difference(self, cli_runner: CliRunner) -> None:
        assert _json_result(cli_runner, "difference", "[1,2,3,2]", "[3]") == [1, 2, 2]

    def test_intersection(self, cli_runner: CliRunner) -> None:
        assert _json_result(cli_runner, "intersection", "[1,2,3]", "[2,3,4]", "[3,2]") == [2, 3]

    def test_union(self, cli_runner: CliRunner) -> None:
        assert _json_result(cli_runner, "union", "[1,2]", "[2,3]", "[4]") == [1, 2, 3, 4]

    def test_booleans_kept_apart_from_numbers(self, cli_runner: CliRunner) -> None:
        assert _json_result(cli_runner, "unique", "[1, true, 0, false]") == [1, True, 0, False]

    def test_no_arrays(self, cli_runner: CliRunner) -> None:
        assert _json_result(cli_runner, "union") == []
