"""Tests for --help and --examples across the command tree."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from utilkit.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["check", "--examples"], ["utilkit check is-email", "utilkit check is-in-range 5 1 10"]),
    (["string", "--examples"], ["utilkit string truncate", "utilkit string slugify"]),
    (["array", "--examples"], ["utilkit array chunk", "--depth 1"]),
    (["object", "--examples"], ["utilkit object pick", "utilkit object merge"]),
    (["number", "--examples"], ["utilkit number clamp 15 0 10"]),
]


@pytest.mark.usefixtures("_isolated_cwd")
class TestExamples:
    @pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
    def test_examples(self, cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert result.output.startswith("Examples for 'cli ")
        for keyword in keywords:
            assert keyword in result.output

    def test_examples_are_dedented(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["number", "--examples"])
        lines = [line for line in result.output.splitlines()[1:] if line.strip()]
        assert all(line.startswith("  utilkit") for line in lines)

    def test_no_examples_flag_without_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["string", "slugify", "--help"])
        assert result.exit_code == 0
        assert "--examples" not in result.output


@pytest.mark.usefixtures("_isolated_cwd")
class TestHelp:
    def test_root_help_lists_groups_in_order(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        names = ("check", "string", "array", "object", "number")
        positions = [result.output.index(f"  {name}") for name in names]
        assert positions == sorted(positions)

    def test_array_help_registration_order(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["array", "--help"])
        assert result.output.index("chunk-count") < result.output.index("unique")
        assert result.output.index("unique") < result.output.index("difference")

    def test_check_help_mentions_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--help"])
        assert "--examples" in result.output
        assert "--list" in result.output
