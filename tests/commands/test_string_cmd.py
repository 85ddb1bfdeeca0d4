"""Tests for the string command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from utilkit.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestTruncate:
    def test_default_ellipsis(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "string", "truncate", "Hello, world", "8"])
        assert result.exit_code == 0
        assert result.stdout == "Hello, …\n"

    def test_ellipsis_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "string", "truncate", "Hello, world", "8", "--ellipsis", "..."]
        )
        assert result.stdout == "Hello...\n"

    def test_fits_unchanged(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "string", "truncate", "short", "10"])
        assert result.stdout == "short\n"

    def test_ellipsis_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "utilkit.toml").write_text('[strings]\nellipsis = "~"\n')
        result = cli_runner.invoke(cli, ["-q", "string", "truncate", "Hello, world", "6"])
        assert result.stdout == "Hello~\n"

    def test_explicit_config_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        custom = tmp_path / "alt.toml"
        custom.write_text('[strings]\nellipsis = "!"\n')
        result = cli_runner.invoke(
            cli, ["-q", "-c", str(custom), "string", "truncate", "Hello, world", "6"]
        )
        assert result.stdout == "Hello!\n"

    def test_negative_length_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "string", "truncate", "Hello", "--", "-1"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["op"] == "truncate"
        assert payload["error"]["detail"]["expected"] == "a non-negative integer"


@pytest.mark.usefixtures("_isolated_cwd")
class TestSlugify:
    def test_slugify(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["string", "slugify", "Hello World"])
        assert result.exit_code == 0
        assert "OK  slugify" in result.stdout
        assert "result: hello-world" in result.stdout

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "string", "slugify", "Hello, World!"])
        assert result.stdout == "hello-world-\n"
