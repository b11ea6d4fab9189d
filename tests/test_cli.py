"""Tests for the root nsid CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from nsid import __version__
from nsid.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "nsid" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


def test_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "--version"])
    assert result.exit_code == 0


def test_quiet_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-q", "--version"])
    assert result.exit_code == 0


def test_verbose_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--version"])
    assert result.exit_code == 0


def test_log_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--log-json", "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/test.toml", "--version"])
    assert result.exit_code == 0


# --- Command registration ---


@pytest.mark.parametrize("name", ["new", "build", "inspect", "validate", "compare", "sort"])
def test_commands_registered(name: str) -> None:
    assert name in cli.commands


# --- Configuration errors ---


@pytest.mark.usefixtures("_isolated_cwd")
def test_invalid_toml_reported(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "nsid.toml").write_text("[generate\n")
    result = cli_runner.invoke(cli, ["new", "user"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_invalid_config_value_reported(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "nsid.toml").write_text("[generate]\nmax_count = 0\n")
    result = cli_runner.invoke(cli, ["new", "user"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
