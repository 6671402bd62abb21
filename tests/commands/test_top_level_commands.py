"""Tests for the top-level command group."""

from click.testing import CliRunner

from gitlift.cli.cli import cli
from tests.fakes.context import create_test_context


def test_short_help_flag() -> None:
    result = CliRunner().invoke(cli, ["-h"], obj=create_test_context())

    assert result.exit_code == 0
    assert "generate" in result.output
    assert "init" in result.output


def test_generate_group_lists_subcommands() -> None:
    result = CliRunner().invoke(cli, ["generate", "--help"], obj=create_test_context())

    assert result.exit_code == 0
    assert "pr" in result.output
    assert "commit" in result.output


def test_version_option() -> None:
    """--version reports the installed package version."""
    result = CliRunner().invoke(cli, ["--version"], obj=create_test_context())

    assert result.exit_code == 0
    assert "version" in result.output
