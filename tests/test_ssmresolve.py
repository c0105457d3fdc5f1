"""Tests for the ssmresolve entry point."""

from click.testing import CliRunner
import pytest
from ssmresolve.config.settings import appsettings
from ssmresolve.ssmresolve import cli, __version__


@pytest.fixture
def runner():
    return CliRunner()


def test_version_output(runner):
    result = runner.invoke(cli, ["-V"])
    assert result.exit_code == 0
    assert "ssmresolve" in result.output.lower()
    assert __version__ in result.output


def test_group_help_lists_commands(runner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ["file", "text", "extract", "refs"]:
        assert command in result.output


def test_command_help(runner):
    result = runner.invoke(cli, ["text", "--help"])
    assert result.exit_code == 0
    assert "Resolve parameter placeholders" in result.output


def test_quiet_flag(runner, monkeypatch):
    monkeypatch.setattr(appsettings, "beQuiet", False)
    result = runner.invoke(cli, ["--quiet", "text", "-i", "static"])
    assert result.exit_code == 0
    assert result.output == "static"
    assert appsettings.beQuiet is True


def test_invalid_args(runner):
    result = runner.invoke(cli, ["--invalid"])
    assert result.exit_code != 0
    assert "Error" in result.output
