"""
Tests for the resolve commands.
"""

from pathlib import Path
from typing import Generator
from unittest.mock import Mock, patch
import pytest
from click.testing import CliRunner
from ssmresolve.exceptions import StoreError
from ssmresolve.models.dataModel import ParameterInfo, ParameterType
from ssmresolve.ssmresolve import cli

HOST = ParameterInfo(name="db/host", value="10.0.0.1", type=ParameterType.STRING)
PASS = ParameterInfo(name="db/pass", value="p@ss", type=ParameterType.SECURE_STRING)
DOCUMENT = "Host: {{ db/host }}, Secret: {{ ssm-secure:db/pass }}"


@pytest.fixture
def runner() -> CliRunner:
    """Provides a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def lookup() -> Generator[Mock, None, None]:
    """Replaces the SSM service with a fixed store."""
    store = {"db/host": HOST, "ssm-secure:db/pass": PASS}
    service = Mock()
    service.fetch.side_effect = lambda refs: {ref: store[ref] for ref in refs}
    with patch("ssmresolve.commands.resolve.SsmParameterService", return_value=service) as factory:
        factory.service = service
        yield factory


def test_text_from_option(runner: CliRunner, lookup: Mock) -> None:
    result = runner.invoke(cli, ["text", "--input", "h={{ db/host }}"])
    assert result.exit_code == 0
    assert "h=10.0.0.1" in result.output


def test_text_from_stdin_secure(runner: CliRunner, lookup: Mock) -> None:
    result = runner.invoke(cli, ["--secure", "text"], input=DOCUMENT)
    assert result.exit_code == 0
    assert "Host: 10.0.0.1, Secret: p@ss" in result.output


def test_text_secure_refused(runner: CliRunner, lookup: Mock) -> None:
    result = runner.invoke(cli, ["--no-secure", "text"], input=DOCUMENT)
    assert result.exit_code == 3
    assert "resolving secure parameters is not allowed" in result.output
    lookup.service.fetch.assert_not_called()


def test_store_error_exit_code(runner: CliRunner, lookup: Mock) -> None:
    lookup.service.fetch.side_effect = StoreError("Invalid parameters: ['db/host']")
    result = runner.invoke(cli, ["text", "-i", "{{ db/host }}"])
    assert result.exit_code == 4
    assert "Invalid parameters" in result.output


def test_region_passed_to_service(runner: CliRunner, lookup: Mock) -> None:
    runner.invoke(cli, ["--region", "eu-west-1", "text", "-i", "{{ db/host }}"])
    assert lookup.call_args.kwargs["region"] == "eu-west-1"


def test_file_command(runner: CliRunner, lookup: Mock, tmp_path: Path) -> None:
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text(DOCUMENT, encoding="utf-8")
    result = runner.invoke(cli, ["--secure", "file", str(source), str(target)])
    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8") == "Host: 10.0.0.1, Secret: p@ss"


def test_file_command_missing_input(runner: CliRunner, lookup: Mock, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["file", str(tmp_path / "nope.txt"), str(tmp_path / "out.txt")])
    assert result.exit_code == 2
    assert "File not found" in result.output


def test_extract_masks_secure_values(runner: CliRunner, lookup: Mock) -> None:
    result = runner.invoke(cli, ["--secure", "extract"], input=DOCUMENT)
    assert result.exit_code == 0
    assert "10.0.0.1" in result.output
    assert "p@ss" not in result.output
    assert "****" in result.output


def test_extract_show_values(runner: CliRunner, lookup: Mock) -> None:
    result = runner.invoke(cli, ["--secure", "extract", "--show-values"], input=DOCUMENT)
    assert result.exit_code == 0
    assert "p@ss" in result.output


def test_extract_nothing_found(runner: CliRunner, lookup: Mock) -> None:
    result = runner.invoke(cli, ["extract"], input="static text")
    assert result.exit_code == 0
    assert "No parameter placeholders found" in result.output


def test_refs_command(runner: CliRunner, lookup: Mock) -> None:
    result = runner.invoke(cli, ["refs", "db/host", "db/host"])
    assert result.exit_code == 0
    assert "10.0.0.1" in result.output
    lookup.service.fetch.assert_called_once_with({"db/host"})


def test_refs_requires_argument(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["refs"])
    assert result.exit_code != 0
    assert "Missing argument" in result.output
