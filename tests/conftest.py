"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from jsonc_cli.cli import cli


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional stdin.

    Usage:
        result = invoke(["read", "[0]"], input_data='["hello"]')
        result = invoke(["modify", "-p", "[0]", "-v", "1"], input_data="[0]")

    Compare exact output against ``result.stdout``; error messages are
    checked against ``result.output``, which includes stderr.
    """

    def _invoke(args, input_data=""):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def test_data():
    """Provide path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def fixture_text(test_data):
    """Read a JSONC fixture by name, keeping its line endings."""

    def _read(name):
        return (test_data / f"{name}.jsonc").read_bytes().decode("utf-8")

    return _read
