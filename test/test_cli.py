"""Tests for the command-line entry points."""

import json
import logging

import pytest
from typer.testing import CliRunner

from main import cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("FIBONACCI_INDEX", raising=False)
    monkeypatch.delenv("TEMPERATURE", raising=False)
    yield
    logging.getLogger().handlers.clear()


def test_menu_exits_on_six():
    result = runner.invoke(cli, [], input="6\n")
    assert result.exit_code == 0
    assert "6 to exit" in result.output
    assert result.output.rstrip().endswith("bye!")


def test_menu_runs_fibonacci_then_exits():
    result = runner.invoke(cli, [], input="4\n6\n")
    assert result.exit_code == 0
    assert "fibonacci: 135301852344706746049" in result.output
    assert result.output.count("6 to exit") == 2


def test_menu_ignores_junk_and_unknown_selectors():
    result = runner.invoke(cli, [], input="hello\n42\n\n6\n")
    assert result.exit_code == 0
    assert result.output.count("6 to exit") == 4
    assert "bye!" in result.output


def test_menu_stops_at_end_of_input():
    result = runner.invoke(cli, [], input="1\n")
    assert result.exit_code == 0
    assert "End count = 2" in result.output
    assert result.output.rstrip().endswith("bye!")


def test_menu_uses_environment(monkeypatch):
    monkeypatch.setenv("FIBONACCI_INDEX", "5")
    monkeypatch.setenv("TEMPERATURE", "100")
    result = runner.invoke(cli, [], input="4\n3\n6\n")
    assert result.exit_code == 0
    assert "fibonacci: 8" in result.output
    assert "212.0" in result.output


def test_menu_rejects_bad_environment(monkeypatch):
    monkeypatch.setenv("FIBONACCI_INDEX", "-4")
    result = runner.invoke(cli, [], input="6\n")
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_fib_command():
    result = runner.invoke(cli, ["fib", "5"])
    assert result.exit_code == 0
    assert result.output.strip() == "fibonacci: 8"


def test_fib_command_negative():
    result = runner.invoke(cli, ["fib", "--", "-1"])
    assert result.exit_code == 1
    assert "non-negative" in result.output


def test_sequence_command():
    result = runner.invoke(cli, ["sequence", "6"])
    assert result.exit_code == 0
    assert result.output.split() == ["1", "1", "2", "3", "5", "8"]


def test_convert_command():
    result = runner.invoke(cli, ["convert", "212"])
    assert result.exit_code == 0
    assert float(result.output.strip()) == pytest.approx(100.0)

    result = runner.invoke(cli, ["convert", "100", "--to-fahrenheit"])
    assert float(result.output.strip()) == pytest.approx(212.0)


def test_lesson_and_carol_commands():
    assert runner.invoke(cli, ["lesson"]).output.splitlines()[-1] == "1!"
    carol = runner.invoke(cli, ["carol"]).output.splitlines()
    assert carol[0] == "On the first day of Christmas my true love sent to me"


def test_options_json():
    result = runner.invoke(cli, ["options", "--json"])
    assert result.exit_code == 0
    options = json.loads(result.output)
    assert [option["selector"] for option in options] == [1, 2, 3, 4, 5, 6]
