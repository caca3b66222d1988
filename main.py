from __future__ import annotations

import json
import logging
import os
import sys
from logging import Formatter, StreamHandler
from pathlib import Path
from typing import Dict

import typer
from dotenv import load_dotenv
from pydantic import ValidationError

from exercises import (
    ExerciseSettings,
    InvalidArgumentError,
    carol_lines,
    convert_temperature,
    fibonacci,
    fibonacci_sequence,
    lesson_lines,
)
from menu import EXIT_SELECTOR, MENU_OPTIONS, MenuExecutor, format_menu_prompt, parse_selection

SETTINGS_ENV: Dict[str, str] = {
    "fibonacci_index": "FIBONACCI_INDEX",
    "temperature": "TEMPERATURE",
}


cli = typer.Typer(add_completion=False, help="Interactive exercise menu.")
logger = logging.getLogger("branches")


class JsonFormatter(Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
        }
        if isinstance(record.msg, dict):
            log_record.update(record.msg)
        else:
            log_record["message"] = record.getMessage()
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info).replace("\n", "\\n")
        return json.dumps(log_record, default=str)


def setup_logging(debug: bool = False) -> None:
    """Send JSONL logs to stderr, quiet unless debugging."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    if root.hasHandlers():
        root.handlers.clear()

    handler = StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter(datefmt="%Y-%m-%dT%H:%M:%S%z"))
    root.addHandler(handler)


def load_env() -> None:
    env_path = Path("env") / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)


def exercise_settings() -> ExerciseSettings:
    """Build the exercise inputs from the environment."""
    values = {}
    for field_name, env_name in SETTINGS_ENV.items():
        raw = os.getenv(env_name, "").strip()
        if raw:
            values[field_name] = raw
    return ExerciseSettings.model_validate(values)


def _settings_or_exit() -> ExerciseSettings:
    try:
        settings = exercise_settings()
    except ValidationError as error:
        typer.echo(f"ERROR: Invalid configuration: {error}", err=True)
        raise typer.Exit(1)
    logger.debug({"event": "settings_loaded", "settings": settings.model_dump()})
    return settings


def run_menu(settings: ExerciseSettings) -> None:
    """Prompt for a selector until the exit option or end of input."""
    executor = MenuExecutor(settings)
    prompt = format_menu_prompt()

    while True:
        typer.echo(prompt)
        line = sys.stdin.readline()
        if not line:
            logger.debug({"event": "menu_end_of_input"})
            break

        selector = parse_selection(line)
        if selector is None:
            continue
        if selector == EXIT_SELECTOR:
            break

        result = executor.execute(selector)
        if not result["success"]:
            if "error_type" in result:
                typer.echo(f"ERROR: {result['error']}", err=True)
            continue
        for output_line in result["result"]["output"]:
            typer.echo(output_line)

    typer.echo("bye!")


load_env()


@cli.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable DEBUG level logging."),
) -> None:
    """Run the interactive menu when no command is given."""
    setup_logging(debug=debug)
    if ctx.invoked_subcommand is None:
        run_menu(_settings_or_exit())


@cli.command("fib")
def fib_command(
    n: int = typer.Argument(..., help="Sequence index (>= 0)."),
) -> None:
    """Print the sequence value at index N."""
    try:
        value = fibonacci(n)
    except InvalidArgumentError as error:
        typer.echo(f"ERROR: {error}", err=True)
        raise typer.Exit(1)
    typer.echo(f"fibonacci: {value}")


@cli.command("sequence")
def sequence_command(
    count: int = typer.Argument(..., help="Number of values to print (>= 0)."),
) -> None:
    """Print the first COUNT sequence values, one per line."""
    try:
        values = fibonacci_sequence(count)
    except InvalidArgumentError as error:
        typer.echo(f"ERROR: {error}", err=True)
        raise typer.Exit(1)
    for value in values:
        typer.echo(str(value))


@cli.command("convert")
def convert_command(
    value: float = typer.Argument(..., help="Temperature to convert."),
    to_fahrenheit: bool = typer.Option(
        False, "--to-fahrenheit", help="Read VALUE as Celsius instead of Fahrenheit."
    ),
) -> None:
    """Convert a temperature between Fahrenheit and Celsius."""
    typer.echo(str(convert_temperature(value, to_fahrenheit=to_fahrenheit)))


@cli.command("lesson")
def lesson_command() -> None:
    """Print the control-flow lesson."""
    for line in lesson_lines():
        typer.echo(line)


@cli.command("carol")
def carol_command() -> None:
    """Print The Twelve Days of Christmas."""
    for line in carol_lines():
        typer.echo(line)


@cli.command("options")
def options_command(
    as_json: bool = typer.Option(False, "--json", help="Dump the option table as JSON."),
) -> None:
    """List the menu options."""
    if as_json:
        typer.echo(json.dumps(MENU_OPTIONS, indent=2))
        return
    for option in MENU_OPTIONS:
        typer.echo(f"{option['selector']}  {option['name']:<22} {option['description']}")


if __name__ == "__main__":
    cli()
