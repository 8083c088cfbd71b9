"""
ARITHMOS CLI - Entry point.

Commands:
- (no command): interactive REPL
- eval: evaluate a single expression
- env: list the predefined constants and functions
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from arithmos._version import __version__
from arithmos.core.calculator import Calculator
from arithmos.core.config import CalculatorSettings, load_settings
from arithmos.core.environment import BindingKind, Environment
from arithmos.core.errors import ConfigError
from arithmos.repl import Repl, evaluate_source

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

app = typer.Typer(
    help="ARITHMOS – interactive arithmetic expression evaluator",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"arithmos {__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Send log records to stderr so they never mix with REPL output."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("arithmos").setLevel(level)


def _load_settings(config: Path | None, debug: bool | None, log_level: str | None) -> CalculatorSettings:
    try:
        settings = load_settings(config)
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)

    overrides: dict[str, object] = {}
    if debug is not None:
        overrides["debug"] = debug
    if log_level is not None:
        overrides["log_level"] = log_level
    if overrides:
        try:
            settings = CalculatorSettings(**{**settings.model_dump(), **overrides})
        except ValueError as e:
            typer.echo(f"Configuration error: {e}", err=True)
            raise typer.Exit(code=1)

    configure_logging(settings.log_level)
    return settings


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    debug: Annotated[
        bool | None,
        typer.Option("--debug/--no-debug", help="Print tokens and AST before each result"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Settings file (default: ./arithmos.toml)"),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log level for stderr output (default: WARNING)"),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    """Start the interactive calculator when no command is given."""
    settings = _load_settings(config, debug, log_level)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        Repl(settings).run()


@app.command(name="eval")
def eval_command(
    ctx: typer.Context,
    expression: Annotated[str, typer.Argument(help="Expression to evaluate, e.g. 'hypot(3, 4)'")],
    debug: Annotated[
        bool, typer.Option("--debug", help="Print tokens and AST before the result")
    ] = False,
) -> None:
    """Evaluate a single expression and print the result."""
    settings: CalculatorSettings = ctx.obj or CalculatorSettings()
    ok, output = evaluate_source(Calculator(), expression, debug=debug or settings.debug)
    typer.echo(output)
    if not ok:
        raise typer.Exit(code=1)


@app.command(name="env")
def env_command() -> None:
    """List the predefined constants and functions."""
    environment = Environment()

    table = Table(title="Environment")
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Value / Arity", justify="right")

    for name, kind in environment.bindings():
        if kind == BindingKind.CONSTANT:
            detail = repr(environment.variables[name])
        elif kind == BindingKind.UNARY:
            detail = "1"
        else:
            detail = "2"
        table.add_row(name, str(kind), detail)

    console.print(table)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
