"""Typer-based command line interface for rr-commons."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from classfinder import ClassFinder  # type: ignore  # noqa: E402
from resref import Builder, InvalidFormatError, ResourceReference, is_valid  # type: ignore  # noqa: E402
from utils.config import AppConfig, load_config  # type: ignore  # noqa: E402
from utils.logging import configure_logging, get_logger  # type: ignore  # noqa: E402

app = typer.Typer(add_completion=False)
console = Console()
LOGGER = get_logger(__name__)


def _config(ctx: typer.Context) -> AppConfig:
    return ctx.obj if isinstance(ctx.obj, AppConfig) else AppConfig()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML configuration file."),
) -> None:
    if config_path is not None and not config_path.exists():
        raise typer.BadParameter(f"Config {config_path} not found", param_hint="--config")
    config = load_config(config_path) if config_path is not None else AppConfig()
    configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = config


@app.command()
def validate(refs: List[str] = typer.Argument(..., help="Resource references to check.")) -> None:
    failures = 0
    for ref in refs:
        ok = is_valid(ref)
        if not ok:
            failures += 1
        typer.echo(f"{'valid' if ok else 'invalid'}\t{ref}")
    if failures:
        raise typer.Exit(code=1)


@app.command()
def parse(
    ref: str = typer.Argument(..., help="Resource reference to parse."),
    as_json: bool = typer.Option(False, "--json", help="Print the parsed reference as JSON."),
) -> None:
    try:
        parsed = ResourceReference.of(ref)
    except InvalidFormatError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    if as_json:
        typer.echo(parsed.jsonl())
        return
    typer.echo(f"environment: {parsed.environment}")
    typer.echo(f"application: {parsed.application}")
    typer.echo(f"customer:    {parsed.customer}")
    typer.echo(f"properties:  {', '.join(parsed.properties)}")
    typer.echo(f"value:       {parsed.value}")


@app.command()
def build(
    application: str = typer.Option(..., "--app", help="Application name (lowercased)."),
    environment: str = typer.Option(..., "--env", help="Environment name (uppercased)."),
    customer: str = typer.Option(..., "--customer", help="Customer identifier."),
    properties: List[str] = typer.Option([], "--property", "-p", help="Trailing property, repeatable."),
) -> None:
    reference = Builder(application, environment, customer).with_properties(*properties).build()
    if not reference.is_canonical():
        LOGGER.warning("Built reference %s does not satisfy the rr:// grammar", reference)
    typer.echo(reference.value)


@app.command()
def classes(
    ctx: typer.Context,
    package: str = typer.Argument(..., help="Dotted package name to scan."),
    exclude: List[str] = typer.Option([], "--exclude", help="Module name segment to skip, repeatable."),
    skip_errors: Optional[bool] = typer.Option(
        None, "--skip-errors/--fail-on-errors", help="Skip modules that fail to import."
    ),
) -> None:
    config = _config(ctx)
    finder = ClassFinder(
        package,
        exclude=[*config.classfinder_exclude, *exclude],
        skip_errors=config.classfinder_skip_errors if skip_errors is None else skip_errors,
    )
    try:
        found = finder.get_classes()
    except ModuleNotFoundError as exc:
        typer.echo(f"Package {package} not found: {exc}", err=True)
        raise typer.Exit(code=2)
    table = Table(title=f"Classes under {package}")
    table.add_column("module")
    table.add_column("class")
    for cls in found:
        table.add_row(cls.__module__, cls.__qualname__)
    console.print(table)
    typer.echo(f"Found {len(found)} classes")


if __name__ == "__main__":
    app()
