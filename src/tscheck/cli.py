from __future__ import annotations
import json
import logging
import sys
from typing import Optional

import structlog
import typer
from rich import print as rprint
from rich.markup import escape

from .errors import SchemaFileError, ValidationError
from .params import param
from .report import VERSION, Diagnostic, describe
from .schema_loader import load_data, load_schema

app = typer.Typer(add_completion=False)
logger = structlog.get_logger()


def configure_logging(verbose: bool = False) -> None:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@app.callback()
def main(verbose: bool = typer.Option(False, "-v", "--verbose", help="Log debug events to stderr.")):
    configure_logging(verbose)


@app.command()
def check(
    schema_path: str,
    data_path: str,
    type_name: str = typer.Option(..., "-t", "--type", help="Type from the schema's [types] table."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
):
    """Validate a .json or .toml document against a type from a schema file."""
    try:
        checker = load_schema(schema_path).checker(type_name)
        data = load_data(data_path)
    except SchemaFileError as err:
        rprint(f"[red]{escape(err.message)}[/red]")
        raise typer.Exit(2)
    try:
        param(checker, data)
    except ValidationError as err:
        logger.debug("validation_failed", type=type_name, code=err.code.value, path=err.path)
        if as_json:
            print(json.dumps(Diagnostic.from_error(err, type=type_name).to_json_obj(), indent=2))
        else:
            rprint(f"[red]FAIL[/red] {escape(err.message)} [dim](at {escape(err.path or '@')})[/dim]")
        raise typer.Exit(1)
    if as_json:
        print(json.dumps({"$version": VERSION, "ok": True, "type": type_name}, indent=2))
    else:
        rprint("[green]OK[/green]")


@app.command()
def explain(
    schema_path: str,
    type_name: Optional[str] = typer.Option(None, "-t", "--type", help="Only show this type."),
):
    """Print the types declared in a schema file."""
    try:
        schema = load_schema(schema_path)
        names = [type_name] if type_name else schema.declared
        lines = [(name, describe(schema.checker(name))) for name in names]
    except SchemaFileError as err:
        rprint(f"[red]{escape(err.message)}[/red]")
        raise typer.Exit(2)
    for name, text in lines:
        rprint(f"[bold]{escape(name)}[/bold] = {escape(text)}")
