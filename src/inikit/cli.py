"""Command-line entry point: ``inikit show|get|init``."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional

import typer

from inikit.config import Config
from inikit.document import Document
from inikit.errors import IniError
from inikit.loader import IniLoader

__all__ = ["app", "main"]

logger = logging.getLogger(__name__)

# IniError raised, or the operation was refused
EXIT_FAILURE = 1
EXIT_UNEXPECTED_ERROR = 2

app = typer.Typer(help="Read and query INI-style configuration files.", no_args_is_help=True)


class ValueType(str, Enum):
    INT = "int"
    FLOAT = "float"
    STR = "str"
    BOOL = "bool"


_VALUE_TYPES: dict[ValueType, type] = {
    ValueType.INT: int,
    ValueType.FLOAT: float,
    ValueType.STR: str,
    ValueType.BOOL: bool,
}


def _run(action: Callable[[], Any]) -> Any:
    """Run ``action``, mapping failures to exit codes."""
    try:
        return action()
    except typer.Exit:
        raise
    except IniError as e:
        typer.echo(f"INI parser error: {e.message}", err=True)
        raise typer.Exit(code=EXIT_FAILURE) from e
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        typer.echo(f"Unexpected error: {e}", err=True)
        raise typer.Exit(code=EXIT_UNEXPECTED_ERROR) from e


def _make_loader(ctx: typer.Context, create_default: bool) -> IniLoader:
    config: Config = ctx.obj or Config()
    # only override the settings file when the flag was given
    return IniLoader(config, create_default=True if create_default else None)


@app.callback()
def main(
    ctx: typer.Context,
    settings: Optional[Path] = typer.Option(None, "--settings", help="YAML settings file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Read and query INI-style configuration files."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = _run(lambda: Config.from_yaml(settings)) if settings is not None else Config()


@app.command()
def show(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="INI file to read"),
    create_default: bool = typer.Option(False, "--create-default", help="Create the file if missing"),
) -> None:
    """Print every value as ``section.key = value``."""
    document: Document = _run(lambda: _make_loader(ctx, create_default).load(file))
    for name, section in document.items():
        for key, value in section.items():
            typer.echo(f"{name}.{key} = {value}")


@app.command()
def get(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="INI file to read"),
    path: str = typer.Argument(..., help="Value path, 'section.key'"),
    value_type: ValueType = typer.Option(ValueType.STR, "--type", "-t", help="Type to convert the value to"),
    create_default: bool = typer.Option(False, "--create-default", help="Create the file if missing"),
) -> None:
    """Print one value converted to the requested type."""

    def action() -> Any:
        document = _make_loader(ctx, create_default).load(file)
        return document.get_typed(path, _VALUE_TYPES[value_type])

    value = _run(action)
    if isinstance(value, bool):
        value = str(value).lower()
    typer.echo(value)


@app.command()
def init(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File to create"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write the default document to FILE."""
    if file.exists() and not force:
        typer.echo(f"File already exists: {file} (use --force to overwrite)", err=True)
        raise typer.Exit(code=EXIT_FAILURE)
    _run(lambda: _make_loader(ctx, False).write_default(file))
    typer.echo(f"Created default configuration file: {file}")
