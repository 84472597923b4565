"""Command-line entry points for resdata."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from resdata.config import init_config
from resdata.errors import ResdataError
from resdata.resolver import PathResolver
from resdata.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Resolve paths to external research data and local outputs")


def _fail(exc: Exception) -> NoReturn:
    typer.echo(str(exc), err=True)
    raise typer.Exit(code=1)


def _resolver(ctx: typer.Context) -> PathResolver:
    return ctx.obj


@app.callback()
def main_options(
    ctx: typer.Context,
    project_root: Optional[Path] = typer.Option(
        None,
        "--project-root",
        help="Project checkout holding config/config.yml (default: $RESDATA_PROJECT_ROOT or this checkout)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log config loading at DEBUG level"),
    log_file: Optional[Path] = typer.Option(None, help="Also write log records to this file"),
) -> None:
    """Select the project and configure logging for every subcommand."""

    if verbose or log_file:
        configure_logging(log_path=log_file, level=logging.DEBUG if verbose else logging.INFO)
    ctx.obj = PathResolver(project_root)


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the resolved data and output roots."""

    resolver = _resolver(ctx)
    try:
        config = resolver.load()
    except ResdataError as exc:
        _fail(exc)

    typer.echo(f"project_root: {resolver.project_root}")
    typer.echo(f"config:       {resolver.config_path}")
    typer.echo(f"data_root:    {config.data_root}")
    typer.echo(f"output_root:  {config.output_root}")


@app.command("data-path")
def data_path(
    ctx: typer.Context,
    segments: Optional[List[str]] = typer.Argument(None, help="Path segments below data_root"),
) -> None:
    """Print a path under data_root (the file does not have to exist)."""

    try:
        path = _resolver(ctx).data_path(*(segments or []))
    except (ResdataError, ValueError) as exc:
        _fail(exc)
    typer.echo(str(path))


@app.command("output-path")
def output_path(
    ctx: typer.Context,
    segments: Optional[List[str]] = typer.Argument(None, help="Path segments below output_root"),
) -> None:
    """Print a path under output_root, creating its parent directory."""

    try:
        path = _resolver(ctx).output_path(*(segments or []))
    except (ResdataError, ValueError) as exc:
        _fail(exc)
    typer.echo(str(path))


@app.command()
def init(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config.yml"),
) -> None:
    """Create config/config.yml from the committed template."""

    try:
        dest = init_config(_resolver(ctx).project_root, force=force)
    except ResdataError as exc:
        _fail(exc)
    typer.echo(f"Wrote {dest}; edit data_root and output_root before use.")


def main() -> None:
    app()


__all__ = ["main", "app"]
