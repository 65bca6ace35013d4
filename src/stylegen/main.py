"""stylegen CLI Main Entry Point

Generates the native style setters, the JS style map, the TypeScript
declarations and the style docs from the map style spec.

Usage:
    stylegen generate                     # Generate into the example app
    stylegen generate --no-example        # Generate into the repo itself
    stylegen generate --spec path/v8.json # Use a specific spec file
    stylegen layers                       # Show supported layers
    stylegen --version                    # Show version
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ._version import __version__
from .commands import generate_command, layers_command
from .commands.utils import load_config, setup_logging
from .errors import StylegenError, handle_error

typer_app = typer.Typer(no_args_is_help=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"stylegen {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Style property code generator."""


@typer_app.command()
def generate(
    spec: Optional[Path] = typer.Option(
        None, "--spec", "-s", help="Style spec JSON, relative to --root."
    ),
    root: Optional[Path] = typer.Option(
        None, "--root", "-r", help="Directory output paths are relative to."
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to stylegen.yaml."
    ),
    example: Optional[bool] = typer.Option(
        None,
        "--example/--no-example",
        help="Write into the example app's installed package.",
    ),
    docs: bool = typer.Option(True, "--docs/--no-docs", help="Generate docs."),
    format_ts: Optional[bool] = typer.Option(
        None, "--format/--no-format", help="Run prettier on TypeScript output."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log each step."),
) -> None:
    """Generate sources and docs from the style spec."""
    setup_logging(verbose)
    try:
        config = load_config(
            config_file,
            root=root,
            spec=spec,
            output_to_example=example,
            format_typescript=format_ts,
        )
        generate_command(config, docs=docs)
    except StylegenError as e:
        handle_error(e)


@typer_app.command()
def layers(
    spec: Optional[Path] = typer.Option(
        None, "--spec", "-s", help="Style spec JSON, relative to --root."
    ),
    root: Optional[Path] = typer.Option(
        None, "--root", "-r", help="Directory output paths are relative to."
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to stylegen.yaml."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log each step."),
) -> None:
    """List the layers and property counts that would be generated."""
    setup_logging(verbose)
    try:
        config = load_config(config_file, root=root, spec=spec)
        layers_command(config)
    except StylegenError as e:
        handle_error(e)


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
