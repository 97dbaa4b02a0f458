"""Main Typer CLI application for coordinate tools."""

import logging
from pathlib import Path

import typer

from geocoord.config import EngineConfig, get_default_config

app = typer.Typer(
    help="Coordinate tools for format detection, conversion and distance calculation",
    no_args_is_help=True,
)

# Subcommand groups
convert_app = typer.Typer(help="Single coordinate conversion commands")
calc_app = typer.Typer(help="Distance and bearing commands")
batch_app = typer.Typer(help="Multi-line batch commands")

app.add_typer(convert_app, name="convert")
app.add_typer(calc_app, name="calc")
app.add_typer(batch_app, name="batch")


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, help="Path to YAML configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Load configuration and set up logging for every subcommand."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if config is None:
        ctx.obj = get_default_config()
        return

    try:
        ctx.obj = EngineConfig.from_yaml(str(config))
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def get_config(ctx: typer.Context) -> EngineConfig:
    """Return the configuration loaded by the root callback."""
    return ctx.obj or get_default_config()


def _register_commands() -> None:
    """
    Import command modules to register commands with their respective apps.

    Commands use decorators like @convert_app.command() which register
    themselves when the module is imported.
    """
    from geocoord.cli import batch, calc, convert

    # Avoid "imported but unused" warnings by explicitly using the module
    _ = batch
    _ = calc
    _ = convert


_register_commands()


if __name__ == "__main__":
    app()
