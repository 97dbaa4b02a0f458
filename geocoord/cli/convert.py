"""Single coordinate conversion CLI commands."""

import typer

from geocoord.cli.main import convert_app, get_config
from geocoord.converter import convert_to_decimal_string, convert_to_dms, convert_to_utm
from geocoord.format_classifier import detect_format
from geocoord.outcome import OperationOutcome


def _echo_outcome(outcome: OperationOutcome) -> None:
    if not outcome.success:
        typer.echo(f"Error: {outcome.message}", err=True)
        raise typer.Exit(1)
    typer.echo(str(outcome.data))


@convert_app.command("detect")
def detect_command(
    text: str = typer.Argument(..., help="Coordinate text"),
) -> None:
    """
    Print the notation the text is written in.

    Example:
        geocoord convert detect "18T 585628 4511322"
    """
    typer.echo(detect_format(text).value)


@convert_app.command("decimal")
def decimal_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="DMS or decimal coordinate pair"),
    precision: int | None = typer.Option(None, help="Decimal places (default from config: 9)"),
) -> None:
    """
    Convert a coordinate pair to decimal degrees.

    Example:
        geocoord convert decimal "N45°30'15\\" W122°40'30\\""
    """
    _echo_outcome(convert_to_decimal_string(text, get_config(ctx), precision))


@convert_app.command("dms")
def dms_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="DMS or decimal coordinate pair"),
    precision: int | None = typer.Option(None, help="Fractional digits for seconds (default from config: 2)"),
) -> None:
    """
    Convert a coordinate pair to degrees, minutes and seconds.

    Example:
        geocoord convert dms "45.5042, -122.6751" --precision 3
    """
    _echo_outcome(convert_to_dms(text, get_config(ctx), precision))


@convert_app.command("utm")
def utm_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="DMS or decimal coordinate pair"),
) -> None:
    """
    Project a coordinate pair to UTM, printed as "<zone><hemisphere> <easting> <northing>".

    Example:
        geocoord convert utm "40.7128, -74.0060"
    """
    _echo_outcome(convert_to_utm(text, get_config(ctx)))
