"""Distance and bearing CLI commands."""

import json

import typer

from geocoord.cli.main import calc_app
from geocoord.gps_distance_calculator import distance_between, format_bearing, format_distance


@calc_app.command("distance")
def distance_command(
    point1: str = typer.Argument(..., help="Start point (decimal or DMS pair)"),
    point2: str = typer.Argument(..., help="End point (decimal or DMS pair)"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """
    Great-circle distance, forward bearing and reverse bearing between two points.

    Example:
        geocoord calc distance "40.7128, -74.0060" "34.0522, -118.2437"
        geocoord calc distance "N40°45'00\\" W73°59'00\\"" "N34°03'00\\" W118°15'00\\""
    """
    outcome = distance_between(point1, point2)
    if not outcome.success:
        typer.echo(f"Error: {outcome.message}", err=True)
        raise typer.Exit(1)

    result = outcome.data
    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    typer.echo(f"Distance:        {format_distance(result.distance_meters)}")
    typer.echo(f"Bearing:         {format_bearing(result.forward_bearing_deg)}")
    typer.echo(f"Reverse bearing: {format_bearing(result.reverse_bearing_deg)}")
