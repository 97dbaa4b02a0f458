"""Batch processing CLI commands."""

import json
import sys
from pathlib import Path
from typing import Any

import typer

from geocoord.batch import BatchOperation, run_batch, summarize
from geocoord.cli.main import batch_app, get_config
from geocoord.config import EngineConfig
from geocoord.models import Coordinate, ValidationReport
from geocoord.sexagesimal import format_decimal_degrees


def _render(data: Any, config: EngineConfig) -> str:
    if isinstance(data, Coordinate):
        return format_decimal_degrees(data.latitude, data.longitude, config.decimal_precision)
    if isinstance(data, ValidationReport):
        return data.format.value
    return str(data)


@batch_app.command("run")
def run_command(
    ctx: typer.Context,
    input_file: Path | None = typer.Argument(
        None, help="File with one coordinate per line (reads stdin when omitted)"
    ),
    operation: BatchOperation = typer.Option(
        BatchOperation.CONVERT, "--operation", "-o", help="Operation applied to every line"
    ),
    keep_blank: bool = typer.Option(
        False, help="Report blank lines as failures instead of skipping them"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print outcomes as a JSON array"),
) -> None:
    """
    Apply one operation to every line of a file.

    Each line is processed independently; failures are reported per line and
    never stop the batch.

    Example:
        geocoord batch run points.txt --operation utm
        cat points.txt | geocoord batch run --operation dms --json
    """
    config = get_config(ctx)

    if input_file is None:
        text = sys.stdin.read()
    else:
        try:
            text = input_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            typer.echo(f"Error: Input file not found: {input_file}", err=True)
            raise typer.Exit(1)

    lines = text.splitlines()
    if not keep_blank:
        lines = [line for line in lines if line.strip()]

    if not lines:
        typer.echo("Error: No input lines", err=True)
        raise typer.Exit(1)

    outcomes = run_batch(lines, operation, config=config)

    if as_json:
        typer.echo(json.dumps([o.to_dict() for o in outcomes], indent=2, ensure_ascii=False))
    else:
        for item in outcomes:
            if item.success:
                typer.echo(f"{item.index + 1}\tOK\t{_render(item.data, config)}")
            else:
                typer.echo(f"{item.index + 1}\tERR\t{item.message}")

    summary = summarize(outcomes)
    typer.echo(
        f"{summary.succeeded}/{summary.total} succeeded, {summary.failed} failed",
        err=True,
    )
