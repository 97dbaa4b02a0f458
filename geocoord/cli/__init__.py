"""CLI module for coordinate tools.

Provides a unified `geocoord` command-line interface for format detection,
conversion, distance calculation and batch processing.
"""

from geocoord.cli.main import app

__all__ = ["app"]
