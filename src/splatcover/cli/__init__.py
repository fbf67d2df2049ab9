"""Command-line interface for splatcover.

This module provides the CLI using Typer with rich output.

Key features:
- Circles given as X,Y,R triples or as X,Y points with a shared radius
- Configurable grid resolution and worker count
- Quiet mode printing only the area
"""

from splatcover.cli.app import cli, main

__all__ = ["cli", "main"]
