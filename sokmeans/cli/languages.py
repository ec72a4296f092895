"""Languages command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config

console = Console()


def languages_command(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file",
    ),
) -> None:
    """List the tracked languages and their position on the x axis."""
    try:
        kmeans = Config(config_path).config.kmeans
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    table = Table(title="Tracked Languages")
    table.add_column("Index", style="cyan", justify="right")
    table.add_column("Language", style="magenta")
    table.add_column("x", style="green", justify="right")
    table.add_column("Centers", style="yellow", justify="right")

    for index, language in enumerate(kmeans.languages):
        table.add_row(
            str(index),
            language,
            str(index * kmeans.spread),
            str(kmeans.per_language),
        )

    console.print(table)
