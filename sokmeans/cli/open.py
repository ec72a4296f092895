"""Open command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import Config
from ..pipeline.orchestrator import REPORT_FILENAME

console = Console()


def open_command(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file",
    ),
) -> None:
    """Print the cluster report of the latest run."""
    config = Config(config_path)
    runs_dir = config.workspace_root / "runs"

    if not runs_dir.exists():
        console.print("[red]No runs found. Run 'sokmeans run' first.[/red]")
        raise typer.Exit(1)

    # Run directories are named by date, so they sort chronologically
    run_dirs = sorted(
        [d for d in runs_dir.iterdir() if (d / REPORT_FILENAME).exists()],
        reverse=True,
    )

    if not run_dirs:
        console.print("[red]No completed runs found.[/red]")
        raise typer.Exit(1)

    latest_dir = run_dirs[0]
    console.print(f"Latest run: {latest_dir}")
    console.print(
        (latest_dir / REPORT_FILENAME).read_text(encoding="utf-8"),
        markup=False,
        highlight=False,
        end="",
    )
