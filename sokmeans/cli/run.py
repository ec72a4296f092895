"""Run command implementation."""

from pathlib import Path
from typing import Optional

import pendulum
import typer
from pydantic import ValidationError
from rich.console import Console

from ..config import Config, KMeansConfig
from ..pipeline import PipelineOrchestrator

console = Console()


def run_command(
    input_path: Optional[Path] = typer.Argument(
        None,
        help="Postings CSV. Default: input_path from the config",
    ),
    run_date: Optional[str] = typer.Option(
        None,
        "--date",
        help="Logical date of the run (YYYY-MM-DD). Default: today",
    ),
    kernels: Optional[int] = typer.Option(
        None,
        "--kernels",
        "-k",
        help="Number of cluster centers (multiple of the language count)",
    ),
    eta: Optional[float] = typer.Option(
        None,
        "--eta",
        help="Convergence threshold",
    ),
    max_iterations: Optional[int] = typer.Option(
        None,
        "--max-iterations",
        help="Maximum k-means iterations",
    ),
    spread: Optional[int] = typer.Option(
        None,
        "--spread",
        help="Distance between languages on the x axis",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Print center movement for every iteration",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file",
    ),
) -> None:
    """Cluster the questions in a postings CSV and print the report."""
    try:
        config = Config(config_path)

        if input_path is None:
            if config.config.input_path is None:
                console.print("[red]No input file given and no input_path configured.[/red]")
                raise typer.Exit(1)
            input_path = Path(config.config.input_path).expanduser()

        if run_date is None:
            run_date = pendulum.now().format("YYYY-MM-DD")

        # Command-line options override the configured k-means settings
        overrides = {
            "kernels": kernels,
            "eta": eta,
            "max_iterations": max_iterations,
            "spread": spread,
        }
        settings = config.config.kmeans.model_dump()
        settings.update({k: v for k, v in overrides.items() if v is not None})
        kmeans_config = KMeansConfig.model_validate(settings)

        orchestrator = PipelineOrchestrator(config, kmeans_config)
        success = orchestrator.run(input_path, run_date, debug=debug)

        if not success:
            raise typer.Exit(1)

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        console.print("\n[yellow]Pipeline interrupted by user[/yellow]")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]Invalid k-means settings: {e}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Pipeline failed: {e}[/red]")
        raise typer.Exit(1)
