"""Init command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import DEFAULT_CONFIG_PATH, ConfigModel, save_config

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_PATH.parent,
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    workspace: Path = typer.Option(
        Path.home() / "SO-Clusters",
        "--workspace",
        "-w",
        help="Workspace root directory",
    ),
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Default postings CSV",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing configuration",
    ),
) -> None:
    """Write a default configuration and create the workspace."""
    console.print(Panel.fit("Stack Overflow clustering - Initialization", style="bold blue"))

    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.yaml"

    if config_path.exists() and not force:
        console.print(f"[red]❌ Config already exists: {config_path} (use --force)[/red]")
        raise typer.Exit(1)

    config = ConfigModel(
        workspace_root=str(workspace),
        input_path=str(input_path) if input_path else None,
    )

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    workspace.mkdir(parents=True, exist_ok=True)
    console.print(f"✅ Created workspace: {workspace}")

    console.print(
        Panel(
            f"[green]✅ sokmeans initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Workspace: {workspace}\n\n"
            f"Next steps:\n"
            f"1. Adjust languages and k-means settings in the config\n"
            f"2. Run: [bold]sokmeans run path/to/stackoverflow.csv[/bold]",
            style="green",
        )
    )
