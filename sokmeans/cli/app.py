"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .init import init_command
from .languages import languages_command
from .open import open_command
from .run import run_command

app = typer.Typer(
    name="sokmeans",
    help="Cluster Stack Overflow questions by dominant programming language",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("run")(run_command)
app.command("open")(open_command)
app.command("languages")(languages_command)


if __name__ == "__main__":
    app()
