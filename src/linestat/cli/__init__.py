"""CLI entry point."""

import typer

app = typer.Typer(
    name="linestat",
    help="linestat - line-oriented source-code statistics",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command module to register it
from .scan import main as _main_command  # noqa: F401, E402


def main() -> None:
    app()
