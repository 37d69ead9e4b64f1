"""CLI commands: one module per mode (show, delete, seed)."""

from typer import Typer

from src.cli import delete_mode, seed_mode, show_mode

app = Typer(help="Webmail thread view")


def register_commands() -> None:
    """Register all CLI commands on the global app."""
    app.command()(show_mode.show)
    app.command()(delete_mode.delete)
    app.command()(seed_mode.seed)


register_commands()
