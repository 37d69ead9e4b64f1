"""Seed mode: import a mailbox JSON document into the database."""

from pathlib import Path

import typer

from src.config import MAILBOX_PATH
from src.db.seed_data import seed_mailbox
from src.exceptions import MailboxFormatError

from .shared import console, logger


def seed(
    mailbox: Path = typer.Argument(MAILBOX_PATH, help="Path to mailbox.json"),
) -> None:
    """Load folders and messages from a mailbox file into the database."""
    log = logger.bind(command="seed", mailbox=str(mailbox))
    if not mailbox.exists():
        console.print(f"[red]No mailbox file at {mailbox}[/red]")
        log.warning("seed.missing_mailbox")
        raise typer.Exit(1)
    try:
        folders, messages = seed_mailbox(mailbox)
    except MailboxFormatError as e:
        console.print(f"[red]{e}[/red]")
        log.error("seed.invalid_mailbox", error=str(e))
        raise typer.Exit(1) from e
    console.print(f"[green]Imported {folders} folders and {messages} messages.[/green]")
