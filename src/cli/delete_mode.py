"""Delete mode: flag a message deleted from one folder or from its whole thread."""

from pathlib import Path

import typer

from src.actions import delete_message
from src.config import DEFAULT_ACCOUNT_ID

from .shared import console, get_store, logger


def delete(
    message: int = typer.Argument(..., help="Stored message record id"),
    folder: int | None = typer.Option(None, "--folder", "-f", help="Only delete the copy in this folder"),
    account: int = typer.Option(DEFAULT_ACCOUNT_ID, "--account", "-a", help="Account id"),
    inbox: Path | None = typer.Option(None, "--inbox", "-i", help="Use a mailbox.json instead of the database"),
) -> None:
    """Delete a message; without --folder every copy in the thread is deleted."""
    log = logger.bind(command="delete", id=message, folder_id=folder)
    store = get_store(account, inbox)
    record = store.get_message(account, message)
    if record is None:
        console.print(f"[red]Message {message} not found for account {account}[/red]")
        log.warning("delete.not_found")
        raise typer.Exit(1)

    updated = delete_message(store, record, from_folder_id=folder)
    scope = f"folder {folder}" if folder is not None else "all folders"
    console.print(f"[green]Deleted {updated} cop{'y' if updated == 1 else 'ies'} from {scope}.[/green]")
    log.info("delete.complete", updated=updated)
