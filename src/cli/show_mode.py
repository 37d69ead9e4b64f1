"""Show mode: render one thread's folder badges and display index to the terminal."""

from datetime import datetime
from pathlib import Path

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from src.config import DEFAULT_ACCOUNT_ID
from src.exceptions import ThreadNotFoundError
from src.models.thread import EnrichedMessage, IndexGroup, Thread
from src.thread import load_thread
from src.utils.logger import bind_context, clear_context

from .shared import console, get_store, logger


def _print_header(thread: Thread) -> None:
    badges = " ".join(f"[reverse] {escape(f.name)} [/reverse]" for f in thread.folders)
    console.print(f"\n[bold]{escape(thread.subject) or '(no subject)'}[/bold]  {badges}")
    console.print(f"[dim]{thread.message_count} messages, {len(thread.unread_ids)} unread[/dim]\n")


def _print_open(message: EnrichedMessage, current: bool) -> None:
    title = f"[bold]{escape(message.from_name)}[/bold] {escape(message.from_email)}"
    subtitle = f"to {escape(message.to_names)} | {message.datetime_string}"
    console.print(
        Panel(
            Text(message.text_plain.strip() or "(no content)"),
            title=title,
            title_align="left",
            subtitle=subtitle,
            subtitle_align="right",
            border_style="green" if current else "blue",
        )
    )


def _print_collapsed(message: EnrichedMessage) -> None:
    console.print(
        f"  [bold]{escape(message.from_name)}[/bold]  [dim]{escape(message.snippet)}[/dim]  {message.date_string}",
        highlight=False,
    )


def show(
    thread_id: int = typer.Argument(..., help="Thread id"),
    account: int = typer.Option(DEFAULT_ACCOUNT_ID, "--account", "-a", help="Account id"),
    inbox: Path | None = typer.Option(None, "--inbox", "-i", help="Read from a mailbox.json instead of the database"),
    now: datetime | None = typer.Option(None, "--now", help="Render dates as of this time, e.g. 2026-07-08T09:30:00"),
) -> None:
    """Render a thread: expanded, collapsed and grouped messages."""
    bind_context(command="show", account_id=account, thread_id=thread_id)
    log = logger.bind(inbox=str(inbox) if inbox else None)
    log.info("show.start")
    store = get_store(account, inbox)
    try:
        thread = load_thread(store, store, account, thread_id, now=now)
    except ThreadNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        clear_context()
        raise typer.Exit(1)

    _print_header(thread)
    for entry in thread.index:
        if isinstance(entry, IndexGroup):
            console.print(f"  [cyan]{entry.count} more message{'s' if entry.count != 1 else ''}[/cyan]")
        elif entry.open:
            _print_open(entry.message, entry.current)
        else:
            _print_collapsed(entry.message)
    log.info("show.complete", entries=len(thread.index))
    clear_context()
