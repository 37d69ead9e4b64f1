"""Shared CLI helpers: console, logger, mail store selection."""

from pathlib import Path

from rich.console import Console

from src.mail_store import JsonMailStore, SqlMailStore
from src.utils.logger import get_logger

console = Console()
logger = get_logger("webmail.cli")


def get_store(account_id: int, inbox: Path | None = None) -> JsonMailStore | SqlMailStore:
    """Mailbox JSON store when ``inbox`` is given, otherwise the database store."""
    if inbox is not None:
        return JsonMailStore(mailbox_path=inbox, account_id=account_id)
    return SqlMailStore(account_id=account_id)
