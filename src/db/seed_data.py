"""Seed the folders/messages tables from a mailbox JSON document."""

from pathlib import Path

from src.db.repositories import insert_folder, insert_message
from src.mail_store.json_store import read_mailbox
from src.utils.logger import get_logger

logger = get_logger("webmail.db.seed_data")


def seed_mailbox(mailbox_path: Path) -> tuple[int, int]:
    """Insert every folder, then every message, of the mailbox file. Returns (folders, messages)."""
    folders, messages = read_mailbox(mailbox_path)
    for folder in folders:
        insert_folder(folder)
    for message in messages:
        insert_message(message)
    logger.info(
        "seed.mailbox_loaded",
        mailbox_path=str(mailbox_path),
        folders=len(folders),
        messages=len(messages),
    )
    return len(folders), len(messages)
