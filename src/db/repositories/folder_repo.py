"""Folder repository: list an account's folders, insert folders."""

from sqlalchemy import select

from src.db import get_session
from src.db.models.mail import Folder as FolderRow
from src.models.message import Folder


def list_folders(account_id: int) -> list[Folder]:
    """All folders of the account in catalog (id) order."""
    with get_session() as session:
        q = select(FolderRow).where(FolderRow.account_id == account_id).order_by(FolderRow.id)
        return [
            Folder(id=row.id, account_id=row.account_id, name=row.name, is_mailbox=row.is_mailbox)
            for row in session.scalars(q).all()
        ]


def insert_folder(folder: Folder) -> Folder:
    with get_session() as session:
        row = FolderRow(
            id=folder.id or None,
            account_id=folder.account_id,
            name=folder.name,
            is_mailbox=folder.is_mailbox,
        )
        session.add(row)
        session.flush()
        return Folder(id=row.id, account_id=row.account_id, name=row.name, is_mailbox=row.is_mailbox)
