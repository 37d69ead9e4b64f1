"""Message repository: thread fetch, single fetch, flag updates and inserts."""

from datetime import datetime, timezone

from sqlalchemy import select, update

from src.db import get_session
from src.db.models.mail import Message
from src.exceptions import InvalidFlagError
from src.models.message import MESSAGE_FLAGS, RawMessage


def _to_utc(value: datetime) -> datetime:
    """Naive UTC for storage; naive input is local time."""
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _to_raw(row: Message) -> RawMessage:
    return RawMessage(
        id=row.id,
        account_id=row.account_id,
        thread_id=row.thread_id,
        message_id=row.message_id,
        folder_id=row.folder_id,
        seen=row.seen,
        flagged=row.flagged,
        deleted=row.deleted,
        subject=row.subject,
        from_=row.from_,
        to=row.to,
        date_recv=row.date_recv.replace(tzinfo=timezone.utc),
        text_plain=row.text_plain,
    )


def get_thread_messages(account_id: int, thread_id: int) -> list[RawMessage]:
    """Non-deleted message copies of a thread, oldest first (ties broken by id)."""
    with get_session() as session:
        q = (
            select(Message)
            .where(Message.account_id == account_id)
            .where(Message.thread_id == thread_id)
            .where(Message.deleted == False)  # noqa: E712
            .order_by(Message.date_recv, Message.id)
        )
        return [_to_raw(row) for row in session.scalars(q).all()]


def get_message(account_id: int, id: int) -> RawMessage | None:
    with get_session() as session:
        row = session.scalars(
            select(Message).where(Message.account_id == account_id).where(Message.id == id)
        ).first()
        return _to_raw(row) if row is not None else None


def set_flag(
    account_id: int,
    message_id: str,
    flag: str,
    value: bool,
    thread_id: int | None = None,
    folder_id: int | None = None,
) -> int:
    """Set a boolean flag on every copy of a message. Returns the number of rows updated."""
    if flag not in MESSAGE_FLAGS:
        raise InvalidFlagError(f"Unknown message flag: {flag!r}")
    with get_session() as session:
        stmt = (
            update(Message)
            .where(Message.account_id == account_id)
            .where(Message.message_id == message_id)
        )
        if thread_id is not None:
            stmt = stmt.where(Message.thread_id == thread_id)
        if folder_id is not None:
            stmt = stmt.where(Message.folder_id == folder_id)
        result = session.execute(stmt.values({flag: value}))
        return result.rowcount


def insert_message(message: RawMessage) -> RawMessage:
    """Insert a message copy; the record id is kept when set, else assigned."""
    with get_session() as session:
        row = Message(
            id=message.id or None,
            account_id=message.account_id,
            thread_id=message.thread_id,
            message_id=message.message_id,
            folder_id=message.folder_id,
            seen=message.seen,
            flagged=message.flagged,
            deleted=message.deleted,
            subject=message.subject,
            from_=message.from_,
            to=message.to,
            date_recv=_to_utc(message.date_recv),
            text_plain=message.text_plain,
        )
        session.add(row)
        session.flush()
        return _to_raw(row)
