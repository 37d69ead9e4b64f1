"""ORM models for folders and stored message copies."""

from datetime import datetime

from sqlalchemy import Boolean, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.db.base import Base, TimestampMixin


class Folder(Base, TimestampMixin):
    """IMAP folder of an account; is_mailbox marks virtual aggregate folders."""

    __tablename__ = "folders"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    account_id: Mapped[int] = mapped_column(nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    is_mailbox: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class Message(Base, TimestampMixin):
    """One copy of a message in one folder. Copies share message_id."""

    __tablename__ = "messages"
    __table_args__ = (Index("ix_messages_account_thread", "account_id", "thread_id"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    account_id: Mapped[int] = mapped_column(nullable=False)
    thread_id: Mapped[int] = mapped_column(nullable=False)
    message_id: Mapped[str] = mapped_column(String(512), nullable=False, index=True)
    folder_id: Mapped[int] = mapped_column(ForeignKey("folders.id"), nullable=False)

    seen: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    flagged: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    subject: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    from_: Mapped[str] = mapped_column("from", String(1024), nullable=False, default="")
    to: Mapped[str] = mapped_column(Text, nullable=False, default="")
    date_recv: Mapped[datetime] = mapped_column(nullable=False)  # naive UTC
    text_plain: Mapped[str] = mapped_column(Text, nullable=False, default="")
