"""Derive display fields (names, dates, avatar, body, snippet) for one message."""

import hashlib
from datetime import datetime

from src.config import AVATAR_URL_TEMPLATE, FULL_DATE_AFTER_SECONDS, SNIPPET_LENGTH
from src.models.message import RawMessage
from src.models.thread import EnrichedMessage
from src.utils.body_formatter import format_body, snippet_text, unquoted_snippet


def split_name_and_email(header: str) -> tuple[str, str]:
    """Split a header value like "John D. <john@abc.org>" into name and "<email>".

    Lenient on purpose: a value without "<" becomes the name with an empty
    email, and a missing closing ">" is tolerated.
    """
    parts = (header or "").split("<", 1)
    if len(parts) == 1:
        return parts[0].strip(" >"), ""
    return parts[0].strip(), "<" + parts[1].strip(" <>") + ">"


def recipient_names(header: str) -> str:
    """Comma-joined display names of every address in a To header."""
    return ", ".join(split_name_and_email(part)[0] for part in (header or "").split(","))


def _align(received: datetime, now: datetime) -> datetime:
    """Express ``received`` in the same timezone (or naivety) as ``now``."""
    if now.tzinfo is None:
        if received.tzinfo is None:
            return received
        return received.astimezone().replace(tzinfo=None)
    return received.astimezone(now.tzinfo)


def date_labels(received: datetime, now: datetime) -> tuple[str, str]:
    """Return (absolute, contextual) labels for a receipt time.

    Contextual label: "HH:MM" for anything since the start of today, the full
    "d/mm/YYYY" date when it is from another year and at least ~6 months old,
    otherwise "d Mon".
    """
    received = _align(received, now)
    absolute = f"{received.day} {received:%B %Y %H:%M}"

    start_of_today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if received >= start_of_today:
        return absolute, f"{received:%H:%M}"

    elapsed = (now - received).total_seconds()
    if received.year != now.year and elapsed >= FULL_DATE_AFTER_SECONDS:
        # TODO: make day/month order a per-account setting
        return absolute, f"{received.day}/{received:%m/%Y}"
    return absolute, f"{received.day} {received:%b}"


def avatar_url(email: str) -> str:
    """Avatar image URL for an address ("<a@b.c>" or bare), hashed as the service expects."""
    address = (email or "").strip().strip("<>").strip().lower()
    digest = hashlib.md5(address.encode("utf-8")).hexdigest()
    return AVATAR_URL_TEMPLATE.format(hash=digest)


def enrich(raw: RawMessage, now: datetime, snippet_length: int = SNIPPET_LENGTH) -> EnrichedMessage:
    """Build the display-ready copy of a raw message. Does not modify ``raw``."""
    from_name, from_email = split_name_and_email(raw.from_)
    datetime_string, date_string = date_labels(raw.date_recv, now)
    text = raw.text_plain or ""

    return EnrichedMessage(
        **raw.model_dump(),
        from_name=from_name,
        from_email=from_email,
        to_names=recipient_names(raw.to),
        timestamp=int(raw.date_recv.timestamp()),
        datetime_string=datetime_string,
        date_string=date_string,
        avatar_url=avatar_url(from_email),
        body=format_body(text),
        snippet=snippet_text(text, snippet_length),
        snippet_unquoted=unquoted_snippet(text),
        unread=not raw.seen,
    )
