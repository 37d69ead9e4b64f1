"""Thread view: field enrichment, assembly and the display index."""

from src.thread.assembler import dedupe_messages, load_thread, visible_folders
from src.thread.display_index import build_index, flatten_index
from src.thread.enricher import (
    avatar_url,
    date_labels,
    enrich,
    recipient_names,
    split_name_and_email,
)

__all__ = [
    "load_thread",
    "dedupe_messages",
    "visible_folders",
    "build_index",
    "flatten_index",
    "enrich",
    "split_name_and_email",
    "recipient_names",
    "date_labels",
    "avatar_url",
]
