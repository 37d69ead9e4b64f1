"""Utility modules."""

from src.utils.body_formatter import (
    BODY_PIPELINE,
    autolink_urls,
    escape_html,
    format_body,
    newlines_to_br,
    snippet_text,
    strip_tags,
    unquoted_snippet,
)
from src.utils.logger import bind_context, clear_context, get_logger

__all__ = [
    "BODY_PIPELINE",
    "autolink_urls",
    "escape_html",
    "format_body",
    "newlines_to_br",
    "snippet_text",
    "strip_tags",
    "unquoted_snippet",
    "get_logger",
    "bind_context",
    "clear_context",
]
