"""Plain-text message body to display HTML and snippets, as small pipelines.

Usage:
    from src.utils.body_formatter import format_body

    html_body = format_body(message.text_plain)
"""

import html
import re
from typing import Callable

from bs4 import BeautifulSoup

# Type alias for formatter steps
Formatter = Callable[[str], str]


# -----------------------------------------------------------------------------
# Individual Formatters
# -----------------------------------------------------------------------------


def escape_html(text: str) -> str:
    """Escape &, <, > and both quote characters."""
    return html.escape(text, quote=True)


# Optional scheme, optional "://", then a hostname-like token ("ab.cd") and
# any non-space path. A trailing comma or period is left outside the link.
# Matches only start at a token boundary, so long unbroken runs scan once.
URL_PATTERN = re.compile(r"(?<![-\w.:/])(?:https?)?(?::/{2})?[a-zA-Z](?:[-\w]+\.)+[^\s.]\S*[^,.\s]")


def _anchor(match: re.Match) -> str:
    url = match.group(0)
    return f'<a href="{url}" target="_blank" title="{url}">{url}</a>'


def autolink_urls(text: str) -> str:
    """Wrap bare and scheme-prefixed URLs in anchors that open a new tab.

    Expects already-escaped text: the matched text is reused as-is for the
    href, the title and the link text.
    """
    return URL_PATTERN.sub(_anchor, text)


def strip_whitespace(text: str) -> str:
    return text.strip()


_NEWLINE = re.compile(r"(\r\n|\n\r|\n|\r)")


def newlines_to_br(text: str) -> str:
    """Insert <br /> before every line break, keeping the break itself."""
    return _NEWLINE.sub(r"<br />\1", text)


def strip_tags(text: str) -> str:
    """Drop markup, keeping only the text nodes. Entities such as &amp; stay as written."""
    if not text.strip():
        return text
    return BeautifulSoup(text.replace("&", "&amp;"), "html.parser").get_text()


# -----------------------------------------------------------------------------
# Pipelines
# -----------------------------------------------------------------------------

BODY_PIPELINE: list[Formatter] = [
    escape_html,
    autolink_urls,
    strip_whitespace,
    newlines_to_br,
]


# -----------------------------------------------------------------------------
# Main Entry Points
# -----------------------------------------------------------------------------


def format_body(text: str, pipeline: list[Formatter] | None = None) -> str:
    """Render a plain-text body as escaped HTML with clickable links."""
    if not text:
        return ""

    for formatter in (pipeline or BODY_PIPELINE):
        text = formatter(text)

    return text


# Leading characters of quote markers and separator lines ("> ", "-----", "====")
SNIPPET_STRIP_CHARS = "<>-_="
_LINE_SPLIT = re.compile(r"[\r\n]+")


def snippet_text(text: str, length: int) -> str:
    """First ``length`` characters of the tag-free body, minus leading quote/separator chars."""
    if not text:
        return ""
    plain = strip_tags(text).strip()
    return plain.lstrip(SNIPPET_STRIP_CHARS)[:length]


def unquoted_snippet(text: str) -> str:
    """Tag-free body without quoted (">") lines, lines joined as-is, HTML-escaped."""
    if not text:
        return ""
    plain = strip_tags(text).strip()
    lines = [line for line in _LINE_SPLIT.split(plain) if line and not line.startswith(">")]
    return escape_html("".join(lines))
