"""Rich-text and plain-string formatting for block output."""

from __future__ import annotations

import html
import re

from bs4 import BeautifulSoup

from .models import SummaryFormat

PLUGINFILE_PLACEHOLDER = "@@PLUGINFILE@@/"

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_TAGS = ["script", "style", "iframe", "object", "embed"]


def format_string(text: str | None) -> str:
    """Return ``text`` as a single escaped line suitable for inline markup."""

    if not text:
        return ""
    if "<" in text or "&" in text:
        text = BeautifulSoup(text, "lxml").get_text(" ")
    collapsed = _WHITESPACE_RE.sub(" ", text).strip()
    return html.escape(collapsed)


def _clean_markup(markup: str) -> str:
    soup = BeautifulSoup(markup, "html.parser")
    for node in soup.find_all(_UNSAFE_TAGS):
        node.decompose()
    for node in soup.find_all(True):
        for attribute in list(node.attrs):
            if attribute.lower().startswith("on"):
                del node.attrs[attribute]
        href = node.get("href")
        if isinstance(href, str) and href.strip().lower().startswith("javascript:"):
            del node.attrs["href"]
    return str(soup)


def _newlines_to_breaks(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\n", "<br />\n")


def format_text(
    text: str | None,
    summary_format: SummaryFormat = SummaryFormat.HTML,
    *,
    para: bool = True,
) -> str:
    """Convert stored rich text into markup that is safe to embed."""

    if not text:
        return ""

    summary_format = SummaryFormat(summary_format)
    if summary_format is SummaryFormat.HTML:
        rendered = _clean_markup(text)
    elif summary_format is SummaryFormat.MOODLE:
        rendered = _newlines_to_breaks(_clean_markup(text))
    else:
        # Plain text and markdown are shown verbatim.
        rendered = _newlines_to_breaks(html.escape(text))

    if para:
        rendered = f'<div class="text_to_html">{rendered}</div>'
    return rendered


def rewrite_pluginfile_urls(
    text: str,
    wwwroot: str,
    context_id: int,
    component: str,
    filearea: str,
    itemid: int | None,
) -> str:
    """Replace embedded file placeholders with absolute ``pluginfile.php`` URLs."""

    if PLUGINFILE_PLACEHOLDER not in text:
        return text
    base = f"{wwwroot.rstrip('/')}/pluginfile.php/{context_id}/{component}/{filearea}/"
    if itemid is not None:
        base += f"{itemid}/"
    return text.replace(PLUGINFILE_PLACEHOLDER, base)


__all__ = [
    "PLUGINFILE_PLACEHOLDER",
    "format_string",
    "format_text",
    "rewrite_pluginfile_urls",
]
