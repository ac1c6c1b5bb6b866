"""Guess a section title from its formatted summary."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

MAX_TITLE_WORDS = 10
ELLIPSIS = "..."

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
_EMPHASIS_TAGS = ["strong", "b"]
_BLOCK_TAGS = [
    "p",
    "div",
    "li",
    "ul",
    "ol",
    "table",
    "tr",
    "td",
    "th",
    "blockquote",
    "pre",
    "section",
    "article",
    "header",
    "footer",
    *_HEADING_TAGS,
]
_WHITESPACE_RE = re.compile(r"\s+")


def _collapse(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def _shorten(text: str) -> str:
    words = text.split(" ")
    if len(words) <= MAX_TITLE_WORDS:
        return text
    return " ".join(words[:MAX_TITLE_WORDS]) + ELLIPSIS


def _first_text(tags: Iterable[Tag]) -> Optional[str]:
    for tag in tags:
        text = _collapse(tag.get_text(" "))
        if text:
            return text
    return None


def _first_line(soup: BeautifulSoup) -> Optional[str]:
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for block in soup.find_all(_BLOCK_TAGS):
        block.insert_before("\n")
        block.insert_after("\n")
    for line in soup.get_text().split("\n"):
        text = _collapse(line)
        if text:
            return text
    return None


def extract_title(markup: str | None) -> str:
    """Return the best plain-text title candidate found in ``markup``.

    Headings win over bold text, which wins over the first line of text.
    Long candidates are cut to the first ten words. An empty string means
    nothing usable was found.
    """

    if not markup or not markup.strip():
        return ""

    soup = BeautifulSoup(markup, "lxml")
    for node in soup.find_all(["script", "style"]):
        node.decompose()
    for node in soup.find_all(["nolink", "a"]):
        node.unwrap()

    candidate = (
        _first_text(soup.find_all(_HEADING_TAGS))
        or _first_text(soup.find_all(_EMPHASIS_TAGS))
        or _first_line(soup)
    )
    if not candidate:
        return ""
    return _shorten(candidate)


__all__ = ["MAX_TITLE_WORDS", "extract_title"]
