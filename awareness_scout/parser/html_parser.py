# === FILE: awareness_scout/parser/html_parser.py ===
"""HTML parsing utilities for AwarenessScout.

:func:`parse_html` turns untrusted markup into a :class:`ParsedPage` that
holds exactly what the signal detectors look at:

* title       — document <title> text or ``None`` if absent/blank.
* text        — visible body text with scripts, styles, noscript and iframes
  removed; whitespace collapsed, original case.
* links       — raw ``href`` values of every <a>, in document order.
* image_alts  — raw ``alt`` values of every <img alt="…">.
* scoped_text — text of ``address``/footer elements (where postal addresses live).
* ld_json     — raw bodies of ``application/ld+json`` script blocks.

Markup the parser refuses yields ``None``; callers treat it as "nothing observed".
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from awareness_scout.logger import get_logger

__all__: Sequence[str] = ("ParsedPage", "parse_html", "collapse_whitespace")

NON_CONTENT_TAGS: tuple[str, ...] = ("script", "style", "noscript", "iframe")
ADDRESS_SELECTOR = "address, footer, .footer, #footer"
LD_JSON_TYPE = "application/ld+json"

_WS_RE = re.compile(r"\s+")

log = get_logger("parser")


@dataclass(slots=True)
class ParsedPage:
    """Lightweight, detector-oriented view of an HTML page."""

    title: Optional[str] = None
    text: str = ""
    links: list[str] = field(default_factory=list)
    image_alts: list[str] = field(default_factory=list)
    scoped_text: str = ""
    ld_json: list[str] = field(default_factory=list)


def collapse_whitespace(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


def _node_text(node) -> str:
    # text nodes are concatenated as-is; inline tags must not split a token
    return collapse_whitespace(node.get_text())


def parse_html(markup: str) -> Optional[ParsedPage]:
    """Parse raw HTML markup into a :class:`ParsedPage`.

    Returns ``None`` when the markup cannot be turned into a navigable tree.
    """
    try:
        soup = BeautifulSoup(markup or "", "html.parser")
    except ParserRejectedMarkup as exc:
        log.warning("Markup rejected by parser: %s", exc)
        return None

    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag else ""

    # JSON-LD lives in <script>, so it is read before scripts are removed
    ld_json = [
        tag.string or ""
        for tag in soup.find_all("script", attrs={"type": LD_JSON_TYPE})
    ]

    links: list[str] = []
    for tag in soup.find_all("a", href=True):
        href = tag.get("href")
        if isinstance(href, str):
            links.append(href)

    image_alts: list[str] = []
    for tag in soup.find_all("img", alt=True):
        alt = tag.get("alt")
        if isinstance(alt, str):
            image_alts.append(alt)

    # Visible text (skip <script>, <style>, etc.)
    for element in soup(list(NON_CONTENT_TAGS)):
        element.decompose()

    body = soup.body or soup
    text = _node_text(body)
    scoped_text = " ".join(_node_text(node) for node in soup.select(ADDRESS_SELECTOR))

    return ParsedPage(
        title=title or None,
        text=text,
        links=links,
        image_alts=image_alts,
        scoped_text=scoped_text,
        ld_json=ld_json,
    )
