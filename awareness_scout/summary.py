# === FILE: awareness_scout/summary.py ===
"""Plain-text digest of a :class:`~awareness_scout.crawler.models.Site`.

The digest is what the downstream scoring service reads. Every homepage
signal category gets its own line, and an empty category is written as
:data:`ABSENT` (``NONE``) so "looked, found nothing" never reads like
"did not look". Each field is truncated on its own; the digest as a whole
is not capped.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from awareness_scout.crawler.models import Page, Site

ABSENT = "NONE"
ADDRESS_ABSENT = "NOT FOUND"

HOMEPAGE_TEXT_LIMIT = 4000
SUBPAGE_TEXT_LIMIT = 1500
SOCIAL_LINKS_LIMIT = 8
MEDIA_LOGOS_LIMIT = 10
SCHEMA_EXCERPT_LIMIT = 500


def _joined(values: Iterable[str], limit: Optional[int] = None) -> str:
    items = list(values)
    if limit is not None:
        items = items[:limit]
    return ", ".join(items) or ABSENT


def _flag(value: bool) -> str:
    return "YES" if value else "NO"


def homepage_lines(page: Page) -> List[str]:
    s = page.signals
    lines = [
        f"=== HOMEPAGE ({page.url}) ===",
        f"Title: {page.title or ABSENT}",
        page.body_text[:HOMEPAGE_TEXT_LIMIT],
        "\n--- AWARENESS SIGNALS (HOMEPAGE) ---",
        f"Social platforms found: {_joined(s.social_platforms)}",
        f"Social links: {_joined(s.social_links, SOCIAL_LINKS_LIMIT)}",
        f"Directory links: {_joined(s.directory_names)}",
        f"Press keywords found: {_joined(s.press_keywords)}",
        f"Sponsorship keywords: {_joined(s.sponsorship_keywords)}",
        f"TV/broadcast keywords: {_joined(s.tv_keywords)}",
        f"Radio keywords: {_joined(s.radio_keywords)}",
        f"Billboard keywords: {_joined(s.billboard_keywords)}",
        f"Vanity phone: {s.vanity_phone or ABSENT}",
        f"Phone: {s.phone or ABSENT}",
        f"Address: {s.address or ADDRESS_ABSENT}",
        f"Review count mention: {s.review_count or ABSENT}",
        f"Review platforms mentioned: {_joined(s.review_platform_mentions)}",
        f"Media logo alts: {_joined(s.media_logos, MEDIA_LOGOS_LIMIT)}",
        f"Meta Pixel (Facebook ads): {_flag(s.meta_pixel)}",
        f"Google Analytics/Ads: {_flag(s.gtag)}",
    ]
    if s.schema_org_data:
        lines.append(f"Schema.org data: {s.schema_org_data[0][:SCHEMA_EXCERPT_LIMIT]}")
    return lines


def subpage_lines(page: Page) -> List[str]:
    """Shorter excerpt; only non-empty keyword and logo lines."""
    s = page.signals
    lines = [f"\n=== SUBPAGE: {page.url} ===", page.body_text[:SUBPAGE_TEXT_LIMIT]]
    if s.press_keywords:
        lines.append(f"Press keywords: {', '.join(s.press_keywords)}")
    if s.sponsorship_keywords:
        lines.append(f"Sponsorship keywords: {', '.join(s.sponsorship_keywords)}")
    if s.media_logos:
        lines.append(f"Media logos: {', '.join(s.media_logos)}")
    return lines


def build_content_summary(site: Site) -> str:
    """Render *site* as the digest text. Deterministic for equal input."""
    parts: List[str] = []
    if site.homepage is not None:
        parts.extend(homepage_lines(site.homepage))
    for page in site.subpages:
        parts.extend(subpage_lines(page))
    return "\n".join(parts)


__all__ = [
    "ABSENT",
    "ADDRESS_ABSENT",
    "build_content_summary",
    "homepage_lines",
    "subpage_lines",
]
