# awareness_scout/signals/extractor.py
"""
Signal extractor: one page's markup in, one :class:`AwarenessSignals` out.

No network, no global writes; identical markup always yields an equal record.
"""
from __future__ import annotations

from typing import Optional

from awareness_scout.parser.html_parser import ParsedPage, parse_html
from awareness_scout.signals.detectors import (
    ADDRESS_SCOPE,
    TEXT_SCOPE,
    match_domains,
    matched_keywords,
    review_platform_mentions,
    run_detectors,
)
from awareness_scout.signals.models import AwarenessSignals
from awareness_scout.tables import SignalTables, default_tables

#: JSON-LD blocks this long or longer are dropped, never truncated
SCHEMA_BLOCK_LIMIT = 2000


def extract_signals(markup: str, tables: Optional[SignalTables] = None) -> AwarenessSignals:
    """Parse *markup* and run every detector over it.

    Markup the parser rejects produces an empty record.
    """
    parsed = parse_html(markup)
    if parsed is None:
        return AwarenessSignals()
    return signals_from_parsed(parsed, markup, tables)


def signals_from_parsed(
    parsed: ParsedPage, markup: str, tables: Optional[SignalTables] = None
) -> AwarenessSignals:
    """Detectors over an already parsed page; *markup* is used for script checks."""
    if tables is None:
        tables = default_tables()
    text = parsed.text.lower()
    keywords = tables.keywords

    social_links, social_platforms = match_domains(parsed.links, tables.social_domains)
    directory_links, directory_names = match_domains(parsed.links, tables.directory_domains)

    media_logos = [
        alt
        for alt in parsed.image_alts
        if any(k in alt.lower() for k in tables.media_logo_keywords)
    ]

    found = run_detectors({TEXT_SCOPE: text, ADDRESS_SCOPE: parsed.scoped_text})

    raw = (markup or "").lower()

    return AwarenessSignals(
        social_links=social_links,
        social_platforms=social_platforms,
        media_logos=media_logos,
        press_keywords=matched_keywords(text, keywords.press),
        sponsorship_keywords=matched_keywords(text, keywords.sponsorship),
        directory_links=directory_links,
        directory_names=directory_names,
        vanity_phone=found.get("vanity_phone"),
        phone=found.get("phone"),
        address=found.get("address"),
        tv_keywords=matched_keywords(text, keywords.tv),
        radio_keywords=matched_keywords(text, keywords.radio),
        billboard_keywords=matched_keywords(text, keywords.billboard),
        review_count=found.get("review_count"),
        review_platform_mentions=review_platform_mentions(text, tables.review_platforms),
        meta_pixel=any(m in raw for m in tables.pixel_markers),
        gtag=any(m in raw for m in tables.analytics_markers),
        schema_org_data=[b for b in parsed.ld_json if len(b) < SCHEMA_BLOCK_LIMIT],
    )


__all__ = ["SCHEMA_BLOCK_LIMIT", "extract_signals", "signals_from_parsed"]
