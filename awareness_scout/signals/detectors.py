# awareness_scout/signals/detectors.py
"""
Pattern detectors applied to a page's text.

Each scalar detector is a :class:`RegexDetector` strategy: it owns one
``AwarenessSignals`` field, the text scope it reads and an ordered list of
alternative patterns. :data:`SCALAR_DETECTORS` is evaluated top to bottom;
adding a detector means adding an entry, not a branch.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

TEXT_SCOPE = "text"
ADDRESS_SCOPE = "address"


@dataclass(frozen=True)
class RegexDetector:
    """First match of any pattern (in order) wins; later matches are ignored."""

    field: str
    patterns: Tuple[re.Pattern[str], ...]
    scope: str = TEXT_SCOPE
    # hide the matched span from detectors that run later on the same scope
    claims_span: bool = False

    def find(self, text: str) -> Optional[re.Match[str]]:
        for pattern in self.patterns:
            match = pattern.search(text)
            if match:
                return match
        return None


SCALAR_DETECTORS: Tuple[RegexDetector, ...] = (
    RegexDetector(
        field="vanity_phone",
        patterns=(
            re.compile(r"1[-.]?800[-.]?[a-z]{6,}", re.I),
            re.compile(r"\d[-.]?800[-.]?[a-z]{4,}", re.I),
        ),
        claims_span=True,
    ),
    RegexDetector(
        field="phone",
        patterns=(re.compile(r"\(?\d{3}\)?[-.\s]\d{3}[-.\s]\d{4}"),),
    ),
    RegexDetector(
        field="address",
        patterns=(re.compile(r"\d+\s+[\w\s]+,\s*[\w\s]+,\s*[A-Z]{2}\s*\d{5}"),),
        scope=ADDRESS_SCOPE,
    ),
    RegexDetector(
        field="review_count",
        patterns=(
            re.compile(r"(\d[\d,]+)\+?\s*(google\s*)?reviews?", re.I),
            re.compile(r"(\d[\d,]+)\+?\s*client\s+reviews?", re.I),
            re.compile(r"(\d[\d,]+)\+?\s*5[\s-]*star", re.I),
        ),
    ),
)


def run_detectors(
    scopes: Mapping[str, str],
    detectors: Sequence[RegexDetector] = SCALAR_DETECTORS,
) -> Dict[str, Optional[str]]:
    """Run *detectors* in order; return ``{field: first match or None}``."""
    texts = dict(scopes)
    found: Dict[str, Optional[str]] = {}
    for detector in detectors:
        text = texts.get(detector.scope, "")
        match = detector.find(text)
        found[detector.field] = match.group(0) if match else None
        if match and detector.claims_span:
            start, end = match.span()
            texts[detector.scope] = text[:start] + " " * (end - start) + text[end:]
    return found


def matched_keywords(text: str, keywords: Iterable[str]) -> List[str]:
    """Keywords present as substrings of *text*, in list order, no repeats."""
    return list(dict.fromkeys(kw for kw in keywords if kw and kw in text))


def review_platform_mentions(text: str, platforms: Iterable[str]) -> List[str]:
    """Platforms followed by " review" or " rating"; each checked on its own."""
    return list(
        dict.fromkeys(
            p for p in platforms if f"{p} review" in text or f"{p} rating" in text
        )
    )


def match_domains(hrefs: Iterable[str], domains: Mapping[str, str]) -> Tuple[List[str], List[str]]:
    """Return ``(links, names)`` for hrefs containing one of *domains*.

    Every distinct href is recorded once; the first matching domain in table
    order names it. Once recorded, an href adds no further names.
    """
    links: Dict[str, None] = {}
    names: Dict[str, None] = {}
    for href in hrefs:
        if href in links:
            continue
        lowered = href.lower()
        for domain, name in domains.items():
            if domain in lowered:
                links[href] = None
                names[name] = None
                break
    return list(links), list(names)


__all__ = [
    "ADDRESS_SCOPE",
    "RegexDetector",
    "SCALAR_DETECTORS",
    "TEXT_SCOPE",
    "match_domains",
    "matched_keywords",
    "review_platform_mentions",
    "run_detectors",
]
