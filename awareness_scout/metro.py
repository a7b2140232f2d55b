# === FILE: awareness_scout/metro.py ===
"""Home-metro inference from weak textual evidence.

The resolver is a strict priority chain. Each tier is a small function that
either returns a :class:`MetroResult` or ``None``; :data:`RESOLVERS` lists
them from most to least trusted:

1. ``address``        – "Locality, ST 12345" in the postal address (high)
2. ``serving-clause`` – "Serving Denver, CO" (high)
3. ``located-clause`` – "located in / based in Austin, TX" (high)
4. ``area-code``      – phone area code looked up in :data:`AREA_CODES` (medium)
5. ``content-scan``   – any "Capitalized, ST" pair in the text (low)

When no tier fires the result is ``Unknown, Unknown`` with low confidence.
"""
from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Sequence

from awareness_scout.tables import AREA_CODES, AreaCodeEntry

UNKNOWN = "Unknown"

# each city word starts upper-case; the rest of the word and the state take any case
_CITY = r"([A-Z][A-Za-z]+(?:\s+[A-Z][A-Za-z]+){0,2})"
_STATE = r"([A-Za-z]{2})\b"

_ADDRESS_RE = re.compile(r"([A-Za-z.\s]+),\s*([A-Z]{2})\s*\d{5}")
_SERVING_RE = re.compile(r"(?i:serving)\s+" + _CITY + r",?\s*" + _STATE)
_LOCATED_RE = re.compile(r"(?i:located|based)\s+(?i:in)\s+" + _CITY + r",?\s*" + _STATE)
_CITY_STATE_RE = re.compile(r"\b([A-Z][a-z]{2,20}),\s*([A-Z]{2})\b")
_NON_DIGIT_RE = re.compile(r"\D")


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class MetroResult:
    city: str
    state: str
    confidence: Confidence
    source: str

    def to_dict(self) -> Dict[str, str]:
        data = asdict(self)
        data["confidence"] = self.confidence.value
        return data

    @property
    def label(self) -> str:
        return f"{self.city}, {self.state}"


@dataclass(frozen=True)
class MetroEvidence:
    """Inputs shared by every resolver tier."""

    content: str
    address: Optional[str] = None
    phone: Optional[str] = None
    area_codes: Mapping[str, AreaCodeEntry] = field(default_factory=lambda: AREA_CODES)


Resolver = Callable[[MetroEvidence], Optional[MetroResult]]


def from_address(ev: MetroEvidence) -> Optional[MetroResult]:
    if not ev.address:
        return None
    match = _ADDRESS_RE.search(ev.address)
    if not match:
        return None
    return MetroResult(match.group(1).strip(), match.group(2), Confidence.HIGH, "address")


def from_serving_clause(ev: MetroEvidence) -> Optional[MetroResult]:
    match = _SERVING_RE.search(ev.content)
    if not match:
        return None
    return MetroResult(match.group(1), match.group(2).upper(), Confidence.HIGH, "serving-clause")


def from_located_clause(ev: MetroEvidence) -> Optional[MetroResult]:
    match = _LOCATED_RE.search(ev.content)
    if not match:
        return None
    return MetroResult(match.group(1), match.group(2).upper(), Confidence.HIGH, "located-clause")


def area_code_of(phone: str) -> str:
    """Leading three digits of *phone*, skipping a +1 country prefix."""
    digits = _NON_DIGIT_RE.sub("", phone)
    if len(digits) == 11 and digits.startswith("1"):
        digits = digits[1:]
    return digits[:3]


def from_area_code(ev: MetroEvidence) -> Optional[MetroResult]:
    if not ev.phone:
        return None
    entry = ev.area_codes.get(area_code_of(ev.phone))
    if entry is None:
        return None
    return MetroResult(entry.city, entry.state, Confidence.MEDIUM, "area-code")


def from_content_scan(ev: MetroEvidence) -> Optional[MetroResult]:
    match = _CITY_STATE_RE.search(ev.content)
    if not match:
        return None
    return MetroResult(match.group(1), match.group(2), Confidence.LOW, "content-scan")


RESOLVERS: Sequence[Resolver] = (
    from_address,
    from_serving_clause,
    from_located_clause,
    from_area_code,
    from_content_scan,
)

NO_METRO = MetroResult(UNKNOWN, UNKNOWN, Confidence.LOW, "none")


def resolve_metro(
    content: str,
    address: Optional[str] = None,
    phone: Optional[str] = None,
    *,
    area_codes: Mapping[str, AreaCodeEntry] = AREA_CODES,
    resolvers: Sequence[Resolver] = RESOLVERS,
) -> MetroResult:
    """Return the first result produced by *resolvers*; never raises, never ``None``."""
    evidence = MetroEvidence(content or "", address, phone, area_codes)
    for resolver in resolvers:
        result = resolver(evidence)
        if result is not None:
            return result
    return NO_METRO


__all__ = [
    "Confidence",
    "MetroEvidence",
    "MetroResult",
    "NO_METRO",
    "RESOLVERS",
    "area_code_of",
    "resolve_metro",
]
