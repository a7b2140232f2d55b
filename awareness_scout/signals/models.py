# awareness_scout/signals/models.py
"""
Data model for the signals extracted from a single page.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(slots=True)
class AwarenessSignals:
    """Independent observations collected from one page's markup.

    List fields named ``*_links``, ``*_platforms``, ``*_names``,
    ``*_keywords`` and ``review_platform_mentions`` never hold duplicates and
    keep first-seen order. ``media_logos`` keeps every hit, one per image.
    Scalar fields hold the first match only.
    """

    social_links: List[str] = field(default_factory=list)
    social_platforms: List[str] = field(default_factory=list)
    media_logos: List[str] = field(default_factory=list)
    press_keywords: List[str] = field(default_factory=list)
    sponsorship_keywords: List[str] = field(default_factory=list)
    directory_links: List[str] = field(default_factory=list)
    directory_names: List[str] = field(default_factory=list)
    vanity_phone: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    tv_keywords: List[str] = field(default_factory=list)
    radio_keywords: List[str] = field(default_factory=list)
    billboard_keywords: List[str] = field(default_factory=list)
    review_count: Optional[str] = None
    review_platform_mentions: List[str] = field(default_factory=list)
    meta_pixel: bool = False
    gtag: bool = False
    schema_org_data: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def is_empty(self) -> bool:
        """True when nothing at all was observed."""
        return self == AwarenessSignals()
