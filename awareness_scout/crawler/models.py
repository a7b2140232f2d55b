# awareness_scout/crawler/models.py
"""
Data models produced by the AwarenessScout fetcher.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from awareness_scout.signals.models import AwarenessSignals


@dataclass(frozen=True, slots=True)
class Page:
    """A successfully fetched page: capped text, capped markup and its signals."""

    url: str
    title: Optional[str]
    body_text: str
    raw_markup: str
    signals: AwarenessSignals = field(default_factory=AwarenessSignals)

    def to_dict(self, *, include_markup: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "url": self.url,
            "title": self.title,
            "body_text": self.body_text,
            "signals": self.signals.to_dict(),
        }
        if include_markup:
            data["raw_markup"] = self.raw_markup
        return data


@dataclass(frozen=True, slots=True)
class Site:
    """Everything fetched for one analysis request."""

    homepage: Optional[Page] = None
    subpages: Tuple[Page, ...] = ()
    errors: Tuple[str, ...] = ()

    @property
    def pages(self) -> Tuple[Page, ...]:
        """Homepage (when present) followed by subpages."""
        head = (self.homepage,) if self.homepage is not None else ()
        return head + self.subpages

    @property
    def pages_count(self) -> int:
        return len(self.pages)

    def to_dict(self, *, include_markup: bool = False) -> Dict[str, Any]:
        return {
            "homepage": self.homepage.to_dict(include_markup=include_markup) if self.homepage else None,
            "subpages": [p.to_dict(include_markup=include_markup) for p in self.subpages],
            "errors": list(self.errors),
        }
