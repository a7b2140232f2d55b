# === FILE: awareness_scout/tables.py ===
"""Static lookup tables used by the signal extractor and the metro resolver.

The tables ship as YAML under ``awareness_scout/data`` and are validated with
Pydantic. Coverage grows by adding entries to the data files; the detectors
never change for that.

* :class:`SignalTables` – social/directory domains, keyword lists, markers.
* :data:`AREA_CODES` – read-only ``{"713": AreaCodeEntry(...)}`` mapping,
  loaded once at import time and shared by every request.
"""
from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from awareness_scout.config import read_mapping

_DATA_PACKAGE = "awareness_scout.data"
_SIGNAL_TABLES_FILE = "signal_tables.yaml"
_AREA_CODES_FILE = "area_codes.yaml"


class KeywordTables(BaseModel):
    """Keyword lists matched against lower-cased visible text."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    press: List[str] = Field(default_factory=list)
    sponsorship: List[str] = Field(default_factory=list)
    tv: List[str] = Field(default_factory=list)
    radio: List[str] = Field(default_factory=list)
    billboard: List[str] = Field(default_factory=list)

    @field_validator("*", mode="before")
    def _lower(cls, v):
        if isinstance(v, list):
            return [str(k).lower() for k in v]
        return v


class SignalTables(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    # dicts keep YAML order; the first matching domain wins
    social_domains: Dict[str, str] = Field(default_factory=dict)
    directory_domains: Dict[str, str] = Field(default_factory=dict)
    media_logo_keywords: List[str] = Field(default_factory=list)
    keywords: KeywordTables = Field(default_factory=KeywordTables)
    review_platforms: List[str] = Field(default_factory=list)
    pixel_markers: List[str] = Field(default_factory=list)
    analytics_markers: List[str] = Field(default_factory=list)

    @field_validator(
        "media_logo_keywords", "review_platforms", "pixel_markers", "analytics_markers",
        mode="before",
    )
    def _lower(cls, v):
        if isinstance(v, list):
            return [str(k).lower() for k in v]
        return v

    @field_validator("social_domains", "directory_domains", mode="before")
    def _lower_domains(cls, v):
        if isinstance(v, dict):
            return {str(domain).lower(): name for domain, name in v.items()}
        return v


class AreaCodeEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str
    state: str = Field(..., min_length=2, max_length=2)


def _read_packaged(name: str) -> dict:
    text = resources.files(_DATA_PACKAGE).joinpath(name).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise TypeError(f"{name}: top level must be a mapping, got {type(data).__name__}")
    return data


def load_tables(path: Union[str, Path, None] = None) -> SignalTables:
    """Load signal tables from *path* (YAML/JSON) or from the packaged defaults."""
    if path is None:
        return SignalTables(**_read_packaged(_SIGNAL_TABLES_FILE))
    return SignalTables(**read_mapping(Path(path)))


@lru_cache(maxsize=1)
def default_tables() -> SignalTables:
    """Packaged tables, parsed once per process."""
    return load_tables()


def load_area_codes(path: Union[str, Path, None] = None) -> Mapping[str, AreaCodeEntry]:
    """Return a read-only area-code mapping. Keys are always 3-digit strings."""
    raw = _read_packaged(_AREA_CODES_FILE) if path is None else read_mapping(Path(path))
    table = {str(code).zfill(3): AreaCodeEntry(**entry) for code, entry in raw.items()}
    return MappingProxyType(table)


def tables_for(path: Optional[Path]) -> SignalTables:
    """Tables selected by configuration: explicit file or packaged defaults."""
    return default_tables() if path is None else load_tables(path)


AREA_CODES: Mapping[str, AreaCodeEntry] = load_area_codes()

__all__ = [
    "AREA_CODES",
    "AreaCodeEntry",
    "KeywordTables",
    "SignalTables",
    "default_tables",
    "load_area_codes",
    "load_tables",
    "tables_for",
]
