# File: awareness_scout/utils.py
"""awareness_scout.utils: Утилиты для нормализации входного URL и выбора сигналов."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence
from urllib.parse import urlparse

from awareness_scout.logger import logger

__all__: Sequence[str] = ("normalize_input_url", "first_present")


def normalize_input_url(url: str) -> str:
    """Добавляет ``https://`` к голому домену и проверяет, что есть хост.

    >>> normalize_input_url("example.com")
    'https://example.com'
    """
    raw = (url or "").strip()
    if not raw:
        raise ValueError("URL is required")
    if not raw.lower().startswith(("http://", "https://")):
        raw = f"https://{raw}"
    parsed = urlparse(raw)
    if not parsed.netloc or " " in parsed.netloc:
        raise ValueError(f"Invalid URL format: {url!r}")
    logger.debug("Normalized input URL: %s -> %s", url, raw)
    return raw


def first_present(values: Iterable[Optional[str]]) -> Optional[str]:
    """Первое непустое значение или ``None``."""
    for value in values:
        if value:
            return value
    return None
