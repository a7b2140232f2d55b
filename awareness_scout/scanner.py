# === FILE: awareness_scout/scanner.py ===
"""
Модуль-обёртка для запуска загрузки сайта.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from awareness_scout.config import ScoutConfig
from awareness_scout.crawler.crawler import SiteFetcher
from awareness_scout.crawler.models import Site


async def start_scan(url: str, cfg: Optional[ScoutConfig] = None) -> Site:
    """
    Загружает главную страницу и подстраницы *url* и возвращает Site.

    Parameters
    ----------
    url : str
        Абсолютный URL (схема уже нормализована вызывающим кодом).
    cfg : ScoutConfig, optional
        Конфигурация; по умолчанию ``ScoutConfig()``.
    """
    async with SiteFetcher(cfg or ScoutConfig()) as fetcher:
        return await fetcher.fetch_site(url)


def scrape_site(url: str, cfg: Optional[ScoutConfig] = None) -> Site:
    """Синхронная обёртка над :func:`start_scan`."""
    return asyncio.run(start_scan(url, cfg))


__all__ = ["start_scan", "scrape_site"]
