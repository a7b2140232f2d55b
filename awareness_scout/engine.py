# File: awareness_scout/engine.py
"""awareness_scout.engine: Orchestration layer — загрузка сайта, дайджест и метро."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from awareness_scout.config import ScoutConfig
from awareness_scout.crawler.models import Site
from awareness_scout.logger import logger
from awareness_scout.metro import MetroResult, resolve_metro
from awareness_scout.scanner import start_scan
from awareness_scout.summary import build_content_summary
from awareness_scout.utils import first_present

__all__ = ["AnalysisResult", "Engine", "analyze_site"]


@dataclass(frozen=True)
class AnalysisResult:
    """Пакет для внешнего сервиса оценки: сайт, дайджест и метро."""

    url: str
    site: Site
    digest: str
    metro: MetroResult

    def to_dict(self, *, include_markup: bool = False) -> Dict[str, Any]:
        return {
            "url": self.url,
            "detected_metro": self.metro.to_dict(),
            "scraped_pages_count": self.site.pages_count,
            "scraping_errors": list(self.site.errors),
            "digest": self.digest,
            "site": self.site.to_dict(include_markup=include_markup),
        }

    def json(self, *, pretty: bool = False, include_markup: bool = False) -> str:
        return json.dumps(
            self.to_dict(include_markup=include_markup),
            ensure_ascii=False,
            indent=2 if pretty else None,
        )


def analyze_site(url: str, site: Site) -> AnalysisResult:
    """Строит дайджест и определяет метро по уже загруженному сайту."""
    digest = build_content_summary(site)
    pages = site.pages
    address = first_present(p.signals.address for p in pages)
    phone = first_present(p.signals.phone for p in pages)
    metro = resolve_metro(digest, address, phone)
    logger.info(
        "Metro for %s: %s (%s, %s)", url, metro.label, metro.confidence.value, metro.source
    )
    return AnalysisResult(url=url, site=site, digest=digest, metro=metro)


class Engine:
    """Фасад для CLI и тестов: загрузка страниц и анализ одного сайта."""

    def __init__(self, config: Optional[ScoutConfig] = None) -> None:
        self.config = config or ScoutConfig()

    async def analyze_async(self, url: str) -> AnalysisResult:
        """Загружает страницы *url* и возвращает AnalysisResult."""
        logger.info("Starting analysis of %s", url)
        site = await start_scan(url, self.config)
        return analyze_site(url, site)
