# === FILE: awareness_scout/crawler/crawler.py ===
"""Bounded site fetch: the homepage plus a fixed list of candidate subpages."""
from __future__ import annotations

import asyncio
import time
from typing import List, Optional, Sequence
from urllib.parse import urljoin, urlparse

from aiohttp import ClientSession

from awareness_scout.config import ScoutConfig
from awareness_scout.crawler.fetcher import Fetcher
from awareness_scout.crawler.models import Page, Site
from awareness_scout.logger import get_logger
from awareness_scout.tables import SignalTables, tables_for

__all__ = ("SiteFetcher", "candidate_urls", "origin_of")


def origin_of(url: str) -> str:
    """``https://example.com/a/b?q`` -> ``https://example.com``."""
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


def candidate_urls(base_url: str, paths: Sequence[str]) -> List[str]:
    """Resolve candidate *paths* against the origin of *base_url*, in order."""
    origin = origin_of(base_url)
    return [urljoin(origin + "/", path.lstrip("/")) for path in paths]


class SiteFetcher:
    """Fetches the homepage and candidate subpages of one site concurrently.

    Usage::

        async with SiteFetcher(config) as fetcher:
            site = await fetcher.fetch_site("https://example.com")
    """

    def __init__(self, config: ScoutConfig, tables: Optional[SignalTables] = None) -> None:
        self.config = config
        self.tables = tables if tables is not None else tables_for(config.tables_path)
        self.session: Optional[ClientSession] = None
        self.logger = get_logger("crawler")

    async def __aenter__(self) -> SiteFetcher:
        self.session = ClientSession(raise_for_status=False)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def fetch_site(self, base_url: str) -> Site:
        """Return the :class:`Site` for *base_url*; failures become data, never exceptions."""
        if not self.session:
            raise RuntimeError("Session not initialized")
        fetcher = Fetcher(self.session, self.config, self.tables)
        sub_urls = candidate_urls(base_url, self.config.candidate_paths)

        self.logger.info("Fetching %s and %d subpages", base_url, len(sub_urls))
        start = time.monotonic()
        # gather keeps argument order, so subpages stay in candidate-path order
        results = await asyncio.gather(
            fetcher.fetch(base_url), *(fetcher.fetch(u) for u in sub_urls)
        )
        homepage: Optional[Page] = results[0]
        subpages = tuple(p for p in results[1:] if p is not None)

        errors: List[str] = []
        if homepage is None:
            errors.append(f"Failed to fetch homepage: {base_url}")
            self.logger.warning("Failed to fetch homepage: %s", base_url)

        self.logger.info(
            "Done in %.2f s: homepage=%s, subpages=%d/%d",
            time.monotonic() - start,
            "ok" if homepage else "missing",
            len(subpages),
            len(sub_urls),
        )
        return Site(homepage=homepage, subpages=subpages, errors=tuple(errors))
