# awareness_scout/crawler/fetcher.py
"""
Fetcher module: a single GET per page with a hard timeout, no retries.

Any failure (non-2xx status, timeout, transport or decoding error) resolves
that one page to ``None``; nothing is raised to the caller.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from awareness_scout.config import ScoutConfig
from awareness_scout.crawler.models import Page
from awareness_scout.logger import get_logger
from awareness_scout.parser.html_parser import parse_html
from awareness_scout.signals.extractor import signals_from_parsed
from awareness_scout.signals.models import AwarenessSignals
from awareness_scout.tables import SignalTables

log = get_logger("fetcher")


def build_page(
    url: str, markup: str, config: ScoutConfig, tables: Optional[SignalTables] = None
) -> Page:
    """Parse *markup* once and assemble an immutable, size-capped :class:`Page`."""
    parsed = parse_html(markup)
    if parsed is None:
        return Page(
            url=url,
            title=None,
            body_text="",
            raw_markup=markup[: config.markup_limit],
            signals=AwarenessSignals(),
        )
    return Page(
        url=url,
        title=parsed.title,
        body_text=parsed.text[: config.body_text_limit],
        raw_markup=markup[: config.markup_limit],
        signals=signals_from_parsed(parsed, markup, tables),
    )


class Fetcher:
    """Fetches one page at a time through a shared aiohttp session."""

    def __init__(
        self,
        session: ClientSession,
        config: ScoutConfig,
        tables: Optional[SignalTables] = None,
    ) -> None:
        self.session = session
        self.config = config
        self.tables = tables
        self._timeout = ClientTimeout(total=config.timeout)

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.config.user_agent, "Accept": self.config.accept}

    async def fetch_markup(self, url: str) -> Optional[str]:
        """Return the response body for a 2xx answer, otherwise ``None``."""
        try:
            async with self.session.get(
                url,
                headers=self.headers,
                timeout=self._timeout,
                raise_for_status=False,
            ) as resp:
                if not 200 <= resp.status < 300:
                    log.info("GET %s -> HTTP %s", url, resp.status)
                    return None
                return await resp.text(errors="replace")
        except asyncio.TimeoutError:
            log.info("GET %s timed out after %.1f s", url, self.config.timeout)
            return None
        except (ClientError, ValueError, LookupError) as exc:
            # ValueError: malformed URL; LookupError: unknown charset
            log.info("GET %s failed: %s", url, exc)
            return None

    async def fetch(self, url: str) -> Optional[Page]:
        """Fetch *url* and turn it into a :class:`Page`; ``None`` on failure."""
        markup = await self.fetch_markup(url)
        if markup is None:
            return None
        page = build_page(url, markup, self.config, self.tables)
        log.debug("Fetched %s (%d chars of text)", url, len(page.body_text))
        if page.signals.is_empty():
            log.info("No awareness signals on %s", url)
        return page
