# File: tests/test_fetcher.py
from __future__ import annotations

import asyncio
import time
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import ClientSession, web

from awareness_scout.config import ScoutConfig
from awareness_scout.crawler.crawler import SiteFetcher, candidate_urls, origin_of
from awareness_scout.crawler.fetcher import Fetcher, build_page
from awareness_scout.engine import Engine
from awareness_scout.scanner import scrape_site, start_scan

#: seconds a "slow" handler sleeps
SLOW_SLEEP: float = 0.5


def html_page(body: str) -> web.Response:
    return web.Response(text=f"<html><body>{body}</body></html>", content_type="text/html")


async def _serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


# --------------------------------------------------------------------------- #
#                            Test-server fixtures                             #
# --------------------------------------------------------------------------- #


@pytest.fixture()
def seen_headers() -> dict:
    return {}


@pytest_asyncio.fixture
async def full_site(unused_tcp_port: int, seen_headers: dict) -> AsyncIterator[str]:
    app = web.Application()

    async def handle_root(request):
        seen_headers.update(request.headers)
        return html_page(
            '<a href="https://facebook.com/firm">fb</a><p>Serving Denver, CO</p>'
        )

    async def handle_about(_):
        await asyncio.sleep(0.2)  # finishes last, must still come first
        return html_page("<p>About us. Giving back.</p>")

    async def handle_about_us(_):
        return html_page("<p>About us, again.</p>")

    async def handle_media(_):
        return html_page("<p>Featured in the Denver Post.</p>")

    async def handle_press(_):
        return html_page("<p>Press room</p>")

    app.router.add_get("/", handle_root)
    app.router.add_get("/about", handle_about)
    app.router.add_get("/about-us", handle_about_us)
    app.router.add_get("/media", handle_media)
    app.router.add_get("/press", handle_press)

    async for url in _serve_app(app, unused_tcp_port):
        yield url


@pytest_asyncio.fixture
async def broken_home(unused_tcp_port: int) -> AsyncIterator[str]:
    """Homepage 500s, /about-us is missing, two subpages succeed."""
    app = web.Application()

    async def handle_root(_):
        return web.Response(status=500)

    async def handle_about(_):
        return html_page("<p>Based in Austin, TX</p>")

    async def handle_media(_):
        return html_page("<p>In the news</p>")

    app.router.add_get("/", handle_root)
    app.router.add_get("/about", handle_about)
    app.router.add_get("/media", handle_media)

    async for url in _serve_app(app, unused_tcp_port):
        yield url


# --------------------------------------------------------------------------- #
#                                   Tests                                     #
# --------------------------------------------------------------------------- #


def test_candidate_urls_use_origin():
    assert origin_of("https://firm.example/practice/injury?x=1") == "https://firm.example"
    assert candidate_urls("https://firm.example/practice/", ["/about", "press"]) == [
        "https://firm.example/about",
        "https://firm.example/press",
    ]


def test_build_page_caps_sizes():
    cfg = ScoutConfig(body_text_limit=10, markup_limit=20)
    page = build_page("https://a.example/", "<body>" + "x" * 100 + "</body>", cfg)
    assert len(page.body_text) == 10
    assert len(page.raw_markup) == 20


@pytest.mark.asyncio()
async def test_fetch_site_orders_subpages(config, full_site: str, seen_headers: dict):
    async with SiteFetcher(config) as fetcher:
        site = await fetcher.fetch_site(full_site)

    assert site.errors == ()
    assert site.homepage is not None
    assert site.homepage.signals.social_platforms == ["Facebook"]
    # only the first three candidate paths are requested
    assert [p.url for p in site.subpages] == [
        f"{full_site}/about",
        f"{full_site}/about-us",
        f"{full_site}/media",
    ]
    assert site.subpages[0].signals.sponsorship_keywords == ["giving back"]
    assert seen_headers["User-Agent"] == "TestAgent/1.0"
    assert seen_headers["Accept"] == "text/html,application/xhtml+xml"


@pytest.mark.asyncio()
async def test_scrape_site_sync_wrapper(config, full_site: str):
    # scrape_site owns its event loop, so it runs in a worker thread
    site = await asyncio.to_thread(scrape_site, full_site, config)

    assert site.homepage is not None
    assert site.homepage.url == full_site
    assert site.pages_count == 4
    assert site.errors == ()


@pytest.mark.asyncio()
async def test_homepage_failure_is_recorded_once(config, broken_home: str):
    site = await start_scan(broken_home, config)

    assert site.homepage is None
    assert site.errors == (f"Failed to fetch homepage: {broken_home}",)
    assert [p.url for p in site.subpages] == [f"{broken_home}/about", f"{broken_home}/media"]


@pytest.mark.asyncio()
async def test_engine_degrades_to_subpages(config, broken_home: str):
    result = await Engine(config).analyze_async(broken_home)

    assert result.metro.city == "Austin"
    assert result.metro.source == "located-clause"
    assert result.site.pages_count == 2


@pytest.mark.asyncio()
async def test_timeout_drops_only_slow_page(unused_tcp_port: int):
    app = web.Application()

    async def root(_):
        return html_page("<p>Home</p>")

    async def slow(_):
        await asyncio.sleep(SLOW_SLEEP * 4)
        return html_page("<p>Slow</p>")

    async def fast(_):
        return html_page("<p>Fast</p>")

    app.router.add_get("/", root)
    app.router.add_get("/about", slow)
    app.router.add_get("/about-us", fast)

    cfg = ScoutConfig(timeout=SLOW_SLEEP, max_subpages=2)
    async for base in _serve_app(app, unused_tcp_port):
        start = time.perf_counter()
        site = await start_scan(base, cfg)
        elapsed = time.perf_counter() - start

    assert elapsed < SLOW_SLEEP * 3
    assert site.homepage is not None
    assert [p.url for p in site.subpages] == [f"{base}/about-us"]
    assert site.errors == ()


@pytest.mark.asyncio()
async def test_unreachable_host_never_raises(config, unused_tcp_port: int):
    # nothing listens on the port
    site = await start_scan(f"http://localhost:{unused_tcp_port}", config)
    assert site.homepage is None
    assert site.subpages == ()
    assert len(site.errors) == 1


@pytest.mark.asyncio()
async def test_fetcher_returns_none_on_404(config, unused_tcp_port: int):
    app = web.Application()
    async for base in _serve_app(app, unused_tcp_port):
        async with ClientSession() as session:
            page = await Fetcher(session, config).fetch(f"{base}/missing")
    assert page is None
