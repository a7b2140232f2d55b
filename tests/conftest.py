# File: tests/conftest.py
import pytest

from awareness_scout.config import ScoutConfig
from awareness_scout.crawler.fetcher import build_page
from awareness_scout.crawler.models import Site

HOMEPAGE_HTML = """
<html>
<head>
  <title>Smith &amp; Jones Injury Lawyers</title>
  <script>!function(f,b,e,v,n,t,s){}(window,document,'script',
    'https://connect.facebook.net/en_US/fbevents.js');</script>
  <script async src="https://www.googletagmanager.com/gtag/js?id=G-1"></script>
  <script type="application/ld+json">{"@type": "LegalService", "name": "Smith & Jones"}</script>
</head>
<body>
  <h1>As Seen On TV: Houston's injury team</h1>
  <p>Call 1-800-LAWYERS or (713) 555-0100. Over 1,200 Google reviews.</p>
  <p>Proud sponsor of the Little League. Read our Google reviews and Yelp rating.</p>
  <a href="https://www.facebook.com/smithjones">Facebook</a>
  <a href="https://www.facebook.com/smithjones">Facebook again</a>
  <a href="https://instagram.com/smithjones">Instagram</a>
  <a href="https://www.avvo.com/attorneys/smith">Avvo</a>
  <img src="/abc.png" alt="ABC 13 News">
  <img src="/logo.png" alt="Firm logo">
  <footer>Smith &amp; Jones, 500 Main Street, Houston, TX 77002</footer>
</body>
</html>
"""


@pytest.fixture()
def config() -> ScoutConfig:
    """
    Config with a short timeout for fetcher tests.
    """
    return ScoutConfig(timeout=2.0, user_agent="TestAgent/1.0")


@pytest.fixture()
def homepage_html() -> str:
    return HOMEPAGE_HTML


@pytest.fixture()
def sample_site(config) -> Site:
    """
    Site with a rich homepage and one subpage.
    """
    home = build_page("https://smithjones.example/", HOMEPAGE_HTML, config)
    about = build_page(
        "https://smithjones.example/about",
        "<html><body><p>Featured in the Houston Chronicle. Giving back since 1990.</p>"
        '<img alt="Houston Press"></body></html>',
        config,
    )
    return Site(homepage=home, subpages=(about,), errors=())
