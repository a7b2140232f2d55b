# File: tests/test_summary.py
from awareness_scout.crawler.fetcher import build_page
from awareness_scout.crawler.models import Site
from awareness_scout.engine import analyze_site
from awareness_scout.metro import Confidence
from awareness_scout.summary import (
    HOMEPAGE_TEXT_LIMIT,
    SUBPAGE_TEXT_LIMIT,
    build_content_summary,
)


def test_homepage_block(sample_site):
    digest = build_content_summary(sample_site)
    lines = digest.split("\n")

    assert lines[0] == "=== HOMEPAGE (https://smithjones.example/) ==="
    assert lines[1] == "Title: Smith & Jones Injury Lawyers"
    assert "Social platforms found: Facebook, Instagram" in lines
    assert "Directory links: Avvo" in lines
    assert "Vanity phone: 1-800-lawyers" in lines
    assert "Phone: (713) 555-0100" in lines
    assert "Address: 500 Main Street, Houston, TX 77002" in lines
    assert "Meta Pixel (Facebook ads): YES" in lines
    assert "Google Analytics/Ads: YES" in lines
    assert "Radio keywords: NONE" in lines
    assert any(line.startswith("Schema.org data: {") for line in lines)


def test_subpage_block_lists_only_found_categories(sample_site):
    digest = build_content_summary(sample_site)
    sub = digest.split("=== SUBPAGE: https://smithjones.example/about ===", 1)[1]

    assert "Press keywords: featured in" in sub
    assert "Sponsorship keywords: giving back" in sub
    assert "Media logos: Houston Press" in sub
    assert "Radio" not in sub
    assert "NONE" not in sub


def test_explicit_absence_markers(config):
    page = build_page("https://plain.example/", "<html><body><p>Hello</p></body></html>", config)
    lines = build_content_summary(Site(homepage=page)).split("\n")

    assert "Social platforms found: NONE" in lines
    assert "Social links: NONE" in lines
    assert "Title: NONE" in lines
    assert "Address: NOT FOUND" in lines
    assert "Meta Pixel (Facebook ads): NO" in lines
    assert not any(line.startswith("Schema.org data") for line in lines)


def test_text_is_truncated_per_field(config):
    long_text = "word " * 5000
    home = build_page("https://a.example/", f"<body>{long_text}</body>", config)
    sub = build_page("https://a.example/about", f"<body>{long_text}</body>", config)
    lines = build_content_summary(Site(homepage=home, subpages=(sub,))).split("\n")

    assert len(lines[2]) == HOMEPAGE_TEXT_LIMIT
    sub_index = lines.index("=== SUBPAGE: https://a.example/about ===")
    assert len(lines[sub_index + 1]) == SUBPAGE_TEXT_LIMIT


def test_empty_site_digest_is_empty():
    assert build_content_summary(Site()) == ""


def test_summary_is_deterministic(sample_site):
    assert build_content_summary(sample_site) == build_content_summary(sample_site)


def test_analyze_site_uses_strongest_signals(sample_site):
    result = analyze_site("https://smithjones.example/", sample_site)

    assert (result.metro.city, result.metro.state) == ("Houston", "TX")
    assert result.metro.confidence is Confidence.HIGH
    assert result.metro.source == "address"
    data = result.to_dict()
    assert data["scraped_pages_count"] == 2
    assert data["scraping_errors"] == []
    assert data["detected_metro"]["confidence"] == "high"


def test_analyze_site_without_pages_degrades_to_unknown():
    site = Site(errors=("Failed to fetch homepage: https://down.example",))
    result = analyze_site("https://down.example", site)

    assert result.digest == ""
    assert result.metro.city == "Unknown"
    assert result.metro.source == "none"
    assert result.to_dict()["scraping_errors"] == ["Failed to fetch homepage: https://down.example"]
