"""Tests for the landing page."""

from __future__ import annotations

from datetime import datetime

from build_notes_site import IndexEntry, build_index_html
from notes_theme import HtmlTheme, SiteConfig

GENERATED_AT = datetime(2024, 3, 5, 14, 30, 0)


def _entries() -> list:
    return [
        IndexEntry("MATH", "algebra basics", "Intro to algebra", "notes/MATH_algebra-basics.html"),
        IndexEntry("PHYS", "waves", "PDF note", "notes/PHYS_waves.html"),
        IndexEntry("MATH", "calculus", "Word document", "notes/MATH_calculus.html"),
    ]


def test_chips_follow_first_seen_subject_order() -> None:
    page = build_index_html(_entries(), HtmlTheme(year=2024), GENERATED_AT)

    all_chip = page.index('<button class="chip active" data-subject="">All</button>')
    math_chip = page.index('<button class="chip" data-subject="math">MATH</button>')
    phys_chip = page.index('<button class="chip" data-subject="phys">PHYS</button>')
    assert all_chip < math_chip < phys_chip
    assert page.count('data-subject="math">MATH</button>') == 1


def test_one_card_per_entry_in_entry_order() -> None:
    page = build_index_html(_entries(), HtmlTheme(year=2024), GENERATED_AT)

    assert page.count('class="note-card"') == 3
    assert page.index("<h3>algebra basics</h3>") < page.index("<h3>waves</h3>") < page.index("<h3>calculus</h3>")
    assert '<span class="subject-badge">MATH</span>' in page
    assert '<a class="btn view-btn" href="notes/PHYS_waves.html">View Notes</a>' in page
    assert 'data-subject="math" data-title="algebra basics"' in page


def test_stats_and_dates() -> None:
    page = build_index_html(_entries(), HtmlTheme(year=2024), GENERATED_AT)

    assert '<div class="stat-number">3</div><div class="stat-label">Total Notes</div>' in page
    assert '<div class="stat-number">2</div><div class="stat-label">Subjects</div>' in page
    assert '<div class="stat-label">05/03/2024</div>' in page
    assert "Last updated: 05/03/2024, 14:30:00" in page
    assert "&copy; 2024" in page


def test_text_and_attributes_are_escaped() -> None:
    entries = [IndexEntry("R&D", 'tips <b> "quoted"', "a < b", "notes/x.html")]

    page = build_index_html(entries, HtmlTheme(year=2024), GENERATED_AT)

    assert "<h3>tips &lt;b&gt; &quot;quoted&quot;</h3>" in page
    assert 'data-title="tips &lt;b&gt; &quot;quoted&quot;"' in page
    assert '<span class="subject-badge">R&amp;D</span>' in page
    assert '<p class="note-description">a &lt; b</p>' in page


def test_search_and_filter_script_is_embedded() -> None:
    page = build_index_html([], HtmlTheme(year=2024), GENERATED_AT)

    assert '<input id="search-bar"' in page
    assert "s.includes(q) || t.includes(q)" in page
    assert "!activeSubject || s === activeSubject" in page
    assert '<div class="stat-number">0</div><div class="stat-label">Total Notes</div>' in page


def test_site_config_wording() -> None:
    theme = HtmlTheme(SiteConfig(site_name="Physics Club", subtitle="Lab notes"), year=2024)

    page = build_index_html(_entries(), theme, GENERATED_AT)

    assert "<title>Physics Club</title>" in page
    assert '<p class="subtitle">Lab notes</p>' in page


def test_stylesheets_are_named_for_pages() -> None:
    sheets = HtmlTheme(year=2024).stylesheets()

    assert set(sheets) == {"style.css", "note-style.css"}
    assert ".note-card" in sheets["style.css"]
    assert ".note-content" in sheets["note-style.css"]
