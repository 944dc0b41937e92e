"""
HTML templates and stylesheets for the Notes Hub site.

Everything that turns already-computed content into markup lives here, so the
build pipeline only ever calls the three render_* methods of a theme:

- render_note(title, subject, body_html)    → a note/document page
- render_pdf_viewer(title, subject, pdf_href) → an embedded PDF viewer page
- render_index(cards, subjects, generated_at) → the landing page

Pages live one level below the site root (notes/*.html) and link back with
"../" paths; the landing page sits at the root.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Protocol, Sequence


@dataclass(frozen=True)
class SiteConfig:
    """Wording shown on every generated page."""

    site_name: str = "Student Initiative Group Notes Hub"
    subtitle: str = "IGNOU Study Notes & Resources"
    about_text: str = (
        "Notes are automatically updated when new content is added to the repository. "
        "Share with your friends and study together! 🎓"
    )
    footer_owner: str = "Student Initiative Group Notes Hub"


class Card(Protocol):
    """What a landing-page card shows; plain text, escaped on render."""

    @property
    def subject(self) -> str: ...

    @property
    def title(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def link(self) -> str: ...


class PageTheme(Protocol):
    """Anything that can lay out note pages and the landing page."""

    def render_note(self, title: str, subject: str, body_html: str) -> str: ...

    def render_pdf_viewer(self, title: str, subject: str, pdf_href: str) -> str: ...

    def render_index(self, cards: Sequence[Card], subjects: Sequence[str], generated_at: datetime) -> str: ...

    def stylesheets(self) -> Dict[str, str]: ...


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


class HtmlTheme:
    """Default theme: gradient header, card grid and subject chips."""

    def __init__(self, config: Optional[SiteConfig] = None, year: Optional[int] = None):
        self.config = config or SiteConfig()
        self.year = year if year is not None else datetime.now().year

    # -- shared fragments --
    def _footer(self, extra: str = "") -> str:
        owner = html.escape(self.config.footer_owner)
        return f"<footer><p>&copy; {self.year} {owner}</p>{extra}</footer>"

    def _note_shell(self, page_title: str, heading: str, subject: str, main_html: str, head_extra: str = "") -> str:
        return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8"/>
    <meta name="viewport" content="width=device-width, initial-scale=1"/>
    <title>{html.escape(page_title)}</title>
    <link rel="stylesheet" href="../note-style.css"/>{head_extra}
  </head>
  <body>
    <header>
      <div class="container">
        <a class="back-link" href="../index.html">← Back to Notes</a>
        <h1>{html.escape(heading)}</h1>
        <p class="subject-tag">{html.escape(subject)}</p>
      </div>
    </header>
    <main class="container">{main_html}</main>
    {self._footer()}
  </body>
</html>
"""

    # -- pages --
    def render_note(self, title: str, subject: str, body_html: str) -> str:
        """Wrap converted content in the note layout; body_html is trusted markup."""
        main_html = f'<article class="note-content">{body_html}</article>'
        return self._note_shell(f"{title} - Notes Hub", title, subject, main_html)

    def render_pdf_viewer(self, title: str, subject: str, pdf_href: str) -> str:
        href = _attr(pdf_href)
        main_html = (
            f'<div class="note-content">'
            f'<p><a class="btn view-btn" href="{href}" download>⬇️ Download PDF</a></p>'
            f'<iframe class="pdf-frame" src="{href}"></iframe>'
            f"</div>"
        )
        head_extra = (
            "\n    <style>.pdf-frame{width:100%;height:80vh;"
            "border:1px solid var(--border);border-radius:12px}</style>"
        )
        return self._note_shell(f"{title} - PDF Viewer", title, subject, main_html, head_extra)

    def render_index(self, cards: Sequence[Card], subjects: Sequence[str], generated_at: datetime) -> str:
        cfg = self.config
        chips = "".join(
            f'<button class="chip" data-subject="{_attr(s.lower())}">{html.escape(s)}</button>'
            for s in subjects
        )
        card_html = "".join(
            (
                f'<div class="note-card" data-subject="{_attr(c.subject.lower())}" data-title="{_attr(c.title.lower())}">'
                f'<div class="note-header"><span class="subject-badge">{html.escape(c.subject)}</span></div>'
                f"<h3>{html.escape(c.title)}</h3>"
                f'<p class="note-description">{html.escape(c.description)}</p>'
                f'<div class="note-footer"><a class="btn view-btn" href="{_attr(c.link)}">View Notes</a></div>'
                f"</div>"
            )
            for c in cards
        )
        updated_date = generated_at.strftime("%d/%m/%Y")
        updated_full = generated_at.strftime("%d/%m/%Y, %H:%M:%S")
        return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8"/>
    <meta name="viewport" content="width=device-width, initial-scale=1"/>
    <title>{html.escape(cfg.site_name)}</title>
    <link rel="stylesheet" href="style.css"/>
  </head>
  <body>
    <header>
      <div class="container">
        <div class="header-content">
          <h1>📚 {html.escape(cfg.site_name)}</h1>
          <p class="subtitle">{html.escape(cfg.subtitle)}</p>
        </div>
      </div>
    </header>
    <main class="container">
      <section class="search-section">
        <input id="search-bar" type="text" placeholder="🔍 Search notes by subject or topic..."/>
        <div id="subject-chips" class="chips"><button class="chip active" data-subject="">All</button>{chips}</div>
      </section>
      <section class="stats">
        <div class="stat-card"><div class="stat-number">{len(cards)}</div><div class="stat-label">Total Notes</div></div>
        <div class="stat-card"><div class="stat-number">{len(subjects)}</div><div class="stat-label">Subjects</div></div>
        <div class="stat-card"><div class="stat-number">Updated</div><div class="stat-label">{updated_date}</div></div>
      </section>
      <section class="notes-section">
        <h2>📖 Available Notes</h2>
        <div id="notes-grid" class="notes-grid">{card_html}</div>
      </section>
      <section class="about-section">
        <h2>About This Hub</h2>
        <p>{html.escape(cfg.about_text)}</p>
      </section>
    </main>
    {self._footer(f"<p>Last updated: {updated_full}</p>")}
    <script>{FILTER_SCRIPT}</script>
  </body>
</html>
"""

    def stylesheets(self) -> Dict[str, str]:
        return {"style.css": STYLE_CSS, "note-style.css": NOTE_STYLE_CSS}


# Client-side filtering: subject/title substring match AND exact chip subject.
FILTER_SCRIPT = """
(function () {
  const searchBar = document.getElementById('search-bar');
  const cards = Array.from(document.querySelectorAll('.note-card'));
  const chips = Array.from(document.querySelectorAll('.chip'));
  let activeSubject = '';

  function applyFilter() {
    const q = (searchBar.value || '').toLowerCase();
    cards.forEach(c => {
      const s = c.dataset.subject || '';
      const t = c.dataset.title || '';
      const subjectMatch = !activeSubject || s === activeSubject;
      const textMatch = s.includes(q) || t.includes(q);
      c.style.display = (subjectMatch && textMatch) ? 'block' : 'none';
    });
  }

  chips.forEach(ch => {
    ch.addEventListener('click', () => {
      chips.forEach(x => x.classList.remove('active'));
      ch.classList.add('active');
      activeSubject = ch.dataset.subject || '';
      applyFilter();
    });
  });

  searchBar.addEventListener('input', applyFilter);
})();
"""


STYLE_CSS = """:root {
  --primary: #2563eb;
  --primary-dark: #1e40af;
  --primary-light: #3b82f6;
  --secondary: #06b6d4;
  --accent: #8b5cf6;
  --bg: #f8fafc;
  --bg-secondary: #f1f5f9;
  --card: #ffffff;
  --text: #0f172a;
  --text-muted: #64748b;
  --border: #e2e8f0;
  --shadow: 0 1px 3px rgba(0,0,0,.12), 0 1px 2px rgba(0,0,0,.08);
  --shadow-lg: 0 10px 30px rgba(0,0,0,.12), 0 4px 8px rgba(0,0,0,.08);
  --shadow-xl: 0 20px 40px rgba(0,0,0,.15), 0 8px 16px rgba(0,0,0,.1);
  --transition: all .3s cubic-bezier(.4,0,.2,1);
}
* { margin: 0; padding: 0; box-sizing: border-box; }
body {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Roboto', 'Oxygen', 'Ubuntu', sans-serif;
  background: var(--bg);
  color: var(--text);
  line-height: 1.6;
}
.container { max-width: 1200px; margin: 0 auto; padding: 0 1rem; }
@media (min-width: 768px) { .container { padding: 0 2rem; } }
header {
  background: linear-gradient(135deg, var(--primary) 0%, var(--accent) 50%, var(--secondary) 100%);
  color: #fff;
  padding: 3rem 0;
  text-align: center;
  box-shadow: var(--shadow-xl);
}
.header-content h1 {
  font-size: clamp(1.5rem, 5vw, 2.5rem);
  margin-bottom: .5rem;
  font-weight: 800;
  text-shadow: 0 2px 4px rgba(0,0,0,.2);
}
.subtitle { font-size: clamp(.9rem, 3vw, 1.2rem); }
.search-section { margin: 2rem 0; }
#search-bar {
  width: 100%;
  padding: 1rem 1.5rem;
  border: 2px solid var(--border);
  border-radius: 50px;
  background: var(--card);
  box-shadow: var(--shadow);
}
#search-bar:focus { outline: none; border-color: var(--primary); box-shadow: 0 0 0 3px rgba(3,102,214,.1); }
.stats {
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(150px, 1fr));
  gap: 1rem;
  margin: 2rem 0;
}
.stat-card {
  background: linear-gradient(135deg, var(--card) 0%, var(--bg-secondary) 100%);
  padding: 1.5rem;
  border-radius: 16px;
  text-align: center;
  box-shadow: var(--shadow);
  border: 1px solid var(--border);
}
.stat-number {
  font-size: clamp(1.5rem, 4vw, 2rem);
  font-weight: 800;
  background: linear-gradient(135deg, var(--primary) 0%, var(--accent) 100%);
  -webkit-background-clip: text;
  -webkit-text-fill-color: transparent;
  margin-bottom: .5rem;
}
.stat-label { color: var(--text-muted); }
.notes-section { margin: 2rem 0; }
.notes-grid {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(min(100%, 280px), 1fr));
  gap: 1.25rem;
  margin-top: 2rem;
}
.note-card {
  background: var(--card);
  border: 1px solid var(--border);
  border-radius: 16px;
  padding: 1.5rem;
  box-shadow: var(--shadow);
  transition: var(--transition);
  display: flex;
  flex-direction: column;
  position: relative;
}
.note-card:hover { transform: translateY(-6px); box-shadow: var(--shadow-xl); border-color: var(--primary-light); }
.note-header { margin-bottom: .75rem; }
.subject-badge {
  display: inline-block;
  background: linear-gradient(135deg, var(--primary) 0%, var(--accent) 100%);
  color: #fff;
  padding: .4rem 1rem;
  border-radius: 24px;
  font-size: .75rem;
  font-weight: 700;
  text-transform: uppercase;
}
.note-card h3 { font-size: clamp(1.1rem, 3vw, 1.3rem); margin-bottom: .75rem; }
.note-description {
  color: var(--text-muted);
  font-size: clamp(.85rem, 2.5vw, .95rem);
  margin-bottom: 1rem;
  line-height: 1.5;
  display: -webkit-box;
  -webkit-line-clamp: 3;
  -webkit-box-orient: vertical;
  overflow: hidden;
}
.note-footer { display: flex; gap: .5rem; margin-top: auto; }
.btn {
  display: inline-block;
  padding: .75rem 1rem;
  border-radius: 8px;
  text-decoration: none;
  font-weight: 600;
  transition: all .3s ease;
  text-align: center;
  cursor: pointer;
  font-size: .9rem;
  white-space: nowrap;
}
.view-btn {
  background: linear-gradient(135deg, var(--primary) 0%, var(--primary-light) 100%);
  color: #fff;
  box-shadow: 0 4px 12px rgba(37,99,235,.3);
}
.view-btn:hover { background: linear-gradient(135deg, var(--primary-dark) 0%, var(--primary) 100%); }
.about-section {
  background: linear-gradient(135deg, var(--card) 0%, var(--bg-secondary) 100%);
  padding: 2rem;
  border-radius: 16px;
  box-shadow: var(--shadow);
  border: 1px solid var(--border);
}
footer {
  text-align: center;
  padding: 2rem 0;
  color: var(--text-muted);
  border-top: 1px solid var(--border);
  margin-top: 3rem;
}
@media (max-width: 768px) { .notes-grid { grid-template-columns: 1fr; } }
.chips { display: flex; flex-wrap: wrap; gap: .5rem; margin-top: 1rem; }
.chip {
  padding: .5rem .9rem;
  border-radius: 999px;
  border: 1px solid var(--border);
  background: var(--card);
  color: var(--text);
  font-weight: 600;
  cursor: pointer;
  box-shadow: var(--shadow);
  transition: var(--transition);
}
.chip:hover { border-color: var(--primary-light); transform: translateY(-2px); }
.chip.active {
  background: linear-gradient(135deg, var(--primary) 0%, var(--primary-light) 100%);
  color: #fff;
  border-color: transparent;
  box-shadow: var(--shadow-lg);
}
"""


NOTE_STYLE_CSS = """:root {
  --primary: #2563eb;
  --primary-dark: #1e40af;
  --primary-light: #3b82f6;
  --accent: #8b5cf6;
  --secondary: #06b6d4;
  --bg: #f8fafc;
  --bg-secondary: #f1f5f9;
  --card: #fff;
  --text: #0f172a;
  --text-muted: #64748b;
  --border: #e2e8f0;
  --code-bg: #f1f5f9;
  --shadow: 0 1px 3px rgba(0,0,0,.12), 0 1px 2px rgba(0,0,0,.08);
  --shadow-lg: 0 10px 30px rgba(0,0,0,.12), 0 4px 8px rgba(0,0,0,.08);
  --transition: all .3s cubic-bezier(.4,0,.2,1);
}
* { margin: 0; padding: 0; box-sizing: border-box; }
body {
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Roboto', 'Oxygen', 'Ubuntu', sans-serif;
  background: var(--bg);
  color: var(--text);
  line-height: 1.7;
}
.container { max-width: 900px; margin: 0 auto; padding: 0 1rem; }
@media (min-width: 768px) { .container { padding: 0 2rem; } }
header {
  background: linear-gradient(135deg, var(--primary) 0%, var(--accent) 50%, var(--secondary) 100%);
  color: #fff;
  padding: 2rem 0;
  box-shadow: var(--shadow-lg);
}
.back-link { color: #fff; text-decoration: none; margin-bottom: 1rem; font-weight: 700; }
.subject-tag { display: inline-block; background: rgba(255,255,255,.2); padding: .3rem 1rem; border-radius: 20px; }
.note-content {
  background: var(--card);
  padding: 2rem 1.5rem;
  border-radius: 12px;
  box-shadow: 0 1px 3px rgba(0,0,0,.1);
  border: 1px solid var(--border);
  overflow-x: hidden;
}
@media (min-width: 768px) { .note-content { padding: 3rem; } }
.note-content h1 { font-size: 2rem; margin: 2rem 0 1rem; border-bottom: 3px solid var(--primary); padding-bottom: .5rem; }
.note-content h2 { font-size: 1.6rem; margin: 1.5rem 0 1rem; }
.note-content h3 { font-size: 1.3rem; margin: 1.25rem 0 .75rem; }
.note-content p { margin-bottom: 1rem; }
.note-content ul, .note-content ol { margin: 1rem 0 1rem 2rem; }
.note-content code { background: var(--code-bg); padding: .2rem .4rem; border-radius: 4px; font-family: 'Courier New', monospace; }
.note-content pre {
  background: var(--code-bg);
  padding: 1rem;
  border-radius: 8px;
  overflow-x: auto;
  margin: 1rem 0;
  border: 1px solid var(--border);
}
.note-content table { width: 100%; border-collapse: collapse; margin: 1.5rem 0; display: block; overflow-x: auto; }
.note-content th, .note-content td { border: 1px solid var(--border); padding: .75rem; text-align: left; }
.note-content blockquote {
  border-left: 4px solid var(--primary);
  padding-left: 1rem;
  margin: 1rem 0;
  color: var(--text-muted);
  font-style: italic;
}
.note-content a { color: var(--primary); text-decoration: none; border-bottom: 2px solid transparent; font-weight: 600; }
.note-content a:hover { border-bottom-color: var(--primary); }
.note-content img {
  max-width: 100%;
  height: auto;
  border-radius: 12px;
  margin: 1.5rem auto;
  display: block;
  box-shadow: var(--shadow-lg);
  border: 1px solid var(--border);
}
footer {
  text-align: center;
  padding: 2rem 0;
  color: var(--text-muted);
  border-top: 1px solid var(--border);
  margin-top: 3rem;
}
"""
