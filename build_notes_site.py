#!/usr/bin/env python3
"""
Static site generator for a folder of study notes.

Features:
- Converts every markdown note in the content folder to notes/<name>.html
- Word documents (.docx/.doc) are copied to docs/ and rendered to HTML when a
  converter is available, otherwise the page offers a download link
- PDFs are copied to pdfs/ and shown in an embedded viewer page
- Images anywhere in the tree are copied to images/, keeping their sub-paths;
  relative <img> sources in notes are rewritten to point there
- index.html lists every note as a card with search and subject filter chips

Filenames carry the metadata: "MATH_algebra-basics.md" is subject MATH,
title "algebra basics". Files without an underscore land under GENERAL.

Usage:
  python build_notes_site.py --input ./content --output ./dist
  python build_notes_site.py --input . --workers 4 --verbose

Notes:
- Requires the "markdown" package: pip install markdown
- DOCX conversion uses mammoth (pip install mammoth); without it
  documents are published as download-only pages
"""

from __future__ import annotations

import argparse
import html
import logging
import os
import re
import shutil
import xml.etree.ElementTree as etree
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from functools import partial
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Set, Union
from urllib.parse import quote

from notes_theme import HtmlTheme, PageTheme, SiteConfig


# -- markdown conversion (simple) --
try:
    import markdown  # type: ignore
    from markdown.extensions import Extension
    from markdown.inlinepatterns import AUTOMAIL_RE, AutomailInlineProcessor
    from markdown.util import AtomicString
except ImportError as exc:  # minimal helpful error
    raise SystemExit(
        "Missing dependency: markdown. Install with 'pip install markdown'"
    ) from exc


# -- constants --
EXCLUDED_FILES = {
    "README.md",
    "SETUP_INSTRUCTIONS.md",
    "IMPLEMENTATION_COMPLETE.md",
    "QUICK_START.md",
    "DEPLOYMENT_FIX.md",
}
EXCLUDED_DIRS = {".git", "dist", "node_modules", ".github", "scripts"}

MARKDOWN_EXTS = {".md"}
PDF_EXTS = {".pdf"}
DOCUMENT_EXTS = {".docx", ".doc"}
IMAGE_EXTS = {".jpg", ".jpeg", ".png", ".gif", ".svg", ".webp", ".bmp"}

NOTES_DIR = "notes"
PDF_DIR = "pdfs"
IMAGES_DIR = "images"
DOCS_DIR = "docs"

DESCRIPTION_LIMIT = 160
DEFAULT_SUBJECT = "GENERAL"

MARKDOWN, PDF, DOCUMENT, IMAGE = "markdown", "pdf", "document", "image"


# -- logging --
_LOGGER_NAME = "notes_site"
logger = logging.getLogger(_LOGGER_NAME)


def configure_logging(*, verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """Configure the notes_site logger with console output and optional file sink."""
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated main() calls do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[notes-site] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(file_handler)

    return logger


class SiteBuildError(RuntimeError):
    """Raised when the build cannot run at all (bad input root, unwritable output)."""


# -- data structures --
@dataclass(frozen=True)
class SourceFile:
    """A file discovered under the content root."""

    path: Path
    rel_path: str
    kind: str

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class Metadata:
    subject: str
    title: str
    base: str


@dataclass(frozen=True)
class IndexEntry:
    """One card on the landing page."""

    subject: str
    title: str
    description: str
    link: str


@dataclass(frozen=True)
class RenderSuccess:
    entry: IndexEntry


@dataclass(frozen=True)
class RenderFailure:
    filename: str
    message: str

    def __str__(self) -> str:
        return f"{self.filename}: {self.message}"


RenderResult = Union[RenderSuccess, RenderFailure]


@dataclass
class CollectedFiles:
    """Classified files from one walk of the content root, in walk order."""

    markdown: List[SourceFile] = field(default_factory=list)
    pdf: List[SourceFile] = field(default_factory=list)
    document: List[SourceFile] = field(default_factory=list)
    image: List[SourceFile] = field(default_factory=list)

    def notes(self, recursive: bool = False) -> List[SourceFile]:
        """Files that become note pages: markdown, then documents, then PDFs."""
        ordered = [*self.markdown, *self.document, *self.pdf]
        if recursive:
            return ordered
        return [f for f in ordered if "/" not in f.rel_path]


@dataclass
class BuildResult:
    output_root: Path
    entries: List[IndexEntry] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.entries)


# -- document converters --
class DocumentConverter(Protocol):
    available: bool

    def convert(self, path: Path) -> str: ...


class UnavailableConverter:
    """Stand-in used when no document converter can be loaded."""

    available = False

    def convert(self, path: Path) -> str:
        raise RuntimeError("no document converter available")


def select_document_converter(enabled: bool = True) -> DocumentConverter:
    """Pick the document converter once, at startup."""
    if not enabled:
        return UnavailableConverter()
    try:
        from docx_to_html import DocxConverter
    except ImportError:
        logger.info("mammoth not installed; Word documents will be download-only")
        return UnavailableConverter()
    return DocxConverter()


# -- metadata from filenames --
def parse_meta(filename: str) -> Metadata:
    """Derive subject, title and base name from a filename like 'MATH_algebra-basics.md'.

    The subject is the part before the first underscore; a name without one
    (or starting with one) is filed under GENERAL and titled by its whole stem.
    """
    base = Path(filename).stem
    parts = base.split("_")
    subject = parts[0].upper() if len(parts) > 1 and parts[0] else DEFAULT_SUBJECT
    title = " ".join(parts[1:]).replace("-", " ").strip()
    if not title:
        title = base.replace("-", " ").replace(",", " ").strip()
    return Metadata(subject=subject, title=title, base=base)


# -- image path rewriting --
_IMG_TAG_RE = re.compile(r"""<img\s+[^>]*src=["']([^"']+)["'][^>]*>""", re.IGNORECASE)
_EXTERNAL_SRC_RE = re.compile(r"^(https?:)?//", re.IGNORECASE)


def rewrite_img_src(content_html: str) -> str:
    """Point relative <img> sources at ../images/<original-relative-path>.

    External, data: and root-absolute sources are kept. One leading './' and
    then one leading '../' are stripped; deeper '../../' paths keep the rest.
    """

    def _repl(match: re.Match[str]) -> str:
        tag, src = match.group(0), match.group(1)
        if _EXTERNAL_SRC_RE.match(src) or src.startswith("data:") or src.startswith("/"):
            return tag
        normalized = re.sub(r"^\./", "", src)
        normalized = re.sub(r"^\.\./", "", normalized)
        start, end = match.start(1) - match.start(0), match.end(1) - match.start(0)
        return f"{tag[:start]}../{IMAGES_DIR}/{normalized}{tag[end:]}"

    return _IMG_TAG_RE.sub(_repl, content_html)


# -- helpers: scanning --
def classify(path: Path) -> Optional[str]:
    suffix = path.suffix.lower()
    if suffix in MARKDOWN_EXTS:
        return MARKDOWN
    if suffix in PDF_EXTS:
        return PDF
    if suffix in DOCUMENT_EXTS:
        return DOCUMENT
    if suffix in IMAGE_EXTS:
        return IMAGE
    return None


def iter_content_files(
    input_root: Path, excluded_dirs: Set[str], excluded_paths: Iterable[Path] = ()
) -> Iterable[SourceFile]:
    """Walk input_root (sorted, so output is stable) and yield classified files.

    excluded_dirs are folder names skipped at any depth; excluded_paths are
    specific folders (e.g. the output tree) skipped only where they are.
    """
    skipped = set(excluded_paths)
    for dirpath, dirnames, filenames in os.walk(input_root):
        current_dir = Path(dirpath)
        dirnames[:] = sorted(
            d for d in dirnames if d not in excluded_dirs and current_dir / d not in skipped
        )
        at_root = current_dir == input_root

        for fname in sorted(filenames):
            if at_root and fname in EXCLUDED_FILES:
                continue
            fpath = current_dir / fname
            kind = classify(fpath)
            if kind is None:
                continue
            rel = fpath.relative_to(input_root).as_posix()
            yield SourceFile(path=fpath, rel_path=rel, kind=kind)


def collect_files(
    input_root: Path, extra_excluded_dirs: Iterable[str] = (), excluded_paths: Iterable[Path] = ()
) -> CollectedFiles:
    """Scan input_root recursively and bucket files by kind."""
    excluded = EXCLUDED_DIRS | set(extra_excluded_dirs)
    collected = CollectedFiles()
    for source in iter_content_files(input_root, excluded, excluded_paths):
        getattr(collected, source.kind).append(source)
    logger.debug(
        "Collected %d markdown, %d pdf, %d document, %d image file(s)",
        len(collected.markdown), len(collected.pdf), len(collected.document), len(collected.image),
    )
    return collected


# -- output --
class OutputWriter:
    """Owns the output tree: creates directories and writes every artifact."""

    def __init__(self, output_root: Path):
        self.root = output_root
        self.notes_dir = output_root / NOTES_DIR
        self.pdf_dir = output_root / PDF_DIR
        self.images_dir = output_root / IMAGES_DIR
        self.docs_dir = output_root / DOCS_DIR

    def clean(self) -> None:
        if self.root.exists():
            shutil.rmtree(self.root)

    def prepare(self) -> None:
        for directory in (self.root, self.notes_dir, self.pdf_dir, self.images_dir, self.docs_dir):
            directory.mkdir(parents=True, exist_ok=True)

    def write_page(self, base: str, page_html: str) -> str:
        """Write notes/<base>.html and return its link relative to the site root."""
        (self.notes_dir / f"{base}.html").write_text(page_html, encoding="utf-8")
        return f"{NOTES_DIR}/{quote(base)}.html"

    def copy_pdf(self, source: SourceFile) -> str:
        shutil.copy2(source.path, self.pdf_dir / source.name)
        return f"../{PDF_DIR}/{quote(source.name)}"

    def copy_document(self, source: SourceFile) -> str:
        shutil.copy2(source.path, self.docs_dir / source.name)
        return f"../{DOCS_DIR}/{quote(source.name)}"

    def copy_image(self, source: SourceFile) -> Path:
        target = self.images_dir / source.rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source.path, target)
        return target

    def write_index(self, index_html: str) -> None:
        (self.root / "index.html").write_text(index_html, encoding="utf-8")

    def write_stylesheets(self, sheets: Dict[str, str]) -> None:
        for name, css in sheets.items():
            (self.root / name).write_text(css, encoding="utf-8")


# -- renderers --
class PlainAutomailInlineProcessor(AutomailInlineProcessor):
    """<user@example.com> → a plain mailto: link, without entity obfuscation."""

    def handleMatch(self, m, data):  # type: ignore[override]
        address = self.unescape(m.group(1))
        if address.startswith("mailto:"):
            address = address[len("mailto:"):]
        el = etree.Element("a")
        el.set("href", f"mailto:{address}")
        el.text = AtomicString(address)
        return el, m.start(0), m.end(0)


class PlainAutomailExtension(Extension):
    def extendMarkdown(self, md):
        # same name and priority as the built-in pattern, which it replaces
        md.inlinePatterns.register(PlainAutomailInlineProcessor(AUTOMAIL_RE, md), "automail", 110)


def convert_markdown_to_html(md_text: str) -> str:
    """Convert markdown to HTML; 'toc' adds id anchors to headings, e-mail links stay readable."""
    md = markdown.Markdown(extensions=["extra", "fenced_code", "tables", "toc", PlainAutomailExtension()])
    return md.convert(md_text)


_MARKUP_CHARS_RE = re.compile(r"[#*`\[\]>]")
_WHITESPACE_RE = re.compile(r"\s+")


def describe_markdown(md_text: str, limit: int = DESCRIPTION_LIMIT) -> str:
    """Plain-text preview of a note for its index card."""
    plain = _WHITESPACE_RE.sub(" ", _MARKUP_CHARS_RE.sub(" ", md_text)).strip()
    if len(plain) > limit:
        return plain[:limit] + "…"
    return plain


def render_markdown(source: SourceFile, writer: OutputWriter, theme: PageTheme) -> IndexEntry:
    md_text = source.path.read_text(encoding="utf-8")
    meta = parse_meta(source.name)
    content_html = rewrite_img_src(convert_markdown_to_html(md_text))
    link = writer.write_page(meta.base, theme.render_note(meta.title, meta.subject, content_html))
    return IndexEntry(meta.subject, meta.title, describe_markdown(md_text), link)


def render_document(
    source: SourceFile, writer: OutputWriter, theme: PageTheme, converter: DocumentConverter
) -> IndexEntry:
    meta = parse_meta(source.name)
    download_href = writer.copy_document(source)
    content_html = (
        f'<p><a class="btn view-btn" href="{html.escape(download_href)}" download>⬇️ Download DOCX</a></p>'
    )
    if converter.available:
        content_html = converter.convert(source.path) or content_html
    page_html = theme.render_note(f"{meta.title} (DOCX)", meta.subject, rewrite_img_src(content_html))
    link = writer.write_page(meta.base, page_html)
    return IndexEntry(meta.subject, meta.title, "Word document", link)


def render_pdf(source: SourceFile, writer: OutputWriter, theme: PageTheme) -> IndexEntry:
    meta = parse_meta(source.name)
    pdf_href = writer.copy_pdf(source)
    link = writer.write_page(meta.base, theme.render_pdf_viewer(meta.title, meta.subject, pdf_href))
    return IndexEntry(meta.subject, meta.title, "PDF note", link)


def render_source(
    source: SourceFile, writer: OutputWriter, theme: PageTheme, converter: DocumentConverter
) -> RenderResult:
    """Render one note file; any failure is returned, never raised."""
    try:
        if source.kind == MARKDOWN:
            entry = render_markdown(source, writer, theme)
        elif source.kind == DOCUMENT:
            entry = render_document(source, writer, theme, converter)
        elif source.kind == PDF:
            entry = render_pdf(source, writer, theme)
        else:
            raise ValueError(f"not a note file: {source.kind}")
    except Exception as exc:
        failure = RenderFailure(source.rel_path, str(exc) or exc.__class__.__name__)
        logger.warning("Skipping %s", failure)
        return failure
    logger.debug("Rendered %s -> %s", source.rel_path, entry.link)
    return RenderSuccess(entry)


def copy_images(images: Sequence[SourceFile], writer: OutputWriter) -> List[str]:
    """Copy images into the output tree; returns error lines for failed copies."""
    errors: List[str] = []
    for image in images:
        try:
            writer.copy_image(image)
        except OSError as exc:
            message = f"{image.rel_path}: {exc}"
            logger.warning("Skipping %s", message)
            errors.append(message)
    return errors


def render_all(sources: Sequence[SourceFile], job, workers: int = 1) -> List[RenderResult]:
    """Run job over sources, in a thread pool when workers > 1; order is kept."""
    if workers <= 1 or len(sources) <= 1:
        return [job(source) for source in sources]
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(job, sources))


# -- index --
def build_index_html(entries: Sequence[IndexEntry], theme: PageTheme, generated_at: datetime) -> str:
    """Landing page: subjects in first-seen order, cards in entry order."""
    subjects = list(dict.fromkeys(entry.subject for entry in entries))
    return theme.render_index(entries, subjects, generated_at)


# -- build --
def build_site(
    input_root: Path,
    output_root: Path,
    *,
    site_config: Optional[SiteConfig] = None,
    converter: Optional[DocumentConverter] = None,
    workers: int = 1,
    recursive_notes: bool = False,
    clean: bool = False,
    generated_at: Optional[datetime] = None,
) -> BuildResult:
    """Run one full build of input_root into output_root."""
    input_root = Path(input_root).expanduser().resolve()
    output_root = Path(output_root).expanduser().resolve()
    if not input_root.exists() or not input_root.is_dir():
        raise SiteBuildError(f"Input directory not found: {input_root}")
    if output_root == input_root:
        raise SiteBuildError(f"Output directory must differ from the input directory: {output_root}")

    generated_at = generated_at or datetime.now()
    converter = converter or UnavailableConverter()
    theme = HtmlTheme(site_config, year=generated_at.year)
    writer = OutputWriter(output_root)

    if clean:
        if input_root.is_relative_to(output_root):
            raise SiteBuildError(f"Refusing to clean {output_root}: it contains the input directory")
        writer.clean()
    try:
        writer.prepare()
    except OSError as exc:
        raise SiteBuildError(f"Cannot create output directory {output_root}: {exc}") from exc

    # the output may live inside the content tree; never read it back in
    collected = collect_files(input_root, excluded_paths=[output_root])

    # copy images first so notes can reference them
    errors = copy_images(collected.image, writer)

    notes = collected.notes(recursive=recursive_notes)
    job = partial(render_source, writer=writer, theme=theme, converter=converter)
    results = render_all(notes, job, workers=workers)

    entries = [r.entry for r in results if isinstance(r, RenderSuccess)]
    errors.extend(str(r) for r in results if isinstance(r, RenderFailure))

    writer.write_index(build_index_html(entries, theme, generated_at))
    writer.write_stylesheets(theme.stylesheets())

    return BuildResult(output_root=output_root, entries=entries, errors=errors)


def report(result: BuildResult) -> None:
    print(f"✅ Generated {result.page_count} note page(s)")
    print(f"📦 Output: {result.output_root}")
    if result.errors:
        print("⚠️ Skipped files:")
        for error in result.errors:
            print(f" - {error}")


# -- CLI --
def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate the Notes Hub static site from a folder of notes.")
    parser.add_argument(
        "--input",
        type=Path,
        default=Path("."),
        help="Content folder with markdown, PDF and Word notes (default: current directory)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("./dist"),
        help="Output folder for generated site (default: ./dist)",
    )
    parser.add_argument("--title", type=str, default=None, help="Site name shown in the header")
    parser.add_argument("--subtitle", type=str, default=None, help="Subtitle shown under the site name")
    parser.add_argument("--workers", type=int, default=1, help="Render notes with this many threads (default: 1)")
    parser.add_argument(
        "--recursive-notes",
        action="store_true",
        help="Also render notes found in subfolders (default: content root only)",
    )
    parser.add_argument(
        "--no-convert-docs",
        action="store_true",
        help="Publish Word documents as download-only pages",
    )
    parser.add_argument("--clean", action="store_true", help="Remove the output folder before building")
    parser.add_argument("--verbose", action="store_true", help="Log every processed file")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        configure_logging(verbose=args.verbose, log_file=args.log_file)
    except OSError as exc:
        # the console handler is installed before the file handler
        logger.error("Build failed: cannot open log file %s: %s", args.log_file, exc)
        return 1

    defaults = SiteConfig()
    site_config = SiteConfig(
        site_name=args.title or defaults.site_name,
        subtitle=args.subtitle or defaults.subtitle,
        about_text=defaults.about_text,
        footer_owner=args.title or defaults.footer_owner,
    )
    converter = select_document_converter(enabled=not args.no_convert_docs)

    try:
        result = build_site(
            args.input,
            args.output,
            site_config=site_config,
            converter=converter,
            workers=args.workers,
            recursive_notes=args.recursive_notes,
            clean=args.clean,
        )
    except Exception as exc:
        logger.error("Build failed: %s", exc)
        logger.debug("Build failure details", exc_info=True)
        return 1

    report(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
