"""
Convert a Word (.docx) file to an HTML fragment using mammoth.

Usage:
  python docx_to_html.py "notes/MATH_algebra.docx" > algebra.html

mammoth maps Word styles onto plain semantic HTML: headings, paragraphs,
bold/italic, (nested) lists, tables with header rows, hyperlinks, and
embedded images as data: URIs. Legacy binary .doc files are not zip
packages and raise.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import mammoth

logger = logging.getLogger("notes_site.docx")


def docx_to_html(input_path: Path) -> str:
    """Load a DOCX file and return its body as an HTML fragment."""
    with open(input_path, "rb") as docx_file:
        result = mammoth.convert_to_html(docx_file)
    for message in result.messages:
        logger.debug("%s: %s", Path(input_path).name, message)
    return result.value


class DocxConverter:
    """Document converter backed by mammoth."""

    available = True

    def convert(self, path: Path) -> str:
        return docx_to_html(path)


def main() -> None:
    parser = argparse.ArgumentParser(description="Convert a DOCX file to an HTML fragment.")
    parser.add_argument("input", type=Path, help="Path to the .docx file")
    args = parser.parse_args()

    if not args.input.exists():
        raise FileNotFoundError(f"Input file not found: {args.input}")

    print(docx_to_html(args.input))


if __name__ == "__main__":
    main()
