from __future__ import annotations

import logging
from pathlib import Path

import pytest

import build_notes_site


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Empty content folder inside the pytest tmp_path."""
    root = tmp_path / "content"
    root.mkdir()
    return root


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    return tmp_path / "site"


@pytest.fixture
def writer(output_root: Path) -> build_notes_site.OutputWriter:
    out = build_notes_site.OutputWriter(output_root)
    out.prepare()
    return out


@pytest.fixture
def reset_logger():
    """Undo configure_logging() so handlers don't outlive a captured stream."""
    yield
    logger = logging.getLogger("notes_site")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
