"""Tests for relative image path rewriting."""

from __future__ import annotations

import pytest

from build_notes_site import rewrite_img_src


@pytest.mark.parametrize(
    "src",
    [
        "https://example.com/x.png",
        "http://example.com/x.png",
        "//cdn.example.com/x.png",
        "HTTPS://EXAMPLE.COM/X.PNG",
        "data:image/png;base64,iVBORw0KGgo=",
        "/abs/pic.png",
    ],
)
def test_non_relative_sources_are_untouched(src: str) -> None:
    html = f'<p><img alt="x" src="{src}" /></p>'

    assert rewrite_img_src(html) == html


@pytest.mark.parametrize(
    "src, expected",
    [
        ("./sub/pic.png", "../images/sub/pic.png"),
        ("pic.png", "../images/pic.png"),
        ("../pic.png", "../images/pic.png"),
        ("./../pic.png", "../images/pic.png"),
        ("assets/deep/nested/pic.png", "../images/assets/deep/nested/pic.png"),
    ],
)
def test_relative_sources_point_into_images(src: str, expected: str) -> None:
    result = rewrite_img_src(f'<img src="{src}" alt="figure">')

    assert result == f'<img src="{expected}" alt="figure">'


def test_only_one_parent_level_is_stripped() -> None:
    result = rewrite_img_src('<img src="../../shared/pic.png">')

    assert result == '<img src="../images/../shared/pic.png">'


def test_single_quotes_and_uppercase_tags() -> None:
    result = rewrite_img_src("<IMG class='wide' SRC='fig.svg'>")

    assert result == "<IMG class='wide' SRC='../images/fig.svg'>"


def test_alt_text_matching_source_is_left_alone() -> None:
    result = rewrite_img_src('<img alt="fig1.png" src="fig1.png" />')

    assert result == '<img alt="fig1.png" src="../images/fig1.png" />'


def test_every_image_in_a_block_is_rewritten() -> None:
    html = (
        '<p><img src="./a.png"></p>'
        '<p><img src="https://example.com/b.png"></p>'
        '<p><img src="c/d.png"></p>'
    )

    result = rewrite_img_src(html)

    assert 'src="../images/a.png"' in result
    assert 'src="https://example.com/b.png"' in result
    assert 'src="../images/c/d.png"' in result


def test_text_without_images_is_unchanged() -> None:
    html = "<p>src=\"./a.png\" is not a tag</p>"

    assert rewrite_img_src(html) == html
