"""Unit tests for generated directory index pages."""

import re
from pathlib import Path

from directory_listing import render_directory_listing


def _hrefs(page: bytes) -> list[str]:
    return re.findall(r'href="([^"]+)"', page.decode("utf-8"))


def test_root_listing_has_no_heading_or_parent_link(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    (tmp_path / "a.txt").write_text("a")

    page = render_directory_listing(tmp_path, "")

    assert b"<h1>" not in page
    assert b"Parent directory" not in page
    assert _hrefs(page) == ["/sub", "/a.txt"]


def test_nested_listing_links_children_and_parent(tmp_path: Path) -> None:
    nested = tmp_path / "docs" / "guides"
    nested.mkdir(parents=True)
    (nested / "intro.html").write_text("intro")
    (nested / "zeta.txt").write_text("z")
    (nested / "images").mkdir()

    page = render_directory_listing(nested, "docs/guides")

    assert b"<h1>docs/guides</h1>" in page
    assert _hrefs(page) == [
        "/docs",
        "/docs/guides/images",
        "/docs/guides/intro.html",
        "/docs/guides/zeta.txt",
    ]


def test_first_level_parent_points_at_root(tmp_path: Path) -> None:
    page = render_directory_listing(tmp_path, "docs")

    assert _hrefs(page) == ["/"]


def test_empty_file_section_shows_placeholder(tmp_path: Path) -> None:
    (tmp_path / "only-dir").mkdir()

    page = render_directory_listing(tmp_path, "")

    assert b"No files in this directory." in page
    assert b"<h2>Directories</h2>" in page


def test_names_are_escaped_and_quoted(tmp_path: Path) -> None:
    (tmp_path / "a <b>&c.txt").write_text("x")

    page = render_directory_listing(tmp_path, "")

    assert b"a &lt;b&gt;&amp;c.txt" in page
    assert _hrefs(page) == ["/a%20%3Cb%3E%26c.txt"]


def test_listing_does_not_recurse(tmp_path: Path) -> None:
    deep = tmp_path / "outer" / "inner"
    deep.mkdir(parents=True)
    (deep / "hidden.txt").write_text("x")

    page = render_directory_listing(tmp_path, "")

    assert b"hidden.txt" not in page
    assert b"inner" not in page
