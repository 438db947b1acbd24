"""Unit tests for custom and generated error pages."""

from pathlib import Path

from error_pages import resolve_error_page


def test_custom_error_page_is_returned_verbatim(tmp_path: Path) -> None:
    pages = tmp_path / "errorpages"
    pages.mkdir()
    (pages / "404.html").write_bytes(b"<p>custom missing page</p>")

    body, content_type = resolve_error_page(tmp_path, 404)

    assert body == b"<p>custom missing page</p>"
    assert content_type == "text/html"


def test_missing_custom_page_is_synthesized(tmp_path: Path) -> None:
    body, content_type = resolve_error_page(tmp_path, 403)

    assert content_type == "text/html"
    assert b"403" in body
    assert b"Forbidden" in body


def test_custom_page_for_other_status_does_not_leak(tmp_path: Path) -> None:
    pages = tmp_path / "errorpages"
    pages.mkdir()
    (pages / "404.html").write_text("custom 404")

    body, _content_type = resolve_error_page(tmp_path, 405)

    assert b"405" in body
    assert b"custom 404" not in body


def test_missing_root_directory_still_yields_page(tmp_path: Path) -> None:
    body, content_type = resolve_error_page(tmp_path / "missing", 400)

    assert b"400" in body
    assert content_type == "text/html"
