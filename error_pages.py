"""Per-status error pages, custom from the server root or synthesized."""

from __future__ import annotations

import html
import logging
from pathlib import Path

from config import ERROR_PAGES_DIR
from response import REASON_PHRASES
from utils import get_content_type

logger = logging.getLogger(__name__)


def resolve_error_page(root_dir: str | Path, status_code: int) -> tuple[bytes, str]:
    """Return (body, content_type) for an error status.

    ``{root_dir}/errorpages/{status_code}.html`` wins when it exists. A missing
    page is the normal case and yields a generated one.
    """
    page_path = Path(root_dir) / ERROR_PAGES_DIR / f"{status_code}.html"
    if page_path.is_file():
        try:
            return page_path.read_bytes(), get_content_type(page_path)
        except OSError as exc:
            logger.warning("Cannot read custom error page %s: %s", page_path, exc)
    return synthesize_error_page(status_code), "text/html"


def synthesize_error_page(status_code: int) -> bytes:
    reason = html.escape(REASON_PHRASES.get(status_code, "Error"))
    title = f"{status_code} {reason}"
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        f"<head><meta charset=\"utf-8\"><title>{title}</title></head>\n"
        f"<body><h1>{title}</h1></body>\n"
        "</html>\n"
    ).encode("utf-8")
