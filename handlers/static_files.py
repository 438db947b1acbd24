"""Static file request handling: routing from request bytes to a response."""

from __future__ import annotations

import logging
from pathlib import Path

from directory_listing import render_directory_listing
from error_pages import resolve_error_page
from request import HTTPRequestParseError, RequestLine
from response import HTTPResponse, build_response
from server_config import ServerConfig
from utils import DirectoryTarget, FileTarget, ForbiddenTarget, get_content_type, resolve_target

logger = logging.getLogger(__name__)


def handle_request(raw: bytes, config: ServerConfig) -> HTTPResponse:
    """Turn raw request bytes into the response for one exchange.

    Filesystem errors raised while reading a file or listing a directory
    propagate to the caller.
    """
    try:
        request_line = RequestLine.from_bytes(raw)
    except HTTPRequestParseError as exc:
        logger.debug("Rejected request line: %s", exc)
        return error_response(config, exc.status_code)

    target = resolve_target(config.root_dir, request_line.raw_path)
    if isinstance(target, ForbiddenTarget):
        return error_response(config, 403, head_only=request_line.is_head)

    if isinstance(target, DirectoryTarget):
        body = render_directory_listing(target.path, target.relative_path)
        return build_response(200, body, "text/html", head_only=request_line.is_head)

    if isinstance(target, FileTarget):
        if not config.is_allowed(target.path) or not _is_regular_file(target.path):
            return error_response(config, 404, head_only=request_line.is_head)
        return serve_file(target.path, config, head_only=request_line.is_head)

    raise TypeError(f"Unexpected resolved target: {target!r}")


def _is_regular_file(path: Path) -> bool:
    # Names the filesystem rejects (ENAMETOOLONG and the like) cannot exist.
    try:
        return path.is_file()
    except OSError:
        return False


def serve_file(path: Path, config: ServerConfig, *, head_only: bool = False) -> HTTPResponse:
    content_type = get_content_type(path)
    attachment = config.is_downloadable(path)
    if head_only:
        response = build_response(200, None, content_type, attachment=attachment)
        response.content_length_override = path.stat().st_size
        return response
    return build_response(200, path.read_bytes(), content_type, attachment=attachment)


def error_response(config: ServerConfig, status_code: int, *, head_only: bool = False) -> HTTPResponse:
    body, content_type = resolve_error_page(config.root_dir, status_code)
    return build_response(status_code, body, content_type, head_only=head_only)
