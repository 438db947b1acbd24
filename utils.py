"""Content-type lookup and sandboxed path resolution."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from urllib.parse import unquote

from config import INDEX_FILE_NAME

DEFAULT_CONTENT_TYPE: str = "application/octet-stream"

CONTENT_TYPES = MappingProxyType(
    {
        ".html": "text/html",
        ".css": "text/css",
        ".js": "application/javascript",
        ".json": "application/json",
        ".xml": "application/xml",
        ".csv": "text/csv",
        ".txt": "text/plain",
        ".pdf": "application/pdf",
        ".png": "image/png",
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".gif": "image/gif",
        ".svg": "image/svg+xml",
        ".webp": "image/webp",
        ".ico": "image/x-icon",
        ".woff": "font/woff",
        ".woff2": "font/woff2",
        ".ttf": "font/ttf",
        ".otf": "font/otf",
        ".eot": "application/vnd.ms-fontobject",
        ".mp4": "video/mp4",
        ".webm": "video/webm",
        ".ogg": "audio/ogg",
        ".mp3": "audio/mpeg",
        ".zip": "application/zip",
        ".tar": "application/x-tar",
        ".rar": "application/vnd.rar",
        ".7z": "application/x-7z-compressed",
    }
)


def get_content_type(file_path: str | Path) -> str:
    suffix = Path(file_path).suffix.lower()
    return CONTENT_TYPES.get(suffix, DEFAULT_CONTENT_TYPE)


@dataclass(frozen=True, slots=True)
class FileTarget:
    path: Path


@dataclass(frozen=True, slots=True)
class DirectoryTarget:
    path: Path
    relative_path: str


@dataclass(frozen=True, slots=True)
class ForbiddenTarget:
    pass


ResolvedTarget = FileTarget | DirectoryTarget | ForbiddenTarget


def resolve_target(root_dir: str | Path, request_path: str) -> ResolvedTarget:
    """Map a request target onto the filesystem beneath root_dir.

    The containment check runs on the canonical (symlink and ``..`` resolved)
    form of both paths, segment by segment, so percent-encoded dot segments
    and sibling directories sharing a name prefix with the root are rejected.
    Existence and extension checks are left to the caller.
    """
    path_only = request_path.split("?", 1)[0].split("#", 1)[0]
    decoded_path = unquote(path_only)
    if "\x00" in decoded_path:
        return ForbiddenTarget()

    relative_part = decoded_path.removeprefix("/")
    root = Path(root_dir).resolve()
    candidate = (root / relative_part).resolve()

    try:
        relative = candidate.relative_to(root)
    except ValueError:
        return ForbiddenTarget()

    try:
        is_directory = candidate.is_dir()
    except OSError:
        return FileTarget(candidate)

    if is_directory:
        index_path = candidate / INDEX_FILE_NAME
        try:
            has_index = index_path.is_file()
        except OSError:
            has_index = False
        if has_index:
            return FileTarget(index_path)
        relative_posix = relative.as_posix()
        return DirectoryTarget(candidate, "" if relative_posix == "." else relative_posix)

    return FileTarget(candidate)
