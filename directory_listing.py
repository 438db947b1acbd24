"""HTML index pages for directories without an index.html."""

from __future__ import annotations

import html
import posixpath
from pathlib import Path
from urllib.parse import quote


def _href(relative_path: str, name: str = "") -> str:
    parts = [part for part in (relative_path, name) if part]
    return quote("/" + "/".join(parts))


def _link(href: str, label: str) -> str:
    return f'<li><a href="{html.escape(href, quote=True)}">{html.escape(label)}</a></li>'


def render_directory_listing(directory: Path, relative_path: str) -> bytes:
    """Render the immediate children of ``directory`` as an HTML page.

    ``relative_path`` is the directory's path below the server root in POSIX
    form, empty for the root itself.
    """
    directories: list[str] = []
    files: list[str] = []
    for entry in sorted(directory.iterdir(), key=lambda item: item.name):
        if entry.is_dir():
            directories.append(entry.name)
        else:
            files.append(entry.name)

    title = f"/{relative_path}" if relative_path else "/"
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        f'<head><meta charset="utf-8"><title>Index of {html.escape(title)}</title></head>',
        "<body>",
    ]

    if relative_path:
        lines.append(f"<h1>{html.escape(relative_path)}</h1>")
        parent = posixpath.dirname(relative_path)
        lines.append(f'<p><a href="{html.escape(_href(parent), quote=True)}">Parent directory</a></p>')

    lines.append("<h2>Directories</h2>")
    lines.append("<ul>")
    lines.extend(_link(_href(relative_path, name), name + "/") for name in directories)
    lines.append("</ul>")

    lines.append("<h2>Files</h2>")
    if files:
        lines.append("<ul>")
        lines.extend(_link(_href(relative_path, name), name) for name in files)
        lines.append("</ul>")
    else:
        lines.append("<p>No files in this directory.</p>")

    lines.extend(["</body>", "</html>", ""])
    return "\n".join(lines).encode("utf-8")
