"""Per-port server configuration and the JSON loader that produces it."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


class ConfigError(ValueError):
    """Raised when a configuration file is missing, unreadable or invalid."""


@dataclass(frozen=True, slots=True)
class ServerConfig:
    port: int
    root_dir: Path
    allowed_extensions: frozenset[str] = field(default_factory=frozenset)
    downloadable_extensions: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def create(
        cls,
        port: int,
        root_dir: str | Path,
        allowed_extensions: list[str] | tuple[str, ...] | frozenset[str] = (),
        downloadable_extensions: list[str] | tuple[str, ...] | frozenset[str] = (),
    ) -> "ServerConfig":
        """Build a config with extensions normalized to lower case."""
        return cls(
            port=port,
            root_dir=Path(root_dir),
            allowed_extensions=frozenset(ext.lower() for ext in allowed_extensions),
            downloadable_extensions=frozenset(ext.lower() for ext in downloadable_extensions),
        )

    def is_allowed(self, path: Path) -> bool:
        return path.suffix.lower() in self.allowed_extensions

    def is_downloadable(self, path: Path) -> bool:
        return path.suffix.lower() in self.downloadable_extensions


def load_config(config_path: str | Path) -> list[ServerConfig]:
    """Load and validate every server entry from a JSON configuration file."""
    path = Path(config_path)
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc

    try:
        document = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(document, dict):
        raise ConfigError("Configuration root must be a JSON object")

    servers = document.get("Servers")
    if not isinstance(servers, list) or not servers:
        raise ConfigError("'Servers' must be a non-empty list")

    base_dir = path.resolve().parent
    configs: list[ServerConfig] = []
    seen_ports: set[int] = set()
    for index, entry in enumerate(servers):
        server_config = _parse_server_entry(entry, index, base_dir)
        if server_config.port in seen_ports:
            raise ConfigError(f"Servers[{index}]: port {server_config.port} is configured twice")
        seen_ports.add(server_config.port)
        configs.append(server_config)
    return configs


def _parse_server_entry(entry: Any, index: int, base_dir: Path) -> ServerConfig:
    label = f"Servers[{index}]"
    if not isinstance(entry, dict):
        raise ConfigError(f"{label}: entry must be a JSON object")

    for key in ("Port", "BaseDir", "AllowedExtensions"):
        if key not in entry:
            raise ConfigError(f"{label}: missing required key '{key}'")

    port = entry["Port"]
    if isinstance(port, bool) or not isinstance(port, int):
        raise ConfigError(f"{label}: 'Port' must be an integer")
    if not 0 <= port <= 65535:
        raise ConfigError(f"{label}: 'Port' {port} is out of range")

    root_value = entry["BaseDir"]
    if not isinstance(root_value, str) or not root_value.strip():
        raise ConfigError(f"{label}: 'BaseDir' must be a non-empty string")
    root_dir = Path(root_value).expanduser()
    if not root_dir.is_absolute():
        root_dir = base_dir / root_dir

    allowed = _parse_extensions(entry["AllowedExtensions"], f"{label}.AllowedExtensions")
    downloadable = _parse_extensions(
        entry.get("DownloadableExtensions", []),
        f"{label}.DownloadableExtensions",
    )

    return ServerConfig.create(
        port=port,
        root_dir=root_dir,
        allowed_extensions=allowed,
        downloadable_extensions=downloadable,
    )


def _parse_extensions(value: Any, label: str) -> list[str]:
    if not isinstance(value, list):
        raise ConfigError(f"{label}: must be a list of extensions")
    extensions: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item.startswith(".") or len(item) < 2:
            raise ConfigError(f"{label}: {item!r} is not an extension like '.html'")
        extensions.append(item)
    return extensions
