"""Configuration constants for the static file server."""

HOST: str = "0.0.0.0"
BUFFER_SIZE: int = 4096
SOCKET_TIMEOUT_SECS: int = 30
ACCEPT_POLL_SECS: float = 0.2
LISTEN_BACKLOG: int = 128
LOG_FORMAT: str = "plain"
DEFAULT_CONFIG_FILE: str = "config.json"
INDEX_FILE_NAME: str = "index.html"
ERROR_PAGES_DIR: str = "errorpages"
