"""Static file server entry point and connection lifecycle orchestration."""

from __future__ import annotations

import argparse
import json
import logging
import socket
import sys
import threading
import time
from pathlib import Path

from config import (
    ACCEPT_POLL_SECS,
    DEFAULT_CONFIG_FILE,
    HOST,
    LISTEN_BACKLOG,
    LOG_FORMAT,
    SOCKET_TIMEOUT_SECS,
)
from handlers.static_files import handle_request
from response import HTTPResponse
from server_config import ConfigError, ServerConfig, load_config
from socket_handler import read_request_bytes, write_http_response_message

logger = logging.getLogger(__name__)


class HTTPServer:
    """Listener for one configured port; each connection gets its own thread."""

    def __init__(
        self,
        config: ServerConfig,
        host: str = HOST,
        *,
        socket_timeout_secs: float | None = SOCKET_TIMEOUT_SECS,
        log_format: str = LOG_FORMAT,
    ) -> None:
        self.config = config
        self.host = host
        self.port = config.port
        self.socket_timeout_secs = socket_timeout_secs
        self.log_format = log_format

        self._server_socket: socket.socket | None = None
        self._running = False

    def start(self) -> None:
        """Bind, then accept connections until stop() is called or accept fails."""
        self.config.root_dir.mkdir(parents=True, exist_ok=True)

        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server_socket:
            self._server_socket = server_socket
            server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            server_socket.bind((self.host, self.port))
            server_socket.listen(LISTEN_BACKLOG)
            server_socket.settimeout(ACCEPT_POLL_SECS)
            self.port = server_socket.getsockname()[1]
            logger.info(
                "Server listening on %s:%s serving %s",
                self.host,
                self.port,
                self.config.root_dir,
            )

            self._running = True
            try:
                while self._running:
                    try:
                        client_socket, address = server_socket.accept()
                    except socket.timeout:
                        continue
                    except OSError as exc:
                        if self._running:
                            logger.error("Accept failed on port %s: %s", self.port, exc)
                        break

                    worker = threading.Thread(
                        target=self._handle_client,
                        args=(client_socket, address),
                        name=f"http-conn-{self.port}-{address[1]}",
                        daemon=True,
                    )
                    worker.start()
            finally:
                self._running = False
                self._server_socket = None
                logger.info("Server on port %s stopped", self.port)

    def stop(self) -> None:
        self._running = False
        if self._server_socket is not None:
            self._server_socket.close()
            self._server_socket = None

    def _handle_client(self, client_socket: socket.socket, address: tuple[str, int]) -> None:
        with client_socket:
            started_at = time.perf_counter()
            client_socket.settimeout(self.socket_timeout_secs)
            try:
                raw_request = read_request_bytes(client_socket)
                if not raw_request:
                    return

                response = handle_request(raw_request, self.config)
                bytes_sent = write_http_response_message(client_socket, response)
                method, path = _describe_request(raw_request)
                self._record_and_log(
                    address=address,
                    method=method,
                    path=path,
                    response=response,
                    payload_size=bytes_sent,
                    started_at=started_at,
                )
            except TimeoutError:
                logger.warning("Timed out waiting on client %s:%s", address[0], address[1])
            except Exception:
                logger.exception("Unhandled error while serving client %s:%s", address[0], address[1])

    def _record_and_log(
        self,
        *,
        address: tuple[str, int],
        method: str,
        path: str,
        response: HTTPResponse,
        payload_size: int,
        started_at: float,
    ) -> None:
        duration_ms = (time.perf_counter() - started_at) * 1000
        event = {
            "client": address[0],
            "port": self.port,
            "method": method,
            "path": path,
            "status": response.status_code,
            "bytes_out": payload_size,
            "duration_ms": round(duration_ms, 3),
        }
        if self.log_format == "json":
            logger.info(json.dumps(event, sort_keys=True))
            return

        logger.info(
            "client=%s port=%s method=%s path=%s status=%s bytes_out=%s duration_ms=%.2f",
            event["client"],
            event["port"],
            event["method"],
            event["path"],
            event["status"],
            event["bytes_out"],
            duration_ms,
        )


def _describe_request(raw_request: bytes) -> tuple[str, str]:
    first_line = raw_request.decode("iso-8859-1").split("\n", 1)[0].strip()
    parts = first_line.split(" ")
    method = parts[0] or "-"
    path = parts[1] if len(parts) > 1 and parts[1] else "-"
    return method, path


def _run_listener(server: HTTPServer) -> None:
    try:
        server.start()
    except OSError:
        logger.exception("Listener on port %s failed", server.port)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve static files on one or more ports")
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG_FILE)
    parser.add_argument("--host", default=HOST)
    parser.add_argument("--log-format", choices=["plain", "json"], default=LOG_FORMAT)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    config_path = Path(args.config)
    if not config_path.is_file():
        print(f"Configuration file {config_path} not found.", file=sys.stderr)
        return 1
    try:
        configs = load_config(config_path)
    except ConfigError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    servers = [HTTPServer(config, host=args.host, log_format=args.log_format) for config in configs]
    threads = [
        threading.Thread(target=_run_listener, args=(server,), name=f"listener-{server.port}", daemon=True)
        for server in servers
    ]
    for thread in threads:
        thread.start()

    try:
        while any(thread.is_alive() for thread in threads):
            for thread in threads:
                thread.join(timeout=0.5)
    except KeyboardInterrupt:
        for server in servers:
            server.stop()
        return 0

    logger.error("No listener is running; exiting")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
