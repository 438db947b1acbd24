"""Low-level socket read/write utilities."""

from __future__ import annotations

import socket

from config import BUFFER_SIZE
from response import HTTPResponse


def read_request_bytes(client_socket: socket.socket, limit: int = BUFFER_SIZE) -> bytes:
    """Read until the request line is complete, the peer closes, or limit bytes arrive.

    Anything past the first line break is never interpreted, so requests whose
    headers exceed the limit are simply truncated.
    """
    buffer = bytearray()
    while len(buffer) < limit:
        chunk = client_socket.recv(limit - len(buffer))
        if not chunk:
            break
        buffer.extend(chunk)
        if b"\n" in chunk:
            break
    return bytes(buffer)


def write_http_response_message(client_socket: socket.socket, response: HTTPResponse) -> int:
    """Write the complete response with a single sendall and return its size."""
    payload = response.to_bytes()
    client_socket.sendall(payload)
    return len(payload)
