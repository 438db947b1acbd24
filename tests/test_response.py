"""Unit tests for HTTP response serialization."""

from response import HTTPResponse, build_response


def test_response_serialization_sets_length() -> None:
    response = build_response(200, b"hello", "text/plain")

    raw = response.to_bytes()

    assert raw == (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Type: text/plain\r\n"
        b"Content-Length: 5\r\n"
        b"\r\n"
        b"hello"
    )


def test_attachment_header_sits_between_type_and_length() -> None:
    raw = build_response(200, b"PK", "application/zip", attachment=True).to_bytes()

    head = raw.split(b"\r\n\r\n", 1)[0]
    assert head.split(b"\r\n")[1:] == [
        b"Content-Type: application/zip",
        b"Content-Disposition: attachment",
        b"Content-Length: 2",
    ]


def test_no_attachment_header_by_default() -> None:
    raw = build_response(200, b"x", "text/html").to_bytes()

    assert b"Content-Disposition" not in raw


def test_response_without_body_has_no_content_length() -> None:
    raw = HTTPResponse(status_code=200, headers={"Content-Type": "text/plain"}).to_bytes()

    assert raw == b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\n"


def test_head_only_keeps_length_and_drops_body() -> None:
    response = build_response(404, b"<h1>Not Found</h1>", "text/html", head_only=True)

    raw = response.to_bytes()

    assert raw.startswith(b"HTTP/1.1 404 Not Found\r\n")
    assert b"Content-Length: 18\r\n" in raw
    assert raw.endswith(b"\r\n\r\n")


def test_custom_reason_phrase_and_str_body() -> None:
    response = HTTPResponse(status_code=418, reason_phrase="Teapot", body="tea")

    assert response.body == b"tea"
    assert response.to_bytes().startswith(b"HTTP/1.1 418 Teapot\r\n")
