"""HTTP response model and serializer."""

from dataclasses import dataclass, field

REASON_PHRASES: dict[int, str] = {
    200: "OK",
    400: "Bad Request",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    500: "Internal Server Error",
}


@dataclass(slots=True)
class HTTPResponse:
    status_code: int
    reason_phrase: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | str | None = None
    content_length_override: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.body, str):
            self.body = self.body.encode("utf-8")

    @property
    def reason(self) -> str:
        return self.reason_phrase or REASON_PHRASES.get(self.status_code, "Unknown")

    def to_bytes(self) -> bytes:
        """Serialize the response into HTTP/1.1 wire format bytes."""
        head = prepare_head(self)
        if self.body is None:
            return head
        return head + self.body


def prepare_head(response: HTTPResponse) -> bytes:
    headers = dict(response.headers)
    content_length = response.content_length_override
    if content_length is None and response.body is not None:
        content_length = len(response.body)
    if content_length is not None:
        headers["Content-Length"] = str(content_length)

    header_lines = [f"HTTP/1.1 {response.status_code} {response.reason}"]
    header_lines.extend(f"{key}: {value}" for key, value in headers.items())
    return "\r\n".join(header_lines).encode("iso-8859-1") + b"\r\n\r\n"


def build_response(
    status_code: int,
    body: bytes | None,
    content_type: str,
    *,
    attachment: bool = False,
    head_only: bool = False,
    reason_phrase: str | None = None,
) -> HTTPResponse:
    """Build a response with headers in wire order.

    With ``head_only`` the body is dropped but Content-Length still reports
    the size the body would have had.
    """
    headers = {"Content-Type": content_type}
    if attachment:
        headers["Content-Disposition"] = "attachment"

    if head_only and body is not None:
        return HTTPResponse(
            status_code=status_code,
            reason_phrase=reason_phrase,
            headers=headers,
            body=None,
            content_length_override=len(body),
        )
    return HTTPResponse(
        status_code=status_code,
        reason_phrase=reason_phrase,
        headers=headers,
        body=body,
    )
