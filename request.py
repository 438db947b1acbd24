"""HTTP request-line model and parser."""

from dataclasses import dataclass

SUPPORTED_METHODS = frozenset({"GET", "HEAD"})


class HTTPRequestParseError(ValueError):
    """Request parse error carrying an HTTP status code."""

    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True, slots=True)
class RequestLine:
    method: str
    raw_path: str
    http_version: str

    @classmethod
    def from_bytes(cls, raw: bytes) -> "RequestLine":
        """Parse the first line of raw request bytes.

        Only the request line is consumed; headers and any body are ignored.
        The method is matched case-sensitively.
        """
        text = raw.decode("iso-8859-1")
        first_line = text.split("\n", 1)[0].rstrip("\r")

        parts = first_line.split(" ")
        if len(parts) < 3:
            raise HTTPRequestParseError("Invalid request line")

        method, raw_path, http_version = parts[0], parts[1], parts[2]
        if not method or not raw_path:
            raise HTTPRequestParseError("Request line contains empty tokens")

        if method not in SUPPORTED_METHODS:
            raise HTTPRequestParseError("Method not allowed", status_code=405)

        return cls(method=method, raw_path=raw_path, http_version=http_version)

    @property
    def is_head(self) -> bool:
        return self.method == "HEAD"
