"""HTTP response value with a .with_status() transformation.

Transformations return a new Response.  The body is always raw
bytes so document content reaches the wire exactly as it was read.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    ``content_type`` is ``None`` by default: no Content-Type header is
    sent and the server's defaults apply.
    """

    body: bytes = b""
    status: int = 200
    content_type: str | None = None
    headers: tuple[tuple[str, str], ...] = ()

    # -- Transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    # -- Accessors --

    @property
    def body_bytes(self) -> bytes:
        return self.body

    @property
    def text(self) -> str:
        """Body decoded as UTF-8 (undecodable bytes are replaced)."""
        return self.body.decode("utf-8", errors="replace")

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of a header, matched case-insensitively."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return default
