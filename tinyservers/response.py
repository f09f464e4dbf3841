"""HTTP responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .status import StatusCode


@dataclass
class Response:
    """A status line followed by an optional body."""

    status_code: StatusCode
    body: str | None = None

    def to_bytes(self) -> bytes:
        """Return the response as written on the wire."""
        code = StatusCode(self.status_code)
        text = f"HTTP/1.1 {int(code)} {code.reason_phrase()}\r\n\r\n{self.body or ''}"
        return text.encode("utf-8")

    def send(self, stream: Any) -> None:
        """Write the response to a socket or a binary file-like object."""
        data = self.to_bytes()
        sendall = getattr(stream, "sendall", None)
        if sendall is not None:
            sendall(data)
        else:
            stream.write(data)