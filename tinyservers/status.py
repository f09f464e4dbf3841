"""HTTP status codes understood by the server."""

from __future__ import annotations

from enum import IntEnum


class StatusCode(IntEnum):
    """The status codes the server can answer with."""

    OK = 200
    BAD_REQUEST = 400
    NOT_FOUND = 404

    def reason_phrase(self) -> str:
        """Return the reason phrase written after the numeric code."""
        return _REASON_PHRASES[self]

    def __str__(self) -> str:
        return str(self.value)


_REASON_PHRASES = {
    StatusCode.OK: "ok",
    StatusCode.BAD_REQUEST: "Bad Request",
    StatusCode.NOT_FOUND: "Not Found",
}