"""Parsing of the request line of an HTTP/1.1 request."""

from __future__ import annotations

from dataclasses import dataclass

from .method import Method, MethodError, parse_method
from .query_string import QueryString, parse_query_string


class ParseError(Exception):
    """Raised when a request cannot be parsed."""

    INVALID_REQUEST = "Invalid Request"
    INVALID_ENCODING = "Invalid Encoding"
    INVALID_PROTOCOL = "Invalid Protocol"
    INVALID_METHOD = "Invalid Method"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Request:
    """A parsed request line."""

    path: str
    method: Method
    query: QueryString | None = None


def get_next_word(text: str) -> tuple[str, str] | None:
    """Split at the first space or carriage return, dropping that character."""
    index = next((i for i, char in enumerate(text) if char in " \r"), None)
    if index is None:
        return None
    return text[:index], text[index + 1 :]


def _next_word(text: str) -> tuple[str, str]:
    result = get_next_word(text)
    if result is None:
        raise ParseError(ParseError.INVALID_REQUEST)
    return result


def parse_request(buf: bytes | bytearray | memoryview) -> Request:
    """Parse raw request bytes, e.g. ``GET /search?name=abc HTTP/1.1\\r\\n``."""
    try:
        text = bytes(buf).decode("utf-8")
    except UnicodeDecodeError:
        raise ParseError(ParseError.INVALID_ENCODING) from None

    method_name, rest = _next_word(text)
    path, rest = _next_word(rest)
    protocol, _ = _next_word(rest)

    if protocol != "HTTP/1.1":
        raise ParseError(ParseError.INVALID_PROTOCOL)

    try:
        method = parse_method(method_name)
    except MethodError:
        raise ParseError(ParseError.INVALID_METHOD) from None

    query = None
    path, sep, query_text = path.partition("?")
    if sep:
        query = parse_query_string(query_text)

    return Request(path=path, method=method, query=query)