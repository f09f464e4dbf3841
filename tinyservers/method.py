"""HTTP request methods."""

from __future__ import annotations

from enum import Enum


class Method(Enum):
    """The request methods the server recognises."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class MethodError(ValueError):
    """Raised when a method name is not one the server recognises."""


def parse_method(text: str) -> Method:
    """Parse an exact, case-sensitive method name."""
    try:
        return Method(text)
    except ValueError:
        raise MethodError(f"unknown method: {text!r}") from None