"""A handler that serves files from a public directory."""

from __future__ import annotations

from pathlib import Path

from .http_server import Handler
from .method import Method
from .request import Request
from .response import Response
from .status import StatusCode


class WebsiteHandler(Handler):
    """Serves GET requests from files below ``public_path``."""

    def __init__(self, public_path: str) -> None:
        self.public_path = public_path

    def read_file(self, file_path: str) -> str | None:
        """Return a file's text, or None if it is missing, unreadable or outside the root."""
        try:
            path = Path(f"{self.public_path}/{file_path}").resolve(strict=True)
        except (OSError, RuntimeError):
            return None

        if not path.is_relative_to(self.public_path):
            print(f"Directory traversal attack attempted : {path}")
            return None

        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None

    def handle_request(self, request: Request) -> Response:
        """Serve ``/``, ``/hello`` and other paths as files; anything else is 404."""
        if request.method is not Method.GET:
            return Response(StatusCode.NOT_FOUND)
        if request.path == "/":
            return Response(StatusCode.OK, self.read_file("index.html"))
        if request.path == "/hello":
            return Response(StatusCode.OK, self.read_file("hello.html"))
        contents = self.read_file(request.path)
        if contents is None:
            return Response(StatusCode.NOT_FOUND)
        return Response(StatusCode.OK, contents)