"""A blocking HTTP server that answers one request per connection."""

from __future__ import annotations

import socket

from .request import ParseError, Request, parse_request
from .response import Response
from .status import StatusCode

READ_SIZE = 1024


class Handler:
    """Turns parsed requests into responses; subclasses override ``handle_request``."""

    def handle_request(self, request: Request) -> Response:
        """Answer a well-formed request; the base handler knows no resources."""
        return Response(StatusCode.NOT_FOUND)

    def handle_bad_request(self, error: ParseError) -> Response:
        """Answer a request that could not be parsed."""
        print(f"Failed to parse request : {error}")
        return Response(StatusCode.BAD_REQUEST)


def _split_address(addr: str) -> tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"address must be host:port, got {addr!r}")
    return host, int(port)


class Server:
    """Listens on ``host:port`` and hands every connection to a handler."""

    def __init__(self, addr: str) -> None:
        self.addr = addr

    def handle_connection(self, conn: socket.socket, handler: Handler) -> None:
        """Read one request from ``conn``, answer it and close the connection."""
        try:
            try:
                data = conn.recv(READ_SIZE)
            except OSError as exc:
                print(f"Failed to read from connection : {exc}")
                return

            print(f"Received a request: {data.decode('utf-8', errors='replace')}")
            try:
                response = handler.handle_request(parse_request(data))
            except ParseError as exc:
                response = handler.handle_bad_request(exc)

            try:
                response.send(conn)
            except OSError as exc:
                print(f"Failed to send response : {exc}")
        finally:
            conn.close()

    def run(self, handler: Handler) -> None:
        """Accept connections forever, serving each in turn."""
        print(f"Listening on {self.addr}")
        with socket.create_server(_split_address(self.addr)) as listener:
            while True:
                try:
                    conn, _ = listener.accept()
                except OSError as exc:
                    print(f"Failed to establish a connection {exc}")
                    continue
                self.handle_connection(conn, handler)