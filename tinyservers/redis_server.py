"""A toy Redis-like server answering PING, SET (with PX) and GET."""

from __future__ import annotations

import argparse
import asyncio
import time
from typing import Callable, Sequence

HOST = "127.0.0.1"
PORT = 6379
READ_SIZE = 1024
DEFAULT_TTL_MS = 1_000_000_000
MISSING_AGE_MS = 100_000_000


class RedisSession:
    """Per-connection command state; each connection has its own cache."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self.clock = clock
        self.cache: dict[str, tuple[str, float]] = {}

    def handle(self, data: bytes) -> bytes | None:
        """Answer one received chunk; None when there is nothing to answer.

        Raises UnicodeDecodeError for non-UTF-8 input, IndexError when a
        command lacks its arguments and ValueError for a non-numeric PX.
        """
        text = data.decode("utf-8")
        lines = text.lstrip().split("\n")
        if len(lines) < 2:
            return None

        command = lines[-2]
        print(f"Command : {command}")

        if "ping" in text:
            return b"+PONG\r\n"
        if "set" in text:
            key = lines[4].strip()
            value = lines[6].strip()
            ttl_ms = int(lines[10].strip()) if "px" in text else DEFAULT_TTL_MS
            if ttl_ms < 0:
                raise ValueError(f"negative expiry: {ttl_ms}")
            self.cache[key] = (value, self.clock() + ttl_ms / 1000)
            return b"+OK\r\n"
        if "get" in text:
            key = lines[4].strip()
            now = self.clock()
            value, expires_at = self.cache.get(key, ("", now - MISSING_AGE_MS / 1000))
            if expires_at < now:
                self.cache.pop(key, None)
                response = "$-1\r\n"
            else:
                response = "+" + value
        else:
            response = "+" + command
        response = response.strip()
        print(f"Response : {response}")
        return response.encode("utf-8")


async def handle_client(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
    """Serve one connection until the peer closes it or sends a malformed command."""
    session = RedisSession()
    try:
        while True:
            data = await reader.read(READ_SIZE)
            if not data:
                break
            print(f"Received a request: {data.decode('utf-8', errors='replace')} ")
            try:
                response = session.handle(data)
            except (IndexError, ValueError) as exc:
                print(f"Dropping connection: {exc!r}")
                break
            if response is not None:
                writer.write(response)
                await writer.drain()
    finally:
        writer.close()
        try:
            await writer.wait_closed()
        except ConnectionError:
            pass


async def serve(host: str = HOST, port: int = PORT) -> None:
    """Accept connections forever, each served concurrently."""
    print("Logs from your program will appear here!")
    server = await asyncio.start_server(handle_client, host, port)
    async with server:
        await server.serve_forever()


def main(argv: Sequence[str] | None = None) -> None:
    """Run the server on 127.0.0.1:6379."""
    parser = argparse.ArgumentParser(description="Toy Redis-like server on port 6379.")
    parser.parse_args(argv)
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()