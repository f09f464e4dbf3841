"""Command that serves the public directory over HTTP."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Mapping, Sequence

from .http_server import Server
from .website_handler import WebsiteHandler

ADDRESS = "127.0.0.1:8080"
DEFAULT_PUBLIC_PATH = str(Path(__file__).resolve().parent / "public")


def public_path_from_env(environ: Mapping[str, str] | None = None) -> str:
    """Return ``PUBLIC_PATH`` from the environment, or the bundled default."""
    env = os.environ if environ is None else environ
    return env.get("PUBLIC_PATH", DEFAULT_PUBLIC_PATH)


def main(argv: Sequence[str] | None = None) -> None:
    """Serve files from the public directory on 127.0.0.1:8080."""
    parser = argparse.ArgumentParser(
        description="Serve static files; set PUBLIC_PATH to choose the directory."
    )
    parser.parse_args(argv)
    Server(ADDRESS).run(WebsiteHandler(public_path_from_env()))


if __name__ == "__main__":
    main()