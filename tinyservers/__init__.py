"""A static-file HTTP server and a toy Redis-like key/value server."""

__version__ = "0.1.0"