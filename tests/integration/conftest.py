"""Shared fixtures for integration tests."""

from __future__ import annotations

import functools
import threading
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest


class _QuietHandler(SimpleHTTPRequestHandler):
    """Static file handler that counts GETs and keeps test output clean."""

    hits: list[str]

    def do_GET(self) -> None:
        self.hits.append(self.path)
        super().do_GET()

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        pass


class StaticServer:
    """A local HTTP server publishing files from a directory."""

    def __init__(self, root: Path, base_url: str, hits: list[str]) -> None:
        self.root = root
        self.base_url = base_url
        self.hits = hits

    def publish(self, name: str, data: bytes) -> str:
        """Write a file under the server root and return its URL."""
        (self.root / name).write_bytes(data)
        return f"{self.base_url}/{name}"


@pytest.fixture
def http_server(tmp_path: Path):
    """Serve tmp_path/www over HTTP on an ephemeral localhost port."""
    root = tmp_path / "www"
    root.mkdir()
    hits: list[str] = []
    handler = type("Handler", (_QuietHandler,), {"hits": hits})
    server = ThreadingHTTPServer(
        ("127.0.0.1", 0), functools.partial(handler, directory=str(root))
    )
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    try:
        yield StaticServer(root, f"http://{host}:{port}", hits)
    finally:
        server.shutdown()
        server.server_close()
        thread.join()


@pytest.fixture(autouse=True)
def _bypass_proxies(monkeypatch: pytest.MonkeyPatch) -> None:
    """Talk to localhost directly even when the environment sets a proxy."""
    monkeypatch.setenv("NO_PROXY", "127.0.0.1,localhost")
    monkeypatch.setenv("no_proxy", "127.0.0.1,localhost")
