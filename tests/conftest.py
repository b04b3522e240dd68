"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

import threading

import pytest
import requests

from rankcache.core.exceptions import NotFoundError
from rankcache.core.models import SourceLocation


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "source: Source readers (filesystem, http)")
    config.addinivalue_line("markers", "cache: File cache adapter")
    config.addinivalue_line("markers", "parser: Rank-table format")
    config.addinivalue_line("markers", "resources: Embedded resource sets")
    config.addinivalue_line("markers", "progress: Rich progress integration")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


class CountingReader:
    """SourceReader fake that serves fixed payloads and counts calls."""

    def __init__(self, payloads: dict[str, bytes] | None = None) -> None:
        self.payloads = payloads if payloads is not None else {}
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def read(self, location: SourceLocation) -> bytes:
        with self._lock:
            self.calls.append(location.identifier)
        try:
            return self.payloads[location.identifier]
        except KeyError:
            raise NotFoundError(
                f"File not found: {location.identifier}",
                source=location.identifier,
            ) from None


@pytest.fixture
def counting_reader() -> CountingReader:
    """Reusable call-counting reader with no payloads registered."""
    return CountingReader()


def make_response(
    body: bytes = b"",
    status_code: int = 200,
    url: str = "https://example.com/ranks.tiktoken",
    content_length: bool = True,
) -> requests.Response:
    """Build a fully-buffered requests.Response without any network I/O."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = body
    response._content_consumed = True
    if content_length:
        response.headers["Content-Length"] = str(len(body))
    return response


class FakeSession:
    """Stand-in for requests.Session.get that returns or raises a canned value."""

    def __init__(
        self,
        response: requests.Response | None = None,
        error: Exception | None = None,
    ) -> None:
        self.response = response
        self.error = error
        self.requests: list[tuple[str, float | None]] = []

    def get(
        self, url: str, stream: bool = False, timeout: float | None = None
    ) -> requests.Response:
        self.requests.append((url, timeout))
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


@pytest.fixture
def response_factory():
    """Factory for canned requests.Response objects."""
    return make_response


@pytest.fixture
def session_factory():
    """Factory for FakeSession instances."""
    return FakeSession


@pytest.fixture(autouse=True)
def _isolated_cache_env(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep tests from reading or populating the user's real cache directory."""
    monkeypatch.setenv("TIKTOKEN_CACHE_DIR", str(tmp_path_factory.mktemp("env-cache")))
    monkeypatch.delenv("DATA_GYM_CACHE_DIR", raising=False)
