"""Unit tests for RouterReader composite adapter."""

from pathlib import Path

import pytest

from rankcache.core.models import LocalPath, RemoteURL, SourceLocation


class FakeReader:
    """Reader that records locations and returns a fixed marker."""

    def __init__(self, marker: bytes) -> None:
        self.marker = marker
        self.locations: list[SourceLocation] = []

    def read(self, location: SourceLocation) -> bytes:
        self.locations.append(location)
        return self.marker


@pytest.mark.source
class TestRouting:
    """Tests for dispatching on location type."""

    def test_local_path_routes_to_local_backend(self) -> None:
        """LocalPath locations go to the LocalPath backend."""
        from rankcache.adapters.sources import RouterReader

        local, remote = FakeReader(b"local"), FakeReader(b"remote")
        router = RouterReader(backends={LocalPath: local, RemoteURL: remote})

        assert router.read(LocalPath("/data/x")) == b"local"
        assert local.locations == [LocalPath("/data/x")]
        assert remote.locations == []

    def test_remote_url_routes_to_remote_backend(self) -> None:
        """RemoteURL locations go to the RemoteURL backend."""
        from rankcache.adapters.sources import RouterReader

        local, remote = FakeReader(b"local"), FakeReader(b"remote")
        router = RouterReader(backends={LocalPath: local, RemoteURL: remote})

        assert router.read(RemoteURL("https://example.com/x")) == b"remote"
        assert local.locations == []

    def test_unregistered_type_raises_value_error(self) -> None:
        """A location type without a backend is a configuration error."""
        from rankcache.adapters.sources import RouterReader

        router = RouterReader(backends={LocalPath: FakeReader(b"")})

        with pytest.raises(ValueError, match="RemoteURL"):
            router.read(RemoteURL("https://example.com/x"))

    def test_read_identifier_parses_then_reads(self) -> None:
        """read_identifier() resolves the string before dispatching."""
        from rankcache.adapters.sources import RouterReader

        local, remote = FakeReader(b"local"), FakeReader(b"remote")
        router = RouterReader(backends={LocalPath: local, RemoteURL: remote})

        assert router.read_identifier("http://example.com/x") == b"remote"
        assert router.read_identifier("relative/x") == b"local"
        assert remote.locations == [RemoteURL("http://example.com/x")]


@pytest.mark.source
class TestCreateReader:
    """Tests for the create_reader() factory."""

    def test_reads_local_files(self, tmp_path: Path) -> None:
        """The default router reads local paths from disk."""
        from rankcache.adapters.sources import create_reader

        source = tmp_path / "ranks.tiktoken"
        source.write_bytes(b"IQ== 0\n")

        assert create_reader().read_identifier(str(source)) == b"IQ== 0\n"

    def test_uses_given_session_for_urls(self, response_factory, session_factory) -> None:
        """The default router sends URLs through the supplied session."""
        from rankcache.adapters.sources import create_reader

        session = session_factory(response=response_factory(b"remote"))
        reader = create_reader(session=session, timeout=2.5)

        assert reader.read_identifier("https://example.com/x") == b"remote"
        assert session.requests == [("https://example.com/x", 2.5)]
