"""Unit tests for domain exception hierarchy."""

from pathlib import Path

import pytest


@pytest.mark.core
class TestRankcacheError:
    """Tests for base exception class."""

    def test_is_exception_subclass(self) -> None:
        """RankcacheError should be an Exception subclass."""
        from rankcache.core.exceptions import RankcacheError

        assert issubclass(RankcacheError, Exception)

    def test_recovery_hint_returns_none_by_default(self) -> None:
        """Base exception should return None for recovery_hint."""
        from rankcache.core.exceptions import RankcacheError

        err = RankcacheError("something went wrong")
        assert err.recovery_hint is None

    @pytest.mark.parametrize(
        "name",
        ["NotFoundError", "FetchError", "CacheWriteError", "CacheReadError", "ParseError"],
    )
    def test_all_errors_inherit_from_base(self, name: str) -> None:
        """Every library error can be caught as RankcacheError."""
        from rankcache.core import exceptions

        assert issubclass(getattr(exceptions, name), exceptions.RankcacheError)


@pytest.mark.core
class TestNotFoundError:
    """Tests for NotFoundError."""

    def test_is_source_error(self) -> None:
        """NotFoundError should share SourceError with FetchError."""
        from rankcache.core.exceptions import FetchError, NotFoundError, SourceError

        assert issubclass(NotFoundError, SourceError)
        assert issubclass(FetchError, SourceError)

    def test_stores_source_and_cause(self) -> None:
        """Exception should store the source path and underlying cause."""
        from rankcache.core.exceptions import NotFoundError

        cause = FileNotFoundError("nope")
        err = NotFoundError("File not found: /x", source="/x", cause=cause)
        assert err.source == "/x"
        assert err.cause is cause

    def test_recovery_hint_mentions_source(self) -> None:
        """recovery_hint should include the missing path."""
        from rankcache.core.exceptions import NotFoundError

        err = NotFoundError("missing", source="/data/r50k.tiktoken")
        assert "/data/r50k.tiktoken" in err.recovery_hint


@pytest.mark.core
class TestFetchError:
    """Tests for FetchError."""

    def test_status_code_defaults_to_none(self) -> None:
        """status_code should be None for transport failures."""
        from rankcache.core.exceptions import FetchError

        err = FetchError("boom", source="https://example.com/a")
        assert err.status_code is None
        assert "connectivity" in err.recovery_hint

    def test_recovery_hint_includes_status(self) -> None:
        """recovery_hint should mention the HTTP status when known."""
        from rankcache.core.exceptions import FetchError

        err = FetchError("HTTP 404", source="https://example.com/a", status_code=404)
        assert "404" in err.recovery_hint
        assert "https://example.com/a" in err.recovery_hint


@pytest.mark.core
class TestCacheWriteError:
    """Tests for CacheWriteError."""

    def test_stores_path_and_cause(self, tmp_path: Path) -> None:
        """Exception should store the target cache path and cause."""
        from rankcache.core.exceptions import CacheWriteError

        cause = PermissionError("denied")
        err = CacheWriteError("failed", path=tmp_path / "abc", cause=cause)
        assert err.path == tmp_path / "abc"
        assert err.cause is cause

    def test_recovery_hint_mentions_directory(self, tmp_path: Path) -> None:
        """recovery_hint should name the directory that must be writable."""
        from rankcache.core.exceptions import CacheWriteError

        err = CacheWriteError("failed", path=tmp_path / "abc")
        assert str(tmp_path) in err.recovery_hint
        assert "TIKTOKEN_CACHE_DIR" in err.recovery_hint


@pytest.mark.core
class TestCacheReadError:
    """Tests for CacheReadError."""

    def test_stores_path_and_cause(self, tmp_path: Path) -> None:
        """Exception should store the unreadable entry and cause."""
        from rankcache.core.exceptions import CacheReadError

        cause = IsADirectoryError("is a directory")
        err = CacheReadError("failed", path=tmp_path / "abc", cause=cause)
        assert err.path == tmp_path / "abc"
        assert err.cause is cause

    def test_recovery_hint_names_entry(self, tmp_path: Path) -> None:
        """recovery_hint should point at the entry to delete."""
        from rankcache.core.exceptions import CacheReadError

        err = CacheReadError("failed", path=tmp_path / "abc")
        assert str(tmp_path / "abc") in err.recovery_hint


@pytest.mark.core
class TestParseError:
    """Tests for ParseError."""

    def test_stores_line_details(self) -> None:
        """Exception should store line number and content."""
        from rankcache.core.exceptions import ParseError

        err = ParseError("bad", line_number=3, line="!!! 1")
        assert err.line_number == 3
        assert err.line == "!!! 1"
        assert "line 3" in err.recovery_hint

    def test_recovery_hint_without_line(self) -> None:
        """A payload-level failure should point at the encoding."""
        from rankcache.core.exceptions import ParseError

        err = ParseError("not utf-8")
        assert err.line_number is None
        assert "UTF-8" in err.recovery_hint
