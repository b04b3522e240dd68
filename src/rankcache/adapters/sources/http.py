"""HTTP(S) source adapter using requests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import requests

from rankcache.core.exceptions import FetchError
from rankcache.core.ports import NullProgressReporter


if TYPE_CHECKING:
    from rankcache.core.models import RemoteURL
    from rankcache.core.ports import ProgressReporter


logger = logging.getLogger(__name__)

# Chunk size for streaming downloads (64KB)
_CHUNK_SIZE = 64 * 1024


def _content_length(response: requests.Response) -> int:
    """Declared body size, or 0 when the header is absent or unusable."""
    value = response.headers.get("Content-Length", "")
    try:
        size = int(value)
    except ValueError:
        if value:
            logger.debug("Ignoring malformed Content-Length %r", value)
        return 0
    return max(size, 0)


class HttpReader:
    """Source reader for http:// and https:// URLs.

    Issues a single GET per call. Transport errors and non-success
    statuses both surface as FetchError; nothing is retried.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        progress: ProgressReporter | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the reader.

        Args:
            session: Optional requests session. If not provided, creates one.
            progress: Optional reporter for download progress.
            timeout: Optional timeout in seconds passed to requests. None
                leaves it to the transport.
        """
        self._session = session or requests.Session()
        self._progress = progress or NullProgressReporter()
        self._timeout = timeout

    def read(self, location: RemoteURL) -> bytes:
        """Download a URL fully.

        Args:
            location: The URL to GET.

        Returns:
            The response body.

        Raises:
            FetchError: On connection failure, timeout, or a non-2xx status.
        """
        url = location.url
        logger.debug("GET %s", url)
        try:
            with self._session.get(url, stream=True, timeout=self._timeout) as response:
                response.raise_for_status()
                return self._read_body(url, response)
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise FetchError(
                f"HTTP {status} fetching {url}",
                source=url,
                cause=e,
                status_code=status,
            ) from e
        except requests.RequestException as e:
            raise FetchError(
                f"Failed to fetch {url}: {e}",
                source=url,
                cause=e,
            ) from e

    def _read_body(self, url: str, response: requests.Response) -> bytes:
        """Stream the body into memory, reporting progress."""
        total_size = _content_length(response)
        callback = self._progress.start_task(url, total_size)
        chunks: list[bytes] = []
        bytes_downloaded = 0
        try:
            for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                chunks.append(chunk)
                bytes_downloaded += len(chunk)
                callback(bytes_downloaded, total_size)
        finally:
            self._progress.finish_task(url)
        return b"".join(chunks)
