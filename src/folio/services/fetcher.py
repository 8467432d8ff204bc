"""Fetch boundary for site documents.

Single Responsibility: turn a site-relative path into payload text, or
raise a classified ``FetchError``. Nothing here decodes or caches.
"""

import asyncio
from pathlib import Path
from typing import Protocol

import httpx

from ..utils.logging import get_logger
from .exceptions import StatusError, TransportError

logger = get_logger(__name__)


class ResourceFetcher(Protocol):
    """Protocol for fetching site documents - enables dependency injection."""

    async def fetch_text(self, path: str) -> str:
        """Fetch the document at a site-relative path."""
        ...


class HttpResourceFetcher:
    """Fetch site documents from the host serving the static site.

    Implements async context manager for proper resource cleanup.
    One timeout applies to every request made through the fetcher.
    """

    DEFAULT_TIMEOUT = 30.0
    USER_AGENT = "Folio/1.0 (Portfolio Site Renderer)"

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize fetcher with the site root and timeout.

        Args:
            base_url: URL the static site is served from
            timeout: HTTP request timeout in seconds
            transport: Optional httpx transport (e.g. MockTransport in tests)
        """
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "HttpResourceFetcher":
        """Enter context manager, create HTTP client."""
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            follow_redirects=True,
            max_redirects=5,
            headers={"User-Agent": self.USER_AGENT, "Accept": "application/json"},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args) -> None:
        """Exit context manager, close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_text(self, path: str) -> str:
        """Fetch a document relative to the site root.

        Args:
            path: Site-relative path, e.g. "sample-data/projects.json"

        Returns:
            Response body as text

        Raises:
            RuntimeError: If fetcher not used as context manager
            TransportError: On network errors and timeouts
            StatusError: On non-success responses
        """
        if not self._client:
            raise RuntimeError("HttpResourceFetcher must be used as async context manager")

        logger.debug("Fetching: %s", path)
        try:
            response = await self._client.get(path)
        except httpx.TimeoutException as e:
            raise TransportError(path, f"timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise TransportError(path, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise StatusError(path, response.status_code)

        logger.debug("Fetched %d bytes from %s", len(response.content), path)
        return response.text


class LocalResourceFetcher:
    """Read site documents from a local static-site directory.

    Useful for rendering a site before it is published. Paths are confined
    to the root directory.
    """

    def __init__(self, root: Path) -> None:
        self.root = root
        self._root_resolved = root.resolve()

    def _safe_path(self, path: str) -> Path | None:
        """Resolve a site path, rejecting traversal and symlinks."""
        candidate = self.root / path.lstrip("/")
        resolved = candidate.resolve()

        if not resolved.is_relative_to(self._root_resolved):
            logger.warning("Path traversal attempt blocked: %s", path)
            return None

        if candidate.is_symlink():
            logger.warning("Symlink access blocked: %s", candidate)
            return None

        return resolved

    async def fetch_text(self, path: str) -> str:
        """Read a document relative to the site root.

        Raises:
            StatusError: 403 for blocked paths, 404 for missing files
            TransportError: If the file cannot be read
        """
        filepath = self._safe_path(path)
        if filepath is None:
            raise StatusError(path, 403)
        if not filepath.is_file():
            raise StatusError(path, 404)

        logger.debug("Reading: %s", filepath)
        try:
            return await asyncio.to_thread(filepath.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TransportError(path, str(e)) from e
