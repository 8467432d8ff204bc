"""Base classes for the document services.

Each service owns one JSON document at a fixed path. The first access
fetches and decodes it; every later (or concurrent) access shares that
one outcome. Failures of any kind are logged here and become
``Unavailable``, so nothing past this layer ever sees an exception.
"""

from abc import ABC
from typing import Any, ClassVar

from pydantic import TypeAdapter, ValidationError

from ..utils.logging import get_logger
from .exceptions import DecodeError, FetchError, StatusError, TransportError
from .fetcher import ResourceFetcher
from .lazy import LazyResult, LoadState
from .outcome import Ok, Outcome, Unavailable

logger = get_logger(__name__)


class DocumentService[T](ABC):
    """Lazy, memoized access to one decoded JSON document.

    Subclasses set:
    - resource_name: human-readable name used in log messages
    - shape: the type the document decodes to (a record or list of records)
    """

    resource_name: ClassVar[str] = "document"
    shape: ClassVar[Any]

    def __init__(self, fetcher: ResourceFetcher, path: str) -> None:
        """Initialize the service.

        Args:
            fetcher: Fetch boundary used for the single underlying request
            path: Site-relative path of the JSON document
        """
        self._fetcher = fetcher
        self.path = path
        self._adapter: TypeAdapter[T] = TypeAdapter(self.shape)
        self._lazy: LazyResult[Outcome[T]] = LazyResult(self._load)

    @property
    def fetch_state(self) -> LoadState:
        """Where the underlying fetch is in its lifecycle."""
        return self._lazy.state

    async def outcome(self) -> Outcome[T]:
        """Get the memoized fetch outcome, fetching on first use."""
        return await self._lazy.get()

    def _decode(self, payload: str) -> T:
        """Decode payload text into the service's shape.

        Raises:
            DecodeError: On invalid JSON or a shape mismatch
        """
        try:
            return self._adapter.validate_json(payload)
        except ValidationError as e:
            raise DecodeError(self.path, f"{e.error_count()} validation error(s)") from e

    async def _load(self) -> Outcome[T]:
        """Fetch and decode the document, collapsing failures."""
        logger.debug("Loading %s from %s", self.resource_name, self.path)
        try:
            payload = await self._fetcher.fetch_text(self.path)
            value = self._decode(payload)
        except TransportError as e:
            logger.error("Network error occurred while loading %s: %s", self.resource_name, e)
            return Unavailable(self.path, str(e))
        except StatusError as e:
            logger.error("HTTP error occurred while loading %s: %s", self.resource_name, e)
            return Unavailable(self.path, str(e))
        except DecodeError as e:
            logger.error("JSON decode error occurred while loading %s: %s", self.resource_name, e)
            return Unavailable(self.path, str(e))
        except FetchError as e:
            logger.error("Error occurred while loading %s: %s", self.resource_name, e)
            return Unavailable(self.path, str(e))
        except Exception as e:
            logger.exception("Unexpected error occurred while loading %s", self.resource_name)
            return Unavailable(self.path, f"unexpected error: {e}")

        logger.info("Successfully loaded %s", self.resource_name)
        return Ok(value)


class RecordService[T](DocumentService[T]):
    """Service for a document holding a single record.

    ``get()`` returns None when the record is unavailable.
    """

    async def get(self) -> T | None:
        """Get the record, or None if it could not be loaded."""
        result = await self.outcome()
        if isinstance(result, Ok):
            return result.value
        return None


class ListService[T](DocumentService[tuple[T, ...]]):
    """Service for a document holding an ordered list of records.

    ``get()`` never returns None: an unavailable list is an empty tuple.
    """

    async def get(self) -> tuple[T, ...]:
        """Get the records in document order, or () if unavailable."""
        result = await self.outcome()
        if isinstance(result, Ok):
            return result.value
        return ()

    async def available(self) -> tuple[T, ...] | None:
        """Get the records, or None if the document could not be loaded.

        Unlike ``get``, an unavailable document is kept apart from an
        empty list.
        """
        result = await self.outcome()
        if isinstance(result, Ok):
            return result.value
        return None
