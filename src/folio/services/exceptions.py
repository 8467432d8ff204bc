"""Service layer exceptions.

Fetch failures are classified at the fetch boundary so the services can
log what went wrong before collapsing it into an unavailable outcome.
"""


class ServiceError(Exception):
    """Base exception for service errors."""

    pass


class FetchError(ServiceError):
    """Raised when a site document cannot be fetched."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class TransportError(FetchError):
    """Raised on network failure or timeout."""

    pass


class StatusError(FetchError):
    """Raised when the host answers with a non-success status."""

    def __init__(self, path: str, status_code: int) -> None:
        super().__init__(path, f"HTTP {status_code}")
        self.status_code = status_code


class DecodeError(FetchError):
    """Raised when a payload is not the expected JSON shape."""

    pass
