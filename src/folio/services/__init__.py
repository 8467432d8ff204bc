"""Service layer: fetch boundary and lazily cached document services.

- ResourceFetcher: fetch boundary (HTTP or local directory)
- LazyResult: single-flight memoized async value
- Document services: one per site JSON document
"""

from .base import DocumentService, ListService, RecordService
from .data_services import AboutMeService, ProjectService, SitePropertiesService, SocialIconsService
from .exceptions import DecodeError, FetchError, ServiceError, StatusError, TransportError
from .fetcher import HttpResourceFetcher, LocalResourceFetcher, ResourceFetcher
from .hero_image_service import HeroImageService
from .lazy import LazyResult, LoadState
from .outcome import Ok, Outcome, Unavailable

__all__ = [
    # Document services
    "AboutMeService",
    "HeroImageService",
    "ProjectService",
    "SitePropertiesService",
    "SocialIconsService",
    # Base classes
    "DocumentService",
    "ListService",
    "RecordService",
    # Fetch boundary
    "HttpResourceFetcher",
    "LocalResourceFetcher",
    "ResourceFetcher",
    # Memoization
    "LazyResult",
    "LoadState",
    # Outcome types
    "Ok",
    "Outcome",
    "Unavailable",
    # Exceptions
    "DecodeError",
    "FetchError",
    "ServiceError",
    "StatusError",
    "TransportError",
]
