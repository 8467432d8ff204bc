"""Explicit result of a memoized document fetch."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ok[T]:
    """The document was fetched and decoded."""

    value: T


@dataclass(frozen=True)
class Unavailable:
    """The document could not be fetched or decoded."""

    path: str
    reason: str


type Outcome[T] = Ok[T] | Unavailable
