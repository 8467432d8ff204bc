"""Base class for page sections.

A section moves Uninitialized -> Loading -> Loaded exactly once. Until
its data is in, and for as long as its primary data is absent, it
renders only the loading placeholder inside its wrapper.
"""

from abc import ABC, abstractmethod
from enum import Enum
from html import escape

from ..utils.logging import get_logger

logger = get_logger(__name__)

LOADING_MARKUP = "<p><em>Loading...</em></p>"


class SectionState(Enum):
    """Render lifecycle of a section."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    LOADED = "loaded"


def attr(value: str) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return escape(value, quote=True)


def text(value: str) -> str:
    """Escape a value for use as element text."""
    return escape(value, quote=False)


class Section(ABC):
    """A page section backed by one or more document providers.

    Subclasses implement:
    - _fetch(): await providers and store what they return
    - _is_ready(): whether the stored data is enough to render content
    - _render_content(): loaded markup
    - _wrap(inner): the section wrapper shared by both states
    """

    section_id: str = ""

    def __init__(self) -> None:
        self._state = SectionState.UNINITIALIZED

    @property
    def state(self) -> SectionState:
        return self._state

    @property
    def is_loading(self) -> bool:
        """True while the placeholder would be rendered."""
        return not (self._state is SectionState.LOADED and self._is_ready())

    async def load(self) -> None:
        """Fetch the section's data. Safe to call more than once."""
        if self._state is not SectionState.UNINITIALIZED:
            return

        self._state = SectionState.LOADING
        try:
            await self._fetch()
        except Exception:
            # Providers are not supposed to raise; stay on the placeholder if one does
            logger.exception("Error occurred while loading the %s section", self.section_id)
            self._reset_data()
        self._state = SectionState.LOADED

    def render(self) -> str:
        """Render the section in its current state."""
        if self.is_loading:
            return self._wrap(LOADING_MARKUP)
        return self._wrap(self._render_content())

    @abstractmethod
    async def _fetch(self) -> None:
        pass

    @abstractmethod
    def _reset_data(self) -> None:
        pass

    @abstractmethod
    def _is_ready(self) -> bool:
        pass

    @abstractmethod
    def _render_content(self) -> str:
        pass

    @abstractmethod
    def _wrap(self, inner: str) -> str:
        pass
