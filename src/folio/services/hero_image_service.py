"""Hero image service.

Besides the shared list accessor, hero images are looked up one at a
time by the sections that display them.
"""

from collections.abc import Callable

from ..models import HeroImage
from .base import ListService


class HeroImageService(ListService[HeroImage]):
    """Section background images, looked up by predicate or name."""

    resource_name = "hero images"
    shape = tuple[HeroImage, ...]

    async def get_all(self) -> tuple[HeroImage, ...]:
        """Get every hero image (same cached fetch as ``get``)."""
        return await self.get()

    async def find(self, predicate: Callable[[HeroImage], bool]) -> HeroImage | None:
        """Return the first hero image matching a predicate.

        Args:
            predicate: Test applied to each image in document order

        Returns:
            The first match, or None if nothing matches or the list is unavailable

        Raises:
            ValueError: If predicate is missing or not callable
        """
        if predicate is None or not callable(predicate):
            raise ValueError("predicate must be a callable")

        for hero in await self.get():
            if predicate(hero):
                return hero
        return None

    async def find_by_name(self, name: str) -> HeroImage | None:
        """Return the hero image with the given name, if any."""
        return await self.find(lambda hero: hero.name == name)
