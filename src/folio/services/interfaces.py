"""Provider protocols the components depend on.

Components take these instead of the concrete services so tests (and
alternative sources) can hand them anything with the same methods.
"""

from collections.abc import Callable
from typing import Protocol

from ..models import AboutMe, HeroImage, Project, SiteProperties, SocialIcons


class SitePropertiesProvider(Protocol):
    async def get(self) -> SiteProperties | None: ...


class HeroImageProvider(Protocol):
    async def find(self, predicate: Callable[[HeroImage], bool]) -> HeroImage | None: ...


class ProjectProvider(Protocol):
    async def available(self) -> tuple[Project, ...] | None: ...


class AboutMeProvider(Protocol):
    async def get(self) -> AboutMe | None: ...


class SocialIconsProvider(Protocol):
    async def get(self) -> SocialIcons | None: ...
