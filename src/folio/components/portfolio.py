"""Portfolio section: one box per project."""

import asyncio

from ..models import HeroImage, Project
from ..services.interfaces import HeroImageProvider, ProjectProvider
from .base import Section, attr, text
from .home import hero_markup


def project_markup(project: Project) -> str:
    """Render one project box; the title links out only when url is set."""
    if project.url:
        heading = (
            f'<a href="{attr(project.url)}" target="_blank" rel="noopener noreferrer">'
            f"{text(project.title)}</a>"
        )
    else:
        heading = text(project.title)
    return f'<div class="box"><h3>{heading}</h3><p>{text(project.description)}</p></div>'


class Portfolio(Section):
    """Project listing.

    An empty list counts as loaded; an unavailable document keeps the
    placeholder.
    """

    section_id = "portfolio"
    hero_name = "portfolio"

    def __init__(self, projects: ProjectProvider, hero_images: HeroImageProvider) -> None:
        super().__init__()
        self._projects_provider = projects
        self._hero_images = hero_images
        self.projects: tuple[Project, ...] | None = None
        self.hero: HeroImage | None = None

    async def _fetch(self) -> None:
        self.projects, self.hero = await asyncio.gather(
            self._projects_provider.available(),
            self._hero_images.find(lambda hero: hero.name == self.hero_name),
        )

    def _reset_data(self) -> None:
        self.projects = None
        self.hero = None

    def _is_ready(self) -> bool:
        return self.projects is not None

    def _render_content(self) -> str:
        boxes = "".join(project_markup(project) for project in self.projects or ())
        return hero_markup(self.hero, "portfolio-hero-image") + boxes

    def _wrap(self, inner: str) -> str:
        return (
            f'<section class="light" id="{self.section_id}">'
            "<h2>Portfolio</h2>"
            f'<div class="portfolio-container">{inner}</div>'
            "</section>"
        )
