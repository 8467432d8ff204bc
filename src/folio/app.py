"""Composition root: wire fetcher -> services -> components -> page.

One ``SiteServices`` is built per render session. Each service fetches
its document at most once, however many sections ask for it.
"""

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass

from .components import About, Footer, Header, Home, MainLayout, Portfolio, html_document
from .components.header import nav_links_for
from .config import Settings, settings
from .services import (
    AboutMeService,
    DocumentService,
    HeroImageService,
    ProjectService,
    ResourceFetcher,
    SitePropertiesService,
    SocialIconsService,
)
from .utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TITLE = "Portfolio"


@dataclass(frozen=True)
class SiteServices:
    """The five document accessors for one session."""

    site_properties: SitePropertiesService
    hero_images: HeroImageService
    projects: ProjectService
    about_me: AboutMeService
    social_icons: SocialIconsService

    def all(self) -> tuple[DocumentService, ...]:
        return (
            self.site_properties,
            self.hero_images,
            self.projects,
            self.about_me,
            self.social_icons,
        )


def build_services(fetcher: ResourceFetcher, config: Settings = settings) -> SiteServices:
    """Construct one service per document, all sharing a fetcher."""
    return SiteServices(
        site_properties=SitePropertiesService(fetcher, config.site_properties_path),
        hero_images=HeroImageService(fetcher, config.hero_images_path),
        projects=ProjectService(fetcher, config.projects_path),
        about_me=AboutMeService(fetcher, config.about_me_path),
        social_icons=SocialIconsService(fetcher, config.social_icons_path),
    )


class PortfolioPage:
    """The whole page: header, the four sections, and the layout around them."""

    def __init__(self, services: SiteServices, header: Header | None = None) -> None:
        self.services = services
        self.header = header or Header()
        self.layout = MainLayout()
        self.home = Home(services.site_properties, services.hero_images)
        self.about = About(services.about_me, services.hero_images)
        self.portfolio = Portfolio(services.projects, services.hero_images)
        self.footer = Footer(services.site_properties, services.social_icons)

    @property
    def sections(self) -> tuple[Home, About, Portfolio, Footer]:
        return (self.home, self.about, self.portfolio, self.footer)

    async def load(self) -> None:
        """Load every section concurrently; each settles independently."""
        await asyncio.gather(*(section.load() for section in self.sections))

    def update_visible_sections(self, section_ids: Iterable[str]) -> None:
        """Forward the host's visible-section report to the header."""
        self.header.update_visible_sections(section_ids)

    def render_body(self) -> str:
        body = "".join(section.render() for section in self.sections)
        return self.header.render() + self.layout.render(body)

    def render(self) -> str:
        """Render the full HTML document in the sections' current states."""
        properties = self.home.site_properties
        title = DEFAULT_TITLE
        description = ""
        if properties is not None:
            title = f"{properties.name} - {properties.title}" if properties.name else title
            description = properties.title
        return html_document(self.render_body(), title=title, description=description)


def build_page(services: SiteServices, config: Settings = settings) -> PortfolioPage:
    """Construct the page with navigation taken from settings."""
    return PortfolioPage(services, Header(nav_links_for(config.nav_sections_list)))


async def render_site(
    fetcher: ResourceFetcher,
    config: Settings = settings,
    visible_sections: Iterable[str] | None = None,
) -> str:
    """Fetch every document once and render the complete page.

    Args:
        fetcher: Fetch boundary to read documents through
        config: Settings providing document paths and navigation
        visible_sections: Section ids to mark active in the header

    Returns:
        The rendered HTML document
    """
    page = build_page(build_services(fetcher, config), config)
    await page.load()
    if visible_sections is not None:
        page.update_visible_sections(visible_sections)

    pending = [section.section_id for section in page.sections if section.is_loading]
    if pending:
        logger.warning("Sections rendered without data: %s", ", ".join(pending))

    return page.render()
