"""Home section: owner name and title over the home hero image."""

import asyncio

from ..models import HeroImage, SiteProperties
from ..services.interfaces import HeroImageProvider, SitePropertiesProvider
from .base import Section, attr, text

SCROLL_ARROW_ICON = "images/down-arrow.svg"


def hero_markup(hero: HeroImage | None, css_class: str) -> str:
    """Render a hero image, or nothing when there is none."""
    if hero is None:
        return ""
    return f'<img class="{css_class}" src="{attr(hero.src)}" alt="{attr(hero.alt)}">'


class Home(Section):
    """Landing section. Needs site properties; the hero image is optional."""

    section_id = "home"
    hero_name = "home"

    def __init__(
        self,
        site_properties: SitePropertiesProvider,
        hero_images: HeroImageProvider,
    ) -> None:
        super().__init__()
        self._site_properties_provider = site_properties
        self._hero_images = hero_images
        self.site_properties: SiteProperties | None = None
        self.hero: HeroImage | None = None

    async def _fetch(self) -> None:
        self.site_properties, self.hero = await asyncio.gather(
            self._site_properties_provider.get(),
            self._hero_images.find(lambda hero: hero.name == self.hero_name),
        )

    def _reset_data(self) -> None:
        self.site_properties = None
        self.hero = None

    def _is_ready(self) -> bool:
        return self.site_properties is not None

    def _render_content(self) -> str:
        if self.site_properties is None:
            return ""
        return (
            hero_markup(self.hero, "background")
            + '<div class="home-content">'
            f"<h1>{text(self.site_properties.name)}</h1>"
            f"<h2>{text(self.site_properties.title)}</h2>"
            "</div>"
            '<a href="#about" class="scroll-arrow">'
            f'<img src="{SCROLL_ARROW_ICON}" alt="Scroll down to About">'
            "</a>"
        )

    def _wrap(self, inner: str) -> str:
        return f'<section id="{self.section_id}">{inner}</section>'
