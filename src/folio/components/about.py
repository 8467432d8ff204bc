"""About section: description, skills, what's being learned, and a quote."""

import asyncio

from ..models import AboutMe, HeroImage
from ..services.interfaces import AboutMeProvider, HeroImageProvider
from .base import Section, text
from .home import hero_markup


def _list_markup(items: tuple[str, ...], css_class: str) -> str:
    entries = "".join(f"<li>{text(item)}</li>" for item in items)
    return f'<ul class="{css_class}">{entries}</ul>'


class About(Section):
    """About section. Needs the about-me record; the hero image is optional."""

    section_id = "about"
    hero_name = "about"

    def __init__(self, about_me: AboutMeProvider, hero_images: HeroImageProvider) -> None:
        super().__init__()
        self._about_me_provider = about_me
        self._hero_images = hero_images
        self.about_me: AboutMe | None = None
        self.hero: HeroImage | None = None

    async def _fetch(self) -> None:
        self.about_me, self.hero = await asyncio.gather(
            self._about_me_provider.get(),
            self._hero_images.find(lambda hero: hero.name == self.hero_name),
        )

    def _reset_data(self) -> None:
        self.about_me = None
        self.hero = None

    def _is_ready(self) -> bool:
        return self.about_me is not None

    def _render_content(self) -> str:
        about = self.about_me
        if about is None:
            return ""

        parts = [hero_markup(self.hero, "background"), f"<p>{text(about.description)}</p>"]
        if about.skills:
            parts.append("<h3>Skills</h3>")
            parts.append(_list_markup(about.skills, "skills"))
        if about.currently_learning:
            parts.append("<h3>Currently learning</h3>")
            parts.append(_list_markup(about.currently_learning, "currently-learning"))
        if about.detail_or_quote:
            parts.append(f'<blockquote class="quote">{text(about.detail_or_quote)}</blockquote>')
        return "".join(parts)

    def _wrap(self, inner: str) -> str:
        return (
            f'<section id="{self.section_id}">'
            "<h2>About Myself</h2>"
            f'<div class="about-content">{inner}</div>'
            "</section>"
        )
