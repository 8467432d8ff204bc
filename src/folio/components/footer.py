"""Footer: social icon links and the site credit."""

import asyncio
from typing import NamedTuple

from ..models import SiteProperties, SocialIcons
from ..services.interfaces import SitePropertiesProvider, SocialIconsProvider
from .base import Section, attr, text


class Platform(NamedTuple):
    """A footer link: which field holds its icon and its profile address."""

    label: str
    field: str
    href_prefix: str = ""


PLATFORMS: tuple[Platform, ...] = (
    Platform("Email", "email", "mailto:"),
    Platform("Dev.to", "dev_dot_to"),
    Platform("GitHub", "github"),
    Platform("Instagram", "instagram"),
    Platform("LinkedIn", "linkedin"),
    Platform("Medium", "medium"),
    Platform("Twitter", "twitter"),
    Platform("YouTube", "youtube"),
)


class Footer(Section):
    """Contact footer. Renders once either document is available."""

    section_id = "contact"

    def __init__(
        self,
        site_properties: SitePropertiesProvider,
        social_icons: SocialIconsProvider,
    ) -> None:
        super().__init__()
        self._site_properties_provider = site_properties
        self._social_icons_provider = social_icons
        self.site_properties: SiteProperties | None = None
        self.social_icons: SocialIcons | None = None

    async def _fetch(self) -> None:
        self.site_properties, self.social_icons = await asyncio.gather(
            self._site_properties_provider.get(),
            self._social_icons_provider.get(),
        )

    def _reset_data(self) -> None:
        self.site_properties = None
        self.social_icons = None

    def _is_ready(self) -> bool:
        return self.site_properties is not None or self.social_icons is not None

    def visible_platforms(self) -> list[Platform]:
        """Platforms that have both an icon and a profile address."""
        if self.site_properties is None or self.social_icons is None:
            return []
        return [
            platform
            for platform in PLATFORMS
            if getattr(self.social_icons, platform.field)
            and getattr(self.site_properties, platform.field)
        ]

    @staticmethod
    def _icon_markup(
        platform: Platform, properties: SiteProperties, icons: SocialIcons
    ) -> str:
        href = platform.href_prefix + getattr(properties, platform.field)
        icon = getattr(icons, platform.field)
        return (
            f'<a href="{attr(href)}" target="_blank" rel="noopener noreferrer">'
            f'<img class="social-icon" src="{attr(icon)}" alt="{attr(platform.label)}">'
            "</a>"
        )

    def _render_content(self) -> str:
        icons = ""
        if self.site_properties is not None and self.social_icons is not None:
            icons = "".join(
                self._icon_markup(platform, self.site_properties, self.social_icons)
                for platform in self.visible_platforms()
            )
        parts = [f'<div class="social-icons">{icons}</div>']
        if self.site_properties is not None and self.site_properties.name:
            parts.append(
                f'<p class="footer-credit">Created by {text(self.site_properties.name)}</p>'
            )
        return "".join(parts)

    def _wrap(self, inner: str) -> str:
        return (
            f'<div id="{self.section_id}">'
            f'<div class="social-icons-container">{inner}</div>'
            "</div>"
        )
