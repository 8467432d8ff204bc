"""Header navigation with active-section highlighting."""

from collections.abc import Iterable
from dataclasses import dataclass

from .base import attr, text


@dataclass(frozen=True)
class NavLink:
    """A navigation entry pointing at a section id."""

    section_id: str
    label: str


DEFAULT_NAV_LINKS: tuple[NavLink, ...] = (
    NavLink("home", "Home"),
    NavLink("about", "About"),
    NavLink("portfolio", "Portfolio"),
    NavLink("contact", "Contact"),
)


def nav_links_for(section_ids: Iterable[str]) -> tuple[NavLink, ...]:
    """Build nav links for section ids, labelling them from the id."""
    return tuple(
        NavLink(section_id, section_id.replace("-", " ").title()) for section_id in section_ids
    )


class Header:
    """Site navigation.

    The host page tracks which sections are on screen and reports them
    through ``update_visible_sections``; the matching links are marked
    active. Before the first report the first link is active.
    """

    def __init__(self, links: Iterable[NavLink] = DEFAULT_NAV_LINKS) -> None:
        self.links = tuple(links)
        self._active: frozenset[str] = (
            frozenset({self.links[0].section_id}) if self.links else frozenset()
        )

    @property
    def active_sections(self) -> frozenset[str]:
        return self._active

    def update_visible_sections(self, section_ids: Iterable[str]) -> None:
        """Replace the active links with the currently visible sections.

        Ids that match no link are ignored.
        """
        known = {link.section_id for link in self.links}
        self._active = frozenset(section_id for section_id in section_ids if section_id in known)

    def is_active(self, section_id: str) -> bool:
        return section_id in self._active

    def _link_markup(self, link: NavLink) -> str:
        css_class = "nav-link active" if self.is_active(link.section_id) else "nav-link"
        return (
            f'<li class="nav-item">'
            f'<a class="{css_class}" href="#{attr(link.section_id)}">{text(link.label)}</a>'
            "</li>"
        )

    def render(self) -> str:
        items = "".join(self._link_markup(link) for link in self.links)
        return f'<header><nav class="navbar"><ul class="nav">{items}</ul></nav></header>'
