"""Page components rendering site documents to HTML."""

from .about import About
from .base import LOADING_MARKUP, Section, SectionState
from .footer import PLATFORMS, Footer, Platform
from .header import DEFAULT_NAV_LINKS, Header, NavLink, nav_links_for
from .home import Home
from .layout import MainLayout, html_document
from .portfolio import Portfolio

__all__ = [
    # Sections
    "About",
    "Footer",
    "Home",
    "Portfolio",
    # Navigation and layout
    "Header",
    "MainLayout",
    "NavLink",
    "html_document",
    "nav_links_for",
    # Base
    "Section",
    "SectionState",
    # Constants
    "DEFAULT_NAV_LINKS",
    "LOADING_MARKUP",
    "PLATFORMS",
    "Platform",
]
