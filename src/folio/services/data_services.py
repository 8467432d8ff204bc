"""Document services for site properties, projects, about me and social icons.

All four follow the same lazy single-fetch pattern from ``base``; they
differ only in the document shape.
"""

from ..models import AboutMe, Project, SiteProperties, SocialIcons
from .base import ListService, RecordService


class SitePropertiesService(RecordService[SiteProperties]):
    """Owner name, title, email and profile links."""

    resource_name = "site properties"
    shape = SiteProperties


class ProjectService(ListService[Project]):
    """Portfolio projects, in document order."""

    resource_name = "projects"
    shape = tuple[Project, ...]


class AboutMeService(RecordService[AboutMe]):
    """About section content."""

    resource_name = "about me information"
    shape = AboutMe


class SocialIconsService(RecordService[SocialIcons]):
    """Footer icon paths."""

    resource_name = "social icons"
    shape = SocialIcons
