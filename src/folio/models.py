"""Portfolio content records.

Every record is loaded wholesale from one JSON document and never
changes afterwards, so all models are frozen. Keys are matched the way
the site's JSON files are written in practice: case-insensitively and
ignoring underscores and hyphens (``DevDotTo``, ``devDotTo`` and
``dev_dot_to`` all land on ``dev_dot_to``).
"""

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator


def _fold(key: str) -> str:
    """Normalize a JSON key or field name for matching."""
    return key.replace("_", "").replace("-", "").lower()


def _none_to_empty(value: Any) -> Any:
    return "" if value is None else value


def _none_to_empty_list(value: Any) -> Any:
    return () if value is None else value


# A string that treats an explicit JSON null as "not set"
Text = Annotated[str, BeforeValidator(_none_to_empty)]
TextList = Annotated[tuple[str, ...], BeforeValidator(_none_to_empty_list)]


class Record(BaseModel):
    """Base for immutable content records."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _match_keys(cls, data: Any) -> Any:
        """Map incoming JSON keys onto field names."""
        if not isinstance(data, Mapping):
            return data
        fields = {_fold(name): name for name in cls.model_fields}
        matched: dict[str, Any] = {}
        for key, value in data.items():
            name = fields.get(_fold(str(key)))
            if name is not None:
                matched[name] = value
        return matched


class SiteProperties(Record):
    """Owner details and profile links shown across the site."""

    name: str
    title: str
    email: str
    dev_dot_to: Text = ""
    github: Text = ""
    instagram: Text = ""
    linkedin: Text = ""
    medium: Text = ""
    twitter: Text = ""
    youtube: Text = ""


class HeroImage(Record):
    """A section background image, looked up by name."""

    name: str
    src: str
    alt: str


class Project(Record):
    """A portfolio entry. An empty url means the project has no link."""

    title: str
    description: str
    url: Text


class AboutMe(Record):
    """Content of the About section."""

    description: str
    skills: TextList = ()
    currently_learning: TextList = ()
    detail_or_quote: Text = ""


class SocialIcons(Record):
    """Icon image paths for the footer, one per platform."""

    email: Text = ""
    dev_dot_to: Text = ""
    github: Text = ""
    instagram: Text = ""
    linkedin: Text = ""
    medium: Text = ""
    twitter: Text = ""
    youtube: Text = ""
