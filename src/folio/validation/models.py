"""Input validation models using Pydantic.

These models validate CLI options before any fetching starts,
providing user-friendly error messages.
"""

from pathlib import Path

from pydantic import BaseModel, Field, HttpUrl, field_validator, model_validator

from ..config import SECTION_ID_PATTERN


class SiteSourceInput(BaseModel):
    """Where to read the site documents from: a URL or a local directory."""

    base_url: HttpUrl | None = Field(default=None, description="Static site base URL")
    site_dir: Path | None = Field(default=None, description="Local static site directory")

    @field_validator("site_dir")
    @classmethod
    def validate_site_dir(cls, v: Path | None) -> Path | None:
        """Validate the site directory exists."""
        if v is not None and not v.is_dir():
            raise ValueError(f"Site directory not found: {v}")
        return v

    @model_validator(mode="after")
    def validate_single_source(self) -> "SiteSourceInput":
        """Reject ambiguous input naming both a URL and a directory."""
        if self.base_url is not None and self.site_dir is not None:
            raise ValueError("Use either --base-url or --site-dir, not both")
        return self


class CheckInput(SiteSourceInput):
    """Validated input for checking document availability."""

    pass


class RenderInput(SiteSourceInput):
    """Validated input for rendering the site."""

    output: Path = Field(description="Output HTML file")
    visible: list[str] = Field(
        default_factory=list,
        description="Section ids to mark active in the navigation",
    )

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: Path) -> Path:
        """Validate the output is an HTML file."""
        if v.suffix.lower() not in (".html", ".htm"):
            raise ValueError(f"Expected .html output file, got: {v.name}")
        return v

    @field_validator("visible")
    @classmethod
    def validate_visible(cls, v: list[str]) -> list[str]:
        """Validate section ids."""
        for section_id in v:
            if not SECTION_ID_PATTERN.match(section_id):
                raise ValueError(f"Invalid section id: '{section_id}'")
        return v
