"""Configuration management using pydantic-settings."""

import re
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Section ids double as URL fragments, so keep them to simple slugs
SECTION_ID_PATTERN = re.compile(r"^[a-z][a-z0-9_-]*$")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Where the static site (and its JSON documents) is served from
    site_base_url: str = "http://localhost:5000/"
    site_dir: Path | None = None  # Read from disk instead of HTTP when set

    # JSON documents, relative to the site root
    data_path: str = "sample-data"
    site_properties_file: str = "siteproperties.json"
    hero_images_file: str = "heroimages.json"
    projects_file: str = "projects.json"
    about_me_file: str = "aboutme.json"
    social_icons_file: str = "socialicons.json"

    # One timeout for every outbound request (seconds)
    http_timeout: float = 30.0

    # Logging
    log_level: LogLevel = "INFO"
    console_log_level: LogLevel = "WARNING"
    log_file: Path | None = None

    # Rendering
    output_filename: str = "index.html"
    nav_sections: str = "home,about,portfolio,contact"

    @staticmethod
    def _split_csv(value: str) -> list[str]:
        """Split a comma-separated string into a trimmed list."""
        return [item.strip() for item in value.split(",") if item.strip()]

    @property
    def nav_sections_list(self) -> list[str]:
        """Get navigation section ids as a validated list.

        Raises:
            ValueError: If any section id is not a lowercase slug
        """
        sections = self._split_csv(self.nav_sections)
        for section in sections:
            if not SECTION_ID_PATTERN.match(section):
                raise ValueError(
                    f"Invalid section id: '{section}'. "
                    "Section ids must start with a lowercase letter and contain only "
                    "lowercase letters, digits, underscores, and hyphens."
                )
        return sections

    def resource_path(self, filename: str) -> str:
        """Get the site-relative path of a JSON document."""
        prefix = self.data_path.strip("/")
        return f"{prefix}/{filename}" if prefix else filename

    @property
    def site_properties_path(self) -> str:
        return self.resource_path(self.site_properties_file)

    @property
    def hero_images_path(self) -> str:
        return self.resource_path(self.hero_images_file)

    @property
    def projects_path(self) -> str:
        return self.resource_path(self.projects_file)

    @property
    def about_me_path(self) -> str:
        return self.resource_path(self.about_me_file)

    @property
    def social_icons_path(self) -> str:
        return self.resource_path(self.social_icons_file)

    @property
    def uses_local_site(self) -> bool:
        """Check if documents are read from a local site directory."""
        return self.site_dir is not None


# Global settings instance
settings = Settings()
