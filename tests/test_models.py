"""Tests for content records."""

import pytest
from pydantic import ValidationError

from folio.models import AboutMe, HeroImage, Project, SiteProperties, SocialIcons


class TestKeyMatching:
    """Test JSON keys are matched to fields regardless of casing."""

    @pytest.mark.parametrize("key", ["DevDotTo", "devDotTo", "dev_dot_to", "dev-dot-to"])
    def test_platform_key_variants(self, key: str) -> None:
        """Test every spelling of a platform key populates the same field."""
        icons = SocialIcons.model_validate({key: "/img/devto.svg"})
        assert icons.dev_dot_to == "/img/devto.svg"

    def test_pascal_case_document(self) -> None:
        """Test documents written with PascalCase keys."""
        about = AboutMe.model_validate(
            {
                "Description": "Hello",
                "Skills": ["Python"],
                "CurrentlyLearning": ["Rust"],
                "DetailOrQuote": "Quote",
            }
        )
        assert about.description == "Hello"
        assert about.skills == ("Python",)
        assert about.currently_learning == ("Rust",)
        assert about.detail_or_quote == "Quote"

    def test_unknown_keys_ignored(self) -> None:
        """Test extra keys do not fail decoding."""
        hero = HeroImage.model_validate(
            {"name": "home", "src": "a.jpg", "alt": "A", "width": 1200}
        )
        assert hero.name == "home"


class TestSiteProperties:
    """Test SiteProperties record."""

    def test_optional_links_default_empty(self) -> None:
        """Test profile links default to empty strings."""
        props = SiteProperties.model_validate(
            {"name": "John", "title": "Dev", "email": "john@example.com"}
        )
        assert props.github == ""
        assert props.youtube == ""

    @pytest.mark.parametrize("missing", ["name", "title", "email"])
    def test_required_fields(self, missing: str) -> None:
        """Test name, title and email are required."""
        data = {"name": "John", "title": "Dev", "email": "john@example.com"}
        del data[missing]
        with pytest.raises(ValidationError):
            SiteProperties.model_validate(data)

    def test_null_link_becomes_empty(self) -> None:
        """Test an explicit null link is treated as not set."""
        props = SiteProperties.model_validate(
            {"name": "John", "title": "Dev", "email": "j@example.com", "Medium": None}
        )
        assert props.medium == ""

    def test_is_frozen(self) -> None:
        """Test records cannot be modified after loading."""
        props = SiteProperties(name="John", title="Dev", email="j@example.com")
        with pytest.raises(ValidationError):
            props.name = "Jane"  # type: ignore[misc]


class TestProject:
    """Test Project record."""

    def test_null_url_means_no_link(self) -> None:
        """Test a null url is stored as empty."""
        project = Project.model_validate({"title": "P", "description": "D", "url": None})
        assert project.url == ""

    def test_url_key_required(self) -> None:
        """Test url must be present even though it may be empty."""
        with pytest.raises(ValidationError):
            Project.model_validate({"title": "P", "description": "D"})


class TestAboutMe:
    """Test AboutMe record."""

    def test_lists_default_empty(self) -> None:
        """Test skills and learning lists may be omitted."""
        about = AboutMe.model_validate({"description": "Hello"})
        assert about.skills == ()
        assert about.currently_learning == ()
        assert about.detail_or_quote == ""

    def test_lists_preserve_order(self) -> None:
        """Test list order is kept verbatim."""
        about = AboutMe.model_validate({"description": "d", "skills": ["C", "A", "B"]})
        assert about.skills == ("C", "A", "B")

    def test_null_lists_become_empty(self) -> None:
        about = AboutMe.model_validate({"description": "d", "skills": None})
        assert about.skills == ()

    def test_rejects_string_for_list(self) -> None:
        """Test a bare string is not accepted as a list of skills."""
        with pytest.raises(ValidationError):
            AboutMe.model_validate({"description": "d", "skills": "Python"})


class TestSocialIcons:
    """Test SocialIcons record."""

    def test_partial_document(self) -> None:
        """Test missing platforms default to empty paths."""
        icons = SocialIcons.model_validate(
            {"Email": "/img/email.svg", "GitHub": "/img/github.svg", "Twitter": ""}
        )
        assert icons.email == "/img/email.svg"
        assert icons.github == "/img/github.svg"
        assert icons.twitter == ""
        assert icons.medium == ""
