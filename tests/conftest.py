"""Shared test fixtures for Folio."""

import asyncio
from collections import Counter
from pathlib import Path
from typing import Any

import httpx
import pytest

from folio.config import Settings
from folio.models import AboutMe, HeroImage, Project, SiteProperties, SocialIcons
from folio.services.exceptions import StatusError

FIXTURE_SITE = Path(__file__).parent / "fixtures" / "site"


class StubFetcher:
    """ResourceFetcher returning canned payloads and counting calls per path.

    A payload may be a string (returned as-is) or an exception (raised).
    Unknown paths raise ``missing``, or a 404 StatusError when it is unset.
    """

    def __init__(
        self,
        payloads: dict[str, str | Exception] | None = None,
        delay: float = 0.0,
        missing: Exception | None = None,
    ) -> None:
        self.payloads = payloads or {}
        self.delay = delay
        self.missing = missing
        self.calls: Counter[str] = Counter()

    async def fetch_text(self, path: str) -> str:
        self.calls[path] += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        payload = self.payloads.get(path, self.missing)
        if payload is None:
            raise StatusError(path, 404)
        if isinstance(payload, Exception):
            raise payload
        return payload


class FakeSite:
    """Route table for httpx.MockTransport, counting requests per path."""

    def __init__(self, routes: dict[str, tuple[int, str]], delay: float = 0.0) -> None:
        self.routes = routes
        self.delay = delay
        self.calls: Counter[str] = Counter()

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.lstrip("/")
        self.calls[path] += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        status, body = self.routes.get(path, (404, "Not Found"))
        return httpx.Response(status, text=body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class FakeProvider:
    """Provider with a canned result, or an exception to raise.

    For list providers a value of None stands for an unavailable document.
    """

    def __init__(self, value: Any = None, error: Exception | None = None) -> None:
        self.value = value
        self.error = error
        self.calls = 0

    async def get(self) -> Any:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.value

    async def available(self) -> Any:
        return await self.get()


class FakeHeroProvider:
    """Hero image provider over an in-memory list."""

    def __init__(self, heroes: tuple[HeroImage, ...] = ()) -> None:
        self.heroes = heroes
        self.calls = 0

    async def find(self, predicate):
        self.calls += 1
        return next((hero for hero in self.heroes if predicate(hero)), None)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with default document paths and no .env influence."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def fixture_site() -> Path:
    """Local static site with one of every document."""
    return FIXTURE_SITE


@pytest.fixture
def site_properties_data() -> dict[str, Any]:
    return {
        "name": "John Doe",
        "title": "Software Developer",
        "email": "john@example.com",
        "gitHub": "johndoe",
        "linkedIn": "john-doe",
    }


@pytest.fixture
def hero_images_data() -> list[dict[str, str]]:
    return [
        {"name": "home", "src": "/images/home-hero.jpg", "alt": "Home Hero"},
        {"name": "about", "src": "/images/about-hero.jpg", "alt": "About Hero"},
        {"name": "portfolio", "src": "/images/portfolio-hero.jpg", "alt": "Portfolio Hero"},
    ]


@pytest.fixture
def sample_properties() -> SiteProperties:
    return SiteProperties(
        name="Jane Doe",
        title="Jane Doe Portfolio",
        email="jane@example.com",
        dev_dot_to="janedev",
        github="janedoe",
        instagram="janedoe_insta",
        linkedin="janedoe-linkedin",
        medium="janedoe.medium",
        twitter="janedoe_tw",
        youtube="janedoeYT",
    )


@pytest.fixture
def sample_icons() -> SocialIcons:
    return SocialIcons(
        email="/img/email.svg",
        dev_dot_to="/img/devto.svg",
        github="/img/github.svg",
        instagram="/img/instagram.svg",
        linkedin="/img/linkedin.svg",
        medium="/img/medium.svg",
        twitter="/img/twitter.svg",
        youtube="/img/youtube.svg",
    )


@pytest.fixture
def sample_about_me() -> AboutMe:
    return AboutMe(
        description="Test description",
        skills=("Python", "Blazor"),
        currently_learning=("Docker", "Azure"),
        detail_or_quote="Test quote",
    )


@pytest.fixture
def sample_projects() -> tuple[Project, ...]:
    return (
        Project(title="Project 1", description="Desc 1", url="https://example.com/1"),
        Project(title="Project 2", description="Desc 2", url=None),  # type: ignore[arg-type]
        Project(title="Project 3", description="Desc 3", url=""),
    )


@pytest.fixture
def sample_heroes() -> tuple[HeroImage, ...]:
    return (
        HeroImage(name="home", src="hero.jpg", alt="Hero Alt"),
        HeroImage(name="about", src="about.jpg", alt="About Alt"),
        HeroImage(name="portfolio", src="/img/portfolio-hero.jpg", alt="Portfolio Hero"),
    )


@pytest.fixture
def make_fetcher():
    """Factory for StubFetcher instances."""
    return StubFetcher


@pytest.fixture
def make_site():
    """Factory for FakeSite route tables."""
    return FakeSite


@pytest.fixture
def make_provider():
    """Factory for FakeProvider instances."""
    return FakeProvider


@pytest.fixture
def make_heroes():
    """Factory for FakeHeroProvider instances."""
    return FakeHeroProvider
