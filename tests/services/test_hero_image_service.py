"""Tests for HeroImageService lookups."""

import asyncio
import json

import pytest

from folio.services import HeroImageService

HEROES = "sample-data/heroimages.json"


@pytest.fixture
def hero_payload(hero_images_data) -> str:
    return json.dumps(hero_images_data)


class TestFind:
    """Test predicate lookups over the cached list."""

    def test_find_by_predicate(self, make_fetcher, hero_payload) -> None:
        service = HeroImageService(make_fetcher({HEROES: hero_payload}), HEROES)

        hero = asyncio.run(service.find(lambda h: h.name == "about"))

        assert hero is not None
        assert hero.src == "/images/about-hero.jpg"
        assert hero.alt == "About Hero"

    def test_repeated_lookup_fetches_once(self, make_fetcher, hero_payload) -> None:
        """Test two lookups return the same record from one fetch."""
        fetcher = make_fetcher({HEROES: hero_payload})
        service = HeroImageService(fetcher, HEROES)

        async def scenario():
            first = await service.find(lambda h: h.name == "about")
            second = await service.find(lambda h: h.name == "about")
            return first, second

        first, second = asyncio.run(scenario())

        assert first is not None
        assert first == second
        assert fetcher.calls[HEROES] == 1

    def test_first_match_wins(self, make_fetcher) -> None:
        """Test duplicates resolve to the earliest entry."""
        payload = json.dumps(
            [
                {"name": "home", "src": "first.jpg", "alt": "First"},
                {"name": "home", "src": "second.jpg", "alt": "Second"},
            ]
        )
        service = HeroImageService(make_fetcher({HEROES: payload}), HEROES)

        hero = asyncio.run(service.find(lambda h: h.name == "home"))

        assert hero is not None
        assert hero.src == "first.jpg"

    def test_no_match_returns_none(self, make_fetcher, hero_payload) -> None:
        service = HeroImageService(make_fetcher({HEROES: hero_payload}), HEROES)
        assert asyncio.run(service.find(lambda h: h.name == "contact")) is None

    def test_unavailable_list_returns_none(self, make_fetcher) -> None:
        """Test a failed fetch reads as no match."""
        service = HeroImageService(make_fetcher({HEROES: "{ invalid json"}), HEROES)
        assert asyncio.run(service.find(lambda h: True)) is None

    @pytest.mark.parametrize("predicate", [None, "home", 42])
    def test_rejects_missing_predicate(self, make_fetcher, hero_payload, predicate) -> None:
        """Test a missing or non-callable predicate raises before any fetch."""
        fetcher = make_fetcher({HEROES: hero_payload})
        service = HeroImageService(fetcher, HEROES)

        with pytest.raises(ValueError, match="predicate must be a callable"):
            asyncio.run(service.find(predicate))

        assert fetcher.calls[HEROES] == 0


class TestListAccess:
    """Test whole-list access."""

    def test_get_all_keeps_order(self, make_fetcher, hero_payload) -> None:
        service = HeroImageService(make_fetcher({HEROES: hero_payload}), HEROES)

        heroes = asyncio.run(service.get_all())

        assert [h.name for h in heroes] == ["home", "about", "portfolio"]

    def test_find_by_name(self, make_fetcher, hero_payload) -> None:
        fetcher = make_fetcher({HEROES: hero_payload})
        service = HeroImageService(fetcher, HEROES)

        async def scenario():
            return await service.find_by_name("portfolio"), await service.get_all()

        hero, heroes = asyncio.run(scenario())

        assert hero is heroes[2]
        assert fetcher.calls[HEROES] == 1
