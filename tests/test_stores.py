"""
Tests for the store scrapers: URL building, normalization and session handling
"""
import asyncio

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from games_hub.config import NAVIGATION_TIMEOUT_MS, SETTLE_TIMEOUT_MS, STEAM_RESULTS_TIMEOUT_MS
from games_hub.stores import (
    EpicScraper,
    NintendoScraper,
    PlayStationScraper,
    SteamScraper,
    XboxScraper,
    build_default_registry,
)

from conftest import FakePage, FakeScraper, FakeSessionFactory


STEAM_RAW = {
    'title': 'Hades',
    'price': '$19.99',
    'discount': '-20%',
    'image': 'https://cdn.steam/hades.jpg',
    'platforms': ['Windows', 'Mac'],
    'href': 'https://store.steampowered.com/app/1145360/Hades/',
}


def run_lookup(scraper_class, page, settings, game_name='Hades'):
    factory = FakeSessionFactory(page)
    scraper = scraper_class(settings=settings, session_factory=factory)
    outcome = asyncio.run(scraper.lookup(game_name))
    return outcome, factory


class TestSearchUrls:

    def test_steam_url_encodes_query(self, settings):
        scraper = SteamScraper(settings=settings)
        assert scraper.search_url('Baldur\'s Gate 3') == "https://store.steampowered.com/search/?term=Baldur's%20Gate%203"

    def test_epic_url_keeps_sort_params(self, settings):
        url = EpicScraper(settings=settings).search_url('Alan Wake 2')
        assert url == 'https://store.epicgames.com/en-US/browse?q=Alan%20Wake%202&sortBy=relevancy&sortDir=DESC'

    def test_reserved_characters_are_encoded(self, settings):
        url = XboxScraper(settings=settings).search_url('Tom & Jerry/2?')
        assert url == 'https://www.xbox.com/en-us/search?q=Tom%20%26%20Jerry%2F2%3F'

    def test_playstation_query_goes_in_path(self, settings):
        assert PlayStationScraper(settings=settings).search_url('Hades') == 'https://store.playstation.com/en-us/search/Hades'

    def test_nintendo_query_goes_in_fragment(self, settings):
        assert NintendoScraper(settings=settings).search_url('Zelda') == 'https://www.nintendo.com/us/search/#q=Zelda'


class TestNormalization:

    @pytest.mark.parametrize('raw_price,expected', [
        ('Free', 'Free'),
        ('Free to Play', 'Free'),
        ('  $59.99 ', '$59.99'),
        (None, 'N/A'),
        ('', 'N/A'),
    ])
    def test_price(self, settings, raw_price, expected):
        assert SteamScraper(settings=settings).normalize_price(raw_price) == expected

    def test_discount_keeps_digits(self, settings):
        scraper = SteamScraper(settings=settings)
        assert scraper.normalize_discount('-35%') == '35'
        assert scraper.normalize_discount(None) is None
        assert scraper.normalize_discount('%') is None

    def test_epic_relative_link_made_absolute(self, settings):
        scraper = EpicScraper(settings=settings)
        assert scraper.resolve_url('/en-US/p/hades') == 'https://store.epicgames.com/en-US/p/hades'
        assert scraper.resolve_url(None) is None

    def test_fixed_platform_stores_ignore_scraped_platforms(self, settings):
        result = XboxScraper(settings=settings).build_result({'title': 'Halo', 'platforms': ['Windows']})
        assert result.platforms == ['Xbox']
        assert result.genres == []
        assert result.price == 'N/A'
        assert result.url is None

    def test_steam_platforms_come_from_icons(self, settings):
        result = SteamScraper(settings=settings).build_result({'title': 'Hades', 'platforms': []})
        assert result.platforms == []


class TestLookup:

    def test_steam_success(self, settings):
        page = FakePage(raw=STEAM_RAW)
        outcome, factory = run_lookup(SteamScraper, page, settings)

        assert outcome.status == 'ok'
        result = outcome.result
        assert result.name == 'Hades'
        assert result.price == '$19.99'
        assert result.discount == '20'
        assert result.platforms == ['Windows', 'Mac']
        assert result.url == 'https://store.steampowered.com/app/1145360/Hades/'
        assert factory.opened == 1 and factory.closed == 1

    def test_steam_waits_for_results_container(self, settings):
        page = FakePage(raw=STEAM_RAW)
        run_lookup(SteamScraper, page, settings)

        assert page.calls[0] == ('goto', 'https://store.steampowered.com/search/?term=Hades', 'domcontentloaded', NAVIGATION_TIMEOUT_MS)
        assert page.calls[1] == ('wait_for_selector', '#search_resultsRows', STEAM_RESULTS_TIMEOUT_MS)

    def test_other_stores_wait_for_first_result(self, settings):
        page = FakePage(raw={'title': 'Hades'})
        run_lookup(NintendoScraper, page, settings)
        assert page.calls[1] == ('wait_for_selector', '.coveo-result-frame', SETTLE_TIMEOUT_MS)

    def test_selectors_passed_to_page(self, settings):
        page = FakePage(raw=STEAM_RAW)
        run_lookup(SteamScraper, page, settings)

        selectors = page.calls[2][1]
        assert selectors['result'] == '#search_resultsRows > a'
        assert list(selectors['platformIcons']) == ['Windows', 'Mac', 'Linux']

    def test_no_first_result_is_not_found(self, settings):
        page = FakePage(raw=None)
        outcome, factory = run_lookup(EpicScraper, page, settings)

        assert outcome.status == 'not_found'
        assert outcome.result is None
        assert factory.closed == 1

    def test_wait_timeout_still_extracts(self, settings):
        page = FakePage(raw={'title': 'Hades', 'price': 'Free'}, wait_error=PlaywrightTimeoutError('Timeout 3000ms exceeded'))
        outcome, _ = run_lookup(PlayStationScraper, page, settings)

        assert outcome.status == 'ok'
        assert outcome.result.price == 'Free'
        assert outcome.result.platforms == ['PlayStation']

    def test_navigation_error_returns_none_and_closes_session(self, settings):
        page = FakePage(goto_error=PlaywrightTimeoutError('Timeout 45000ms exceeded'))
        factory = FakeSessionFactory(page)
        scraper = XboxScraper(settings=settings, session_factory=factory)

        assert asyncio.run(scraper.search('Halo')) is None
        assert factory.opened == 1 and factory.closed == 1

    def test_evaluate_error_is_reported(self, settings):
        page = FakePage(evaluate_error=RuntimeError('Execution context was destroyed'))
        outcome, factory = run_lookup(SteamScraper, page, settings)

        assert outcome.status == 'error'
        assert 'Execution context was destroyed' in outcome.reason
        assert factory.closed == 1


class TestRegistry:

    def test_default_registry_order(self, settings):
        registry = build_default_registry(settings)
        assert registry.get_store_ids() == ['steam', 'epic', 'playstation', 'xbox', 'nintendo']
        assert registry.count() == 5

    def test_duplicate_check_ignores_case(self, settings):
        registry = build_default_registry(settings)
        with pytest.raises(ValueError):
            registry.register(FakeScraper('STEAM'))
        assert registry.count() == 5

    def test_duplicate_registration_rejected(self, settings):
        registry = build_default_registry(settings)
        with pytest.raises(ValueError):
            registry.register(SteamScraper(settings=settings))
