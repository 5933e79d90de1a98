"""
Pytest configuration
Fake pages, sessions and scrapers so tests never launch a browser
"""
from contextlib import asynccontextmanager

import pytest

from games_hub.config import Settings
from games_hub.models import SearchOutcome, StoreResult
from games_hub.stores.registry import StoreScraperRegistry


class FakePage:
    """Stands in for a Playwright page; records every call."""

    def __init__(self, raw=None, goto_error=None, wait_error=None, evaluate_error=None):
        self.raw = raw
        self.goto_error = goto_error
        self.wait_error = wait_error
        self.evaluate_error = evaluate_error
        self.calls = []

    async def goto(self, url, wait_until=None, timeout=None):
        self.calls.append(('goto', url, wait_until, timeout))
        if self.goto_error:
            raise self.goto_error

    async def wait_for_selector(self, selector, timeout=None):
        self.calls.append(('wait_for_selector', selector, timeout))
        if self.wait_error:
            raise self.wait_error

    async def evaluate(self, script, arg=None):
        self.calls.append(('evaluate', arg))
        if self.evaluate_error:
            raise self.evaluate_error
        return self.raw


class FakeSessionFactory:
    """Session factory yielding a FakePage and counting open/close."""

    def __init__(self, page):
        self.page = page
        self.opened = 0
        self.closed = 0

    def __call__(self, settings):
        return self._session()

    @asynccontextmanager
    async def _session(self):
        self.opened += 1
        try:
            yield self.page
        finally:
            self.closed += 1


class FakeScraper:
    """Store scraper returning a canned outcome."""

    def __init__(self, store_id, result=None, error=None):
        self.store_id = store_id
        self.result = result
        self.error = error
        self.queries = []

    async def lookup(self, game_name):
        self.queries.append(game_name)
        if self.error:
            raise self.error
        if isinstance(self.result, SearchOutcome):
            return self.result
        if self.result is None:
            return SearchOutcome.not_found()
        return SearchOutcome.ok(self.result)


def make_registry(results):
    """Registry of FakeScrapers from {store_id: StoreResult | SearchOutcome | None | Exception}."""
    registry = StoreScraperRegistry()
    for store_id, value in results.items():
        if isinstance(value, Exception):
            registry.register(FakeScraper(store_id, error=value))
        else:
            registry.register(FakeScraper(store_id, result=value))
    return registry


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def steam_result():
    return StoreResult(
        name='Hades',
        price='$19.99',
        discount='20',
        image='https://cdn.steam/hades.jpg',
        platforms=['Windows', 'Mac'],
        genres=[],
        url='https://store.steampowered.com/app/1145360/Hades/',
    )


@pytest.fixture
def epic_result():
    return StoreResult(
        name='Hades',
        price='$24.99',
        image='https://cdn.epic/hades.jpg',
        platforms=['PC'],
        url='https://store.epicgames.com/en-US/p/hades',
    )


@pytest.fixture
def all_store_results(steam_result, epic_result):
    return {
        'steam': steam_result,
        'epic': epic_result,
        'playstation': StoreResult(name='Hades', price='$24.99', image='https://cdn.ps/hades.jpg', platforms=['PlayStation']),
        'xbox': None,
        'nintendo': StoreResult(name='Hades', price='N/A', platforms=['Nintendo Switch']),
    }
