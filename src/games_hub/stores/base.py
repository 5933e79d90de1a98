"""
Base Store Scraper
Abstract base class that all store scrapers must inherit from
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional
from urllib.parse import quote, urljoin

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from games_hub.config import NAVIGATION_TIMEOUT_MS, SETTLE_TIMEOUT_MS, Settings, get_settings
from games_hub.models import FREE_PRICE, MISSING_PRICE, SearchOutcome, StoreResult
from games_hub.stores.browser import browser_session

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves untouched
URI_COMPONENT_SAFE = "-_.!~*'()"

FREE_PRICE_LABELS = ('Free', 'Free to Play')

# Reads the first search result using the selectors passed in from Python
EXTRACT_FIRST_RESULT_SCRIPT = '''
    (selectors) => {
        const first = document.querySelector(selectors.result);
        if (!first) return null;

        const text = (selector) => {
            if (!selector) return null;
            const el = first.querySelector(selector);
            const value = el ? el.textContent.trim() : '';
            return value || null;
        };

        const link = first.matches('a') ? first : (first.querySelector('a') || first.closest('a'));
        const img = first.querySelector('img');

        const platforms = [];
        for (const [name, selector] of Object.entries(selectors.platformIcons || {})) {
            if (first.querySelector(selector)) platforms.push(name);
        }

        return {
            title: text(selectors.title),
            price: text(selectors.price),
            discount: text(selectors.discount),
            image: img && img.src ? img.src : null,
            platforms: platforms,
            href: link ? link.getAttribute('href') : null
        };
    }
'''


class StoreScraper(ABC):
    """
    Abstract base class for all store scrapers.
    Each store implementation must inherit from this class.

    Subclasses only describe the store (URLs and selectors); searching,
    waiting, extraction and normalization are shared.
    """

    def __init__(self, settings: Optional[Settings] = None, session_factory: Optional[Callable] = None):
        """
        Args:
            settings: Settings used for browser launch (defaults to environment settings)
            session_factory: Callable taking settings and returning an async
                context manager that yields a Playwright page
        """
        self.settings = settings or get_settings()
        self.session_factory = session_factory or browser_session

    @property
    @abstractmethod
    def store_id(self) -> str:
        """
        Store key used in aggregated results.

        Examples: 'steam', 'epic', 'playstation'
        """
        pass

    @property
    @abstractmethod
    def store_name(self) -> str:
        """Display name used in log messages, e.g. 'Steam'."""
        pass

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Store origin used to make result links absolute."""
        pass

    @property
    @abstractmethod
    def search_url_template(self) -> str:
        """
        Search page URL with a '{query}' placeholder.

        The placeholder receives the percent-encoded game name.
        """
        pass

    @property
    @abstractmethod
    def result_selector(self) -> str:
        """CSS selector of the first search result element."""
        pass

    @property
    @abstractmethod
    def field_selectors(self) -> Dict[str, Optional[str]]:
        """
        CSS selectors relative to the first result.

        Returns:
            Dict with 'title', 'price' and 'discount' keys (None to skip a field)
        """
        pass

    @property
    def results_selector(self) -> str:
        """Selector waited on before extraction. Defaults to the first result."""
        return self.result_selector

    @property
    def results_timeout_ms(self) -> int:
        """Upper bound on the results wait."""
        return SETTLE_TIMEOUT_MS

    @property
    def platforms(self) -> List[str]:
        """Fixed platforms for stores that sell on a single platform."""
        return []

    @property
    def platform_icons(self) -> Dict[str, str]:
        """Platform name -> icon selector, for stores that mark platforms per result."""
        return {}

    def search_url(self, game_name: str) -> str:
        """Build the store search URL for a game name."""
        return self.search_url_template.format(query=quote(game_name, safe=URI_COMPONENT_SAFE))

    async def search(self, game_name: str) -> Optional[StoreResult]:
        """
        Search the store and return the first result.

        Args:
            game_name: Free-text game name

        Returns:
            StoreResult, or None when nothing was found or the lookup failed
        """
        outcome = await self.lookup(game_name)
        return outcome.result

    async def lookup(self, game_name: str) -> SearchOutcome:
        """
        Search the store and report how the lookup ended.

        Never raises: failures are logged and returned as an 'error' outcome.
        """
        try:
            url = self.search_url(game_name)
            async with self.session_factory(self.settings) as page:
                await page.goto(url, wait_until='domcontentloaded', timeout=NAVIGATION_TIMEOUT_MS)
                await self.wait_for_results(page)
                raw = await self.extract_first_result(page)
        except Exception as e:
            logger.error(f"{self.store_name} scraping error: {e}")
            return SearchOutcome.error(str(e))

        if raw is None:
            logger.info(f"{self.store_name}: no result for '{game_name}'")
            return SearchOutcome.not_found()

        return SearchOutcome.ok(self.build_result(raw))

    async def wait_for_results(self, page) -> None:
        """Wait for the results selector; a timeout just means extraction finds nothing."""
        try:
            await page.wait_for_selector(self.results_selector, timeout=self.results_timeout_ms)
        except PlaywrightTimeoutError:
            logger.debug(f"{self.store_name}: '{self.results_selector}' not found within {self.results_timeout_ms}ms")

    async def extract_first_result(self, page) -> Optional[Dict]:
        """Run the extraction script in the page."""
        selectors = {
            'result': self.result_selector,
            'title': self.field_selectors.get('title'),
            'price': self.field_selectors.get('price'),
            'discount': self.field_selectors.get('discount'),
            'platformIcons': self.platform_icons,
        }
        return await page.evaluate(EXTRACT_FIRST_RESULT_SCRIPT, selectors)

    def build_result(self, raw: Dict) -> StoreResult:
        """
        Normalize raw extracted fields into a StoreResult.

        Args:
            raw: Dict from the extraction script (title, price, discount,
                image, platforms, href)
        """
        if self.platform_icons:
            platforms = list(raw.get('platforms') or [])
        else:
            platforms = list(self.platforms)

        return StoreResult(
            name=raw.get('title'),
            price=self.normalize_price(raw.get('price')),
            discount=self.normalize_discount(raw.get('discount')),
            image=raw.get('image') or None,
            platforms=platforms,
            genres=[],
            url=self.resolve_url(raw.get('href')),
        )

    def normalize_price(self, price: Optional[str]) -> str:
        """Missing prices become 'N/A'; free labels become 'Free'."""
        if not price:
            return MISSING_PRICE
        price = price.strip()
        if price in FREE_PRICE_LABELS:
            return FREE_PRICE
        return price

    def normalize_discount(self, discount: Optional[str]) -> Optional[str]:
        """Keep digits only ('-25%' -> '25')."""
        if not discount:
            return None
        digits = re.sub(r'\D', '', discount)
        return digits or None

    def resolve_url(self, href: Optional[str]) -> Optional[str]:
        """Make a result link absolute against the store origin."""
        if not href:
            return None
        return urljoin(self.base_url, href)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.store_id})"
