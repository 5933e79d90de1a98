"""
Store Scraper Registry
Manages registration and lookup of store scrapers
"""

from typing import Callable, Dict, List, Optional

from games_hub.config import Settings
from games_hub.stores.base import StoreScraper
from games_hub.stores.epic import EpicScraper
from games_hub.stores.nintendo import NintendoScraper
from games_hub.stores.playstation import PlayStationScraper
from games_hub.stores.steam import SteamScraper
from games_hub.stores.xbox import XboxScraper


class StoreScraperRegistry:
    """
    Registry for all available store scrapers.
    Keeps registration order, which is the order stores appear in results.
    """

    def __init__(self):
        """Initialize empty registry"""
        self._scrapers: Dict[str, StoreScraper] = {}

    def register(self, scraper: StoreScraper) -> None:
        """
        Register a store scraper.

        Args:
            scraper: StoreScraper instance to register

        Raises:
            ValueError: If a scraper with this store id is already registered
        """
        store_id = scraper.store_id.lower()

        if store_id in self._scrapers:
            raise ValueError(f"Scraper for '{scraper.store_id}' is already registered")

        self._scrapers[store_id] = scraper

    def get_all_scrapers(self) -> List[StoreScraper]:
        """All registered scrapers in registration order."""
        return list(self._scrapers.values())

    def get_store_ids(self) -> List[str]:
        """Ids of all registered stores in registration order."""
        return [scraper.store_id for scraper in self._scrapers.values()]

    def count(self) -> int:
        return len(self._scrapers)

    def __repr__(self) -> str:
        """String representation of registry"""
        stores = ', '.join(self.get_store_ids())
        return f"StoreScraperRegistry({self.count()} scrapers: {stores})"


def build_default_registry(settings: Optional[Settings] = None, session_factory: Optional[Callable] = None) -> StoreScraperRegistry:
    """
    Registry with every supported store, in result order.

    Add new stores here as they are implemented.
    """
    registry = StoreScraperRegistry()
    for scraper_class in (SteamScraper, EpicScraper, PlayStationScraper, XboxScraper, NintendoScraper):
        registry.register(scraper_class(settings=settings, session_factory=session_factory))
    return registry
