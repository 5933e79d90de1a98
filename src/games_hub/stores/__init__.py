"""Store scrapers: one per supported storefront"""
from .base import StoreScraper
from .epic import EpicScraper
from .nintendo import NintendoScraper
from .playstation import PlayStationScraper
from .registry import StoreScraperRegistry, build_default_registry
from .steam import SteamScraper
from .xbox import XboxScraper

__all__ = [
    'StoreScraper',
    'SteamScraper',
    'EpicScraper',
    'PlayStationScraper',
    'XboxScraper',
    'NintendoScraper',
    'StoreScraperRegistry',
    'build_default_registry',
]
