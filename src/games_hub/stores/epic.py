"""
Epic Games Store Scraper
Reads the first card of the Epic Games Store browse page
"""

from typing import Dict, List, Optional

from games_hub.stores.base import StoreScraper


class EpicScraper(StoreScraper):
    """Scraper for store.epicgames.com browse results"""

    @property
    def store_id(self) -> str:
        return "epic"

    @property
    def store_name(self) -> str:
        return "Epic"

    @property
    def base_url(self) -> str:
        return "https://store.epicgames.com"

    @property
    def search_url_template(self) -> str:
        return "https://store.epicgames.com/en-US/browse?q={query}&sortBy=relevancy&sortDir=DESC"

    @property
    def result_selector(self) -> str:
        return '[data-component="CardGridDesktopBase"] a'

    @property
    def field_selectors(self) -> Dict[str, Optional[str]]:
        return {
            'title': '[data-component="Message"]',
            'price': '[data-component="PriceLayout"]',
            'discount': None,
        }

    @property
    def platforms(self) -> List[str]:
        return ['PC']
