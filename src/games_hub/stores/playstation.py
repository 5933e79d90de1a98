"""
PlayStation Store Scraper
"""

from typing import Dict, List, Optional

from games_hub.stores.base import StoreScraper


class PlayStationScraper(StoreScraper):
    """Scraper for store.playstation.com search results"""

    @property
    def store_id(self) -> str:
        return "playstation"

    @property
    def store_name(self) -> str:
        return "PlayStation"

    @property
    def base_url(self) -> str:
        return "https://store.playstation.com"

    @property
    def search_url_template(self) -> str:
        return "https://store.playstation.com/en-us/search/{query}"

    @property
    def result_selector(self) -> str:
        return '[data-qa="search-results"] section'

    @property
    def field_selectors(self) -> Dict[str, Optional[str]]:
        return {
            'title': '[data-qa*="product-name"]',
            'price': '[data-qa*="price"]',
            'discount': None,
        }

    @property
    def platforms(self) -> List[str]:
        return ['PlayStation']
