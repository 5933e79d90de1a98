"""
Xbox Store Scraper
"""

from typing import Dict, List, Optional

from games_hub.stores.base import StoreScraper


class XboxScraper(StoreScraper):
    """Scraper for xbox.com search results"""

    @property
    def store_id(self) -> str:
        return "xbox"

    @property
    def store_name(self) -> str:
        return "Xbox"

    @property
    def base_url(self) -> str:
        return "https://www.xbox.com"

    @property
    def search_url_template(self) -> str:
        return "https://www.xbox.com/en-us/search?q={query}"

    @property
    def result_selector(self) -> str:
        return ".ProductCard"

    @property
    def field_selectors(self) -> Dict[str, Optional[str]]:
        return {
            'title': '.ProductCard-title',
            'price': '.ProductCard-price',
            'discount': None,
        }

    @property
    def platforms(self) -> List[str]:
        return ['Xbox']
