"""
Nintendo eShop Scraper
Search runs client-side from the URL fragment, so results appear after load
"""

from typing import Dict, List, Optional

from games_hub.stores.base import StoreScraper


class NintendoScraper(StoreScraper):
    """Scraper for nintendo.com search results"""

    @property
    def store_id(self) -> str:
        return "nintendo"

    @property
    def store_name(self) -> str:
        return "Nintendo"

    @property
    def base_url(self) -> str:
        return "https://www.nintendo.com"

    @property
    def search_url_template(self) -> str:
        return "https://www.nintendo.com/us/search/#q={query}"

    @property
    def result_selector(self) -> str:
        return ".coveo-result-frame"

    @property
    def field_selectors(self) -> Dict[str, Optional[str]]:
        return {
            'title': '.coveo-title',
            'price': '.coveo-result-cell.price',
            'discount': None,
        }

    @property
    def platforms(self) -> List[str]:
        return ['Nintendo Switch']
