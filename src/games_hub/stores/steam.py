"""
Steam Store Scraper
Reads the first row of the Steam store search results
"""

from typing import Dict, Optional

from games_hub.config import STEAM_RESULTS_TIMEOUT_MS
from games_hub.stores.base import StoreScraper


class SteamScraper(StoreScraper):
    """Scraper for store.steampowered.com search results"""

    @property
    def store_id(self) -> str:
        return "steam"

    @property
    def store_name(self) -> str:
        return "Steam"

    @property
    def base_url(self) -> str:
        return "https://store.steampowered.com"

    @property
    def search_url_template(self) -> str:
        return "https://store.steampowered.com/search/?term={query}"

    @property
    def results_selector(self) -> str:
        return "#search_resultsRows"

    @property
    def results_timeout_ms(self) -> int:
        return STEAM_RESULTS_TIMEOUT_MS

    @property
    def result_selector(self) -> str:
        return "#search_resultsRows > a"

    @property
    def field_selectors(self) -> Dict[str, Optional[str]]:
        return {
            'title': '.title',
            # Discounted rows show the final price separately
            'price': '.discount_final_price, .search_price',
            'discount': '.discount_pct',
        }

    @property
    def platform_icons(self) -> Dict[str, str]:
        return {
            'Windows': '.platform_img.win',
            'Mac': '.platform_img.mac',
            'Linux': '.platform_img.linux',
        }
