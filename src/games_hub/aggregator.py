"""
Game Search Aggregator
Fans a game search out to every store scraper and merges the results
"""

import asyncio
import logging
import re
from typing import Dict, Iterable, List, Optional

from games_hub.config import BATCH_DELAY_MS, Settings
from games_hub.models import FREE_PRICE, AggregatedGame, SearchOutcome, StoreResult
from games_hub.stores.registry import StoreScraperRegistry, build_default_registry

logger = logging.getLogger(__name__)

LEADING_NUMBER = re.compile(r'\d+(?:\.\d+)?|\.\d+')

INVALID_NAME_ERROR = "Game name must be a string"


def parse_price(price: Optional[str]) -> Optional[float]:
    """
    Extract the numeric value from a price string.

    Everything except digits and dots is dropped, then the leading number is
    read, so '$1,299.99' gives 1299.99 and 'N/A' gives None.
    """
    if not price:
        return None
    cleaned = re.sub(r'[^0-9.]', '', price)
    match = LEADING_NUMBER.match(cleaned)
    if not match:
        return None
    return float(match.group())


def format_price(value: float) -> str:
    return f"${value:.2f}"


def find_best_price(results: Iterable[Optional[StoreResult]]) -> Optional[str]:
    """Lowest parseable price across results, ignoring free and missing prices."""
    prices = []
    for result in results:
        if result is None or result.price is None or result.price == FREE_PRICE:
            continue
        value = parse_price(result.price)
        if value is not None:
            prices.append(value)

    if not prices:
        return None
    return format_price(min(prices))


def merge_unique(groups: Iterable[Iterable[str]]) -> List[str]:
    """Union of several lists, keeping the order of first appearance."""
    merged = {}
    for group in groups:
        for item in group or []:
            merged.setdefault(item, None)
    return list(merged)


def collect_images(results: Iterable[Optional[StoreResult]]) -> List[str]:
    """Non-null images in store order (duplicates kept)."""
    return [result.image for result in results if result is not None and result.image is not None]


def error_entry(game_name, message: str) -> Dict:
    """Batch entry for a game that could not be searched."""
    return {'name': game_name, 'error': message, 'stores': {}}


def build_aggregated_game(name: str, stores: Dict[str, Optional[StoreResult]]) -> AggregatedGame:
    """Derive the summary fields for one game's store results."""
    found = [result for result in stores.values() if result is not None]
    return AggregatedGame(
        name=name,
        stores=stores,
        best_price=find_best_price(found),
        platforms=merge_unique(result.platforms for result in found),
        genres=merge_unique(result.genres for result in found),
        images=collect_images(found),
    )


class GameSearchAggregator:
    """
    Coordinates store scrapers for single and batch game searches.

    Features:
    - Concurrent fan-out to every store for one game, waiting for all to settle
    - A failing store only removes that store from the results
    - Sequential batch processing with a fixed pause between games
    """

    def __init__(
        self,
        registry: Optional[StoreScraperRegistry] = None,
        settings: Optional[Settings] = None,
        batch_delay_ms: int = BATCH_DELAY_MS,
    ):
        """
        Args:
            registry: Store scrapers to query (defaults to all supported stores)
            settings: Settings for the default registry's browser sessions
            batch_delay_ms: Pause after each game in a batch
        """
        self.registry = registry if registry is not None else build_default_registry(settings)
        self.batch_delay_ms = batch_delay_ms

    async def collect_stores(self, game_name: str) -> Dict[str, Optional[StoreResult]]:
        """
        Run every store lookup concurrently.

        Returns:
            Dict of store id -> StoreResult or None, in registry order
        """
        scrapers = self.registry.get_all_scrapers()
        outcomes = await asyncio.gather(
            *(scraper.lookup(game_name) for scraper in scrapers),
            return_exceptions=True,
        )

        stores: Dict[str, Optional[StoreResult]] = {}
        for scraper, outcome in zip(scrapers, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(f"{scraper.store_id} lookup raised: {outcome}")
                stores[scraper.store_id] = None
            elif isinstance(outcome, SearchOutcome):
                if outcome.status == 'error':
                    logger.warning(f"{scraper.store_id}: error ({outcome.reason})")
                else:
                    logger.info(f"{scraper.store_id}: {outcome.status}")
                stores[scraper.store_id] = outcome.result
            else:
                stores[scraper.store_id] = None

        found = sum(1 for result in stores.values() if result is not None)
        logger.info(f"'{game_name}': {found}/{len(stores)} stores returned a result")
        return stores

    async def search_game(self, game_name: str) -> AggregatedGame:
        """Search every store for one game and aggregate the results."""
        logger.info(f"Searching for: {game_name}")
        stores = await self.collect_stores(game_name)
        return build_aggregated_game(game_name, stores)

    async def batch_search(self, game_names: List[str]) -> Dict:
        """
        Search several games one after another.

        A game whose aggregation fails is reported inline with an 'error'
        field and the batch carries on.

        Returns:
            Dict with 'games' (one entry per name) and 'total'
        """
        logger.info(f"Batch searching {len(game_names)} games")

        results = []
        for i, game_name in enumerate(game_names, 1):
            if not isinstance(game_name, str):
                logger.warning(f"Skipping non-string game name: {game_name!r}")
                results.append(error_entry(game_name, INVALID_NAME_ERROR))
            else:
                try:
                    game = await self.search_game(game_name)
                    results.append(game.to_batch_entry())
                except Exception as e:
                    logger.error(f"Error searching {game_name}: {e}")
                    results.append(error_entry(game_name, str(e)))

            # Delay between games
            if i < len(game_names) and self.batch_delay_ms > 0:
                await asyncio.sleep(self.batch_delay_ms / 1000)

        return {'games': results, 'total': len(results)}

    def get_stats(self) -> Dict:
        return {
            'registered_scrapers': self.registry.count(),
            'stores': self.registry.get_store_ids(),
            'batch_delay_ms': self.batch_delay_ms,
        }

    def __repr__(self) -> str:
        return f"GameSearchAggregator({self.registry.count()} stores)"
