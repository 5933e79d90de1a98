"""
Data models for store results and aggregated games
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

FREE_PRICE = "Free"
MISSING_PRICE = "N/A"


class StoreResult(BaseModel):
    """First search result scraped from a single store."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    price: Optional[str] = None
    discount: Optional[str] = None
    image: Optional[str] = None
    platforms: List[str] = Field(default_factory=list)
    genres: List[str] = Field(default_factory=list)
    url: Optional[str] = None


class SearchOutcome(BaseModel):
    """
    Tagged result of a store lookup.

    'ok' carries a StoreResult, 'not_found' means the page had no first
    result, 'error' means navigation or extraction failed.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal['ok', 'not_found', 'error']
    result: Optional[StoreResult] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, result: StoreResult) -> "SearchOutcome":
        return cls(status='ok', result=result)

    @classmethod
    def not_found(cls) -> "SearchOutcome":
        return cls(status='not_found')

    @classmethod
    def error(cls, reason: str) -> "SearchOutcome":
        return cls(status='error', reason=reason)


class AggregatedGame(BaseModel):
    """Results for one game across every store, plus derived summary fields."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    stores: Dict[str, Optional[StoreResult]]
    best_price: Optional[str] = Field(default=None, alias='bestPrice')
    platforms: List[str] = Field(default_factory=list)
    genres: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)

    def found_results(self) -> List[StoreResult]:
        """Non-null store results in store order."""
        return [result for result in self.stores.values() if result is not None]

    def to_batch_entry(self) -> Dict:
        """
        Batch representation: a single image instead of the image list.

        Summary fields are only present when at least one store returned a
        result.
        """
        entry = {
            'name': self.name,
            'stores': {
                store_id: result.model_dump() if result is not None else None
                for store_id, result in self.stores.items()
            },
        }
        if self.found_results():
            entry['bestPrice'] = self.best_price
            entry['platforms'] = list(self.platforms)
            entry['genres'] = list(self.genres)
            entry['image'] = next((image for image in self.images if image), None)
        return entry


class HealthResponse(BaseModel):
    status: str
    message: str
    version: str
