from typing import Annotated

from fastapi import Depends, Request

from games_hub.aggregator import GameSearchAggregator


async def get_aggregator(request: Request) -> GameSearchAggregator:
    return request.state.aggregator


ActiveAggregator = Annotated[GameSearchAggregator, Depends(get_aggregator)]
