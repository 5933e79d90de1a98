"""
HTTP API for the games hub scraper
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from games_hub import __version__
from games_hub.aggregator import GameSearchAggregator
from games_hub.config import Settings, get_settings
from games_hub.dependencies import ActiveAggregator
from games_hub.models import AggregatedGame, HealthResponse

logger = logging.getLogger(__name__)


async def read_json_body(request: Request) -> Any:
    """Request body as JSON, or None when the body is empty or not JSON."""
    try:
        return await request.json()
    except ValueError:
        return None


def error_response(status_code: int, error: str, message: Optional[str] = None) -> JSONResponse:
    content = {'error': error}
    if message is not None:
        content['message'] = message
    return JSONResponse(status_code=status_code, content=content)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        aggregator = GameSearchAggregator(settings=settings)
        logger.info(f"Aggregator ready: {aggregator.get_stats()['stores']}")
        yield {"aggregator": aggregator}

    app = FastAPI(
        title="Games Hub Scraper API",
        description="Search game prices across Steam, Epic, PlayStation, Xbox and Nintendo",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=['*'],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_model=HealthResponse)
    async def root():
        return HealthResponse(status="online", message="Games Hub Scraper API", version=__version__)

    @app.post("/api/search", response_model=AggregatedGame)
    async def search(request: Request, aggregator: ActiveAggregator):
        """Search one game in every store."""
        payload = await read_json_body(request)
        game_name = payload.get('gameName') if isinstance(payload, dict) else None

        if not isinstance(game_name, str) or not game_name.strip():
            return error_response(status.HTTP_400_BAD_REQUEST, 'Game name is required')

        try:
            return await aggregator.search_game(game_name)
        except Exception as e:
            logger.exception(f"Search error: {e}")
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error', str(e))

    @app.post("/api/batch-search")
    async def batch_search(request: Request, aggregator: ActiveAggregator):
        """Search several games, one after another."""
        payload = await read_json_body(request)
        games = payload.get('games') if isinstance(payload, dict) else None

        if not isinstance(games, list):
            return error_response(status.HTTP_400_BAD_REQUEST, 'Games array is required')

        try:
            return await aggregator.batch_search(games)
        except Exception as e:
            logger.exception(f"Batch search error: {e}")
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error', str(e))

    return app


app = create_app()
