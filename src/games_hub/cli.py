"""
Command line entry point: run the API server or search from the terminal
"""

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import List, Optional

import uvicorn

from games_hub.aggregator import GameSearchAggregator
from games_hub.config import Settings, get_settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def run_search(game_names: List[str], settings: Settings) -> dict:
    """Single search shape for one name, batch shape for several."""
    aggregator = GameSearchAggregator(settings=settings)
    if len(game_names) == 1:
        game = await aggregator.search_game(game_names[0])
        return game.model_dump(by_alias=True)
    return await aggregator.batch_search(game_names)


def serve(settings: Settings, host: Optional[str] = None, port: Optional[int] = None) -> None:
    host = host or settings.host
    port = port or settings.port
    print(f"🚀 Server running on port {port}")
    print(f"📡 API endpoint: http://localhost:{port}/api/search")
    uvicorn.run("games_hub.server:app", host=host, port=port, log_level=settings.log_level.lower())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='games-hub',
        description='Games Hub Scraper - Compare game prices across Steam, Epic, PlayStation, Xbox and Nintendo',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start the API server on the configured port
  games-hub serve

  # Single game
  games-hub search "Hades"

  # Multiple games with output
  games-hub search "Hades" "Celeste" -o prices.json
        """
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    serve_parser = subparsers.add_parser('serve', help='Run the HTTP API')
    serve_parser.add_argument('--host', help='Bind address (default: HOST or 0.0.0.0)')
    serve_parser.add_argument('--port', type=int, help='Port (default: PORT or 3000)')

    search_parser = subparsers.add_parser('search', help='Search games from the command line')
    search_parser.add_argument('games', nargs='+', help='Game name(s) to search for')
    search_parser.add_argument('--output', '-o', help='Output JSON file (optional)')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings)

    if args.command == 'serve':
        serve(settings, host=args.host, port=args.port)
        return 0

    results = asyncio.run(run_search(args.games, settings))

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(results, f, indent=2, ensure_ascii=False)

        print(f"\n✓ Results saved to: {output_path}")
    else:
        print(json.dumps(results, indent=2, ensure_ascii=False))

    return 0
