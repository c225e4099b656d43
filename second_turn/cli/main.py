"""
Main CLI entry point for the Second Turn package.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from ..config import BOARDGAMES_CSV, SEARCH_RESULT_LIMIT
from ..error_handling import CatalogError
from ..local_index import BoardgameService, rank_results
from ..logging_config import setup_logging
from ..web import build_catalog_client, create_app

logger = logging.getLogger(__name__)


def _banner(title: str) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def _year(value: Optional[int]) -> str:
    return str(value) if value is not None else "----"


def cmd_search(args: argparse.Namespace) -> int:
    client = build_catalog_client()
    results = client.search(args.query, args.type or None)
    _banner(f"BGG SEARCH: {args.query}")
    for item in results:
        print(f"{item.id:>8} | {_year(item.year_published)} | {item.kind.value:<9} | {item.name}")
    print(f"\nTotal results: {len(results)}")
    return 0


def cmd_details(args: argparse.Namespace) -> int:
    client = build_catalog_client()
    game = client.get_details(args.id)
    if game is None:
        print(f"No game found for id {args.id}")
        return 1

    _banner(f"{game.name} ({_year(game.year_published)})")
    print(f"Type: {game.kind.value}")
    print(f"Players: {game.min_players or '?'}-{game.max_players or '?'}  |  "
          f"Time: {game.playing_time or '?'} min  |  Age: {game.min_age or '?'}+")
    if game.average_rating is not None:
        print(f"Rating: {game.average_rating:.2f} ({game.users_rated or 0} votes)")
    print(f"Rank: {game.rank if game.rank is not None else 'Not ranked'}")
    for label, values in (("Designers", game.designers), ("Publishers", game.publishers),
                          ("Categories", game.categories), ("Mechanics", game.mechanics)):
        if values:
            print(f"{label}: {', '.join(values)}")
    return 0


def cmd_expansions(args: argparse.Namespace) -> int:
    client = build_catalog_client()
    expansions = client.get_expansions(args.id)
    _banner(f"EXPANSIONS FOR {args.id}")
    if not expansions:
        print("No expansions found.")
    for game in expansions:
        print(f"{game.id:>8} | {_year(game.year_published)} | {game.name}")
    return 0


def cmd_versions(args: argparse.Namespace) -> int:
    client = build_catalog_client()
    versions = client.get_versions(args.id)
    _banner(f"VERSIONS FOR {args.id}")
    if not versions:
        print("No versions found.")
        return 0
    for version in versions:
        publisher = f" - {version.publisher}" if version.publisher else ""
        print(f"{version.id:>8} | {_year(version.year_published)} | {version.name or 'N/A'}{publisher}")
    return 0


def cmd_local(args: argparse.Namespace) -> int:
    service = BoardgameService(args.csv)
    matches = service.search(args.query)
    ranked = rank_results(matches, limit=args.limit)
    _banner(f"LOCAL SEARCH: {args.query}")
    for record in ranked:
        rank = f"#{record.rank}" if record.rank is not None else "unranked"
        print(f"{record.id:>8} | {_year(record.year_published)} | {rank:>9} | {record.name}")
    print(f"\nShowing {len(ranked)} of {len(matches)} matches ({service.count} games indexed)")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    app = create_app()
    logger.info(f"Serving game lookup API on {args.host}:{args.port}")
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up board games on BGG and in the local rank index")
    parser.add_argument("--log-file", type=str, default="second_turn.log", help="Log file name or absolute path")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search BGG by name")
    search.add_argument("query")
    search.add_argument("--type", action="append", help="BGG item type (repeatable), e.g. boardgame")
    search.set_defaults(func=cmd_search)

    for name, func, help_text in (
        ("details", cmd_details, "Show BGG details for a game id"),
        ("expansions", cmd_expansions, "List expansions of a game id"),
        ("versions", cmd_versions, "List published versions of a game id"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("id")
        sub.set_defaults(func=func)

    local = subparsers.add_parser("local", help="Search the local rank index")
    local.add_argument("query")
    local.add_argument(
        "--csv",
        type=Path,
        default=BOARDGAMES_CSV,
        help="Rank dump CSV path (default: $BOARDGAMES_CSV, else ./data/boardgames_ranks.csv)",
    )
    local.add_argument("--limit", type=int, default=SEARCH_RESULT_LIMIT, help="Max results shown")
    local.set_defaults(func=cmd_local)

    serve = subparsers.add_parser(
        "serve",
        help="Run the HTTP API",
        description="Run the HTTP API. The local index reads $BOARDGAMES_CSV, "
                    "defaulting to ./data/boardgames_ranks.csv under the working directory.",
    )
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=5000)
    serve.add_argument("--debug", action="store_true")
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)

    try:
        return args.func(args)
    except CatalogError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nProcess interrupted by user")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
