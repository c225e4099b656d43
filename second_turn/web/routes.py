"""Game lookup API routes."""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, current_app, jsonify, request

from ..catalog import CatalogClient, VersionRecord
from ..error_handling import InvalidInput, handle_errors
from ..local_index import BoardgameService, rank_results

logger = logging.getLogger(__name__)

catalog_blueprint = Blueprint("catalog", __name__)

EXTENSION_KEY = "second_turn"


def _services() -> dict[str, Any]:
    services = current_app.extensions.get(EXTENSION_KEY)
    if services is None:
        raise RuntimeError("second_turn services are not configured on this app")
    return services


def _catalog() -> CatalogClient:
    return _services()["catalog_client"]


def _local_index() -> BoardgameService:
    return _services()["boardgame_service"]


def _required_arg(name: str, message: str) -> str:
    value = request.args.get(name, "")
    if not value.strip():
        raise InvalidInput(message)
    return value


def _version_payload(version: VersionRecord) -> dict[str, Any]:
    return {
        "id": version.id,
        "name": version.name or "N/A",
        "year": version.year_published if version.year_published is not None else "N/A",
        "publisher": version.publisher,
        "thumbnail": version.thumbnail,
        "image": version.image,
    }


@catalog_blueprint.route("/api/bgg/search")
@handle_errors("Failed to search BGG")
def bgg_search():
    query = _required_arg("q", "Search query is required")
    kinds = [kind for kind in request.args.getlist("type") if kind.strip()]
    results = _catalog().search(query, kinds or None)
    return {"results": [item.model_dump(mode="json") for item in results]}


@catalog_blueprint.route("/api/bgg/thing")
@handle_errors("Failed to fetch game details from BGG")
def bgg_thing():
    game_id = _required_arg("id", "Game ID is required")
    game = _catalog().get_details(game_id)
    if game is None:
        return {"error": "Game not found"}, 404
    return game.model_dump(mode="json")


@catalog_blueprint.route("/api/bgg/game/<game_id>")
@handle_errors("Failed to fetch game details")
def bgg_game(game_id: str):
    client = _catalog()
    game = client.get_details(game_id)
    if game is None:
        return {"error": "Game not found"}, 404

    versions = None
    if request.args.get("versions") == "true":
        raw_versions = client.get_versions(game_id)
        if raw_versions is not None:
            versions = [_version_payload(version) for version in raw_versions]

    return {"game": game.model_dump(mode="json"), "versions": versions}


@catalog_blueprint.route("/api/bgg/game/<game_id>/expansions")
@handle_errors("Failed to fetch expansions")
def bgg_expansions(game_id: str):
    expansions = _catalog().get_expansions(game_id)
    return {"expansions": [game.model_dump(mode="json") for game in expansions]}


@catalog_blueprint.route("/api/search-games")
@handle_errors("Failed to search for games")
def search_games():
    query = _required_arg("q", "Query parameter is required")
    matches = _local_index().search(query)
    ranked = rank_results(matches)
    logger.debug(f"Local search '{query}' matched {len(matches)} games, returning {len(ranked)}")
    return jsonify([record.to_dict() for record in ranked])


@catalog_blueprint.route("/api/health")
def health():
    services = _services()
    index: BoardgameService = services["boardgame_service"]
    client: CatalogClient = services["catalog_client"]
    return {
        "status": "ok",
        "local_index": {"ready": index.is_ready, "games": index.count},
        "cache_entries": len(client.cache),
    }
