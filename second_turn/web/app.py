"""Flask application factory for the game lookup API."""

from __future__ import annotations

import logging

from flask import Flask

from ..catalog import CatalogClient, LRUCache
from ..config import BGG_API_TOKEN, BGG_API_URL, BGG_TIMEOUT, BOARDGAMES_CSV, CATALOG_CACHE_SIZE
from ..local_index import BoardgameService
from .routes import EXTENSION_KEY, catalog_blueprint

logger = logging.getLogger(__name__)


def build_catalog_client() -> CatalogClient:
    """Return a catalog client configured from the environment."""
    return CatalogClient(
        BGG_API_URL,
        LRUCache(CATALOG_CACHE_SIZE),
        timeout=BGG_TIMEOUT,
        api_token=BGG_API_TOKEN,
    )


def create_app(
    catalog_client: CatalogClient | None = None,
    boardgame_service: BoardgameService | None = None,
    *,
    warm_index: bool = True,
) -> Flask:
    """
    Return a configured Flask application instance.

    Services are built from configuration unless supplied. With
    ``warm_index`` the local index starts loading in the background.
    """
    app = Flask(__name__)
    app.json.sort_keys = False

    if catalog_client is None:
        catalog_client = build_catalog_client()
    if boardgame_service is None:
        boardgame_service = BoardgameService(BOARDGAMES_CSV)

    app.extensions[EXTENSION_KEY] = {
        "catalog_client": catalog_client,
        "boardgame_service": boardgame_service,
    }
    app.register_blueprint(catalog_blueprint)

    if warm_index:
        logger.info(f"Warming game index from {boardgame_service.csv_path}")
        boardgame_service.start_background_load()
    return app
