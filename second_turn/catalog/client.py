"""
BoardGameGeek XML API2 client.

Wraps ``/search`` and ``/thing``, validates responses into typed models and
memoizes results in an injected ``LRUCache``. Network and parse failures
surface as ``UpstreamUnavailable``; nothing is retried.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

import requests
from pydantic import ValidationError

from ..config import BGG_TIMEOUT, DEFAULT_SEARCH_TYPES, USER_AGENT
from ..error_handling import InvalidInput, UpstreamUnavailable
from .cache import LRUCache
from .decoder import items_of, parse_xml
from .schemas import CatalogDetails, CatalogItem, VersionRecord

logger = logging.getLogger(__name__)

KindFilter = Union[str, Iterable[str], None]


class CatalogClient:
    """
    Client for the BoardGameGeek catalog.
    """

    def __init__(self, base_url: str, cache: LRUCache,
                 session: Optional[requests.Session] = None,
                 timeout: float = BGG_TIMEOUT, api_token: Optional[str] = None):
        """
        Initialize the catalog client.

        Args:
            base_url: XML API2 root, e.g. https://boardgamegeek.com/xmlapi2
            cache: Result cache shared by every call on this client
            session: HTTP session; a new one is created when omitted
            timeout: Per-request timeout in seconds
            api_token: Optional bearer token for the catalog API
        """
        self.base_url = base_url.rstrip("/")
        self.cache = cache
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})
        if api_token:
            self.session.headers.update({"Authorization": f"Bearer {api_token}"})

    def _fetch(self, endpoint: str, params: Dict[str, str]) -> Dict[str, Any]:
        """GET an endpoint and decode its XML body."""
        url = f"{self.base_url}{endpoint}"
        logger.info(f"Fetching {url} with params {params}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.Timeout as e:
            raise UpstreamUnavailable(f"Catalog API timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            raise UpstreamUnavailable(f"Catalog API request failed: {e}") from e

        if response.status_code != 200:
            raise UpstreamUnavailable(f"Catalog API returned status {response.status_code}")
        return parse_xml(response.content)

    def search(self, query: str, kind_filter: KindFilter = None) -> List[CatalogItem]:
        """
        Search the catalog by name.

        Args:
            query: Free-text name query
            kind_filter: Raw BGG type or list of types; base games and
                expansions when omitted

        Returns:
            Hits in catalog order, first occurrence of each id only
        """
        if not query or not query.strip():
            raise InvalidInput("Search query is required")

        if kind_filter is None:
            types = None
        elif isinstance(kind_filter, str):
            types = kind_filter
        else:
            types = ",".join(kind_filter)
        cache_key = f"search:{query.lower()}:{types or 'all'}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for {cache_key}")
            return list(cached)

        params = {
            "query": query,
            "exact": "0",
            "type": types or ",".join(DEFAULT_SEARCH_TYPES),
        }
        data = self._fetch("/search", params)

        results: List[CatalogItem] = []
        seen = set()
        for raw in items_of(data):
            item = self._validate(CatalogItem, raw)
            if item is None or item.id in seen:
                continue
            seen.add(item.id)
            results.append(item)

        logger.info(f"Search '{query}' returned {len(results)} unique items")
        self.cache.set(cache_key, tuple(results))
        return results

    def get_details(self, game_id: str) -> Optional[CatalogDetails]:
        """
        Fetch one item with statistics.

        Returns:
            The item, or None when the catalog has no item with this id
        """
        game_id = self._require_id(game_id)
        cache_key = f"game:{game_id}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for {cache_key}")
            return cached

        data = self._fetch("/thing", {"id": game_id, "stats": "1"})
        for raw in items_of(data):
            game = self._validate(CatalogDetails, raw)
            if game is not None:
                self.cache.set(cache_key, game)
                return game

        logger.info(f"No catalog item found for id {game_id}")
        return None

    def get_many_details(self, ids: List[str]) -> List[CatalogDetails]:
        """
        Fetch several items in a single request.

        Args:
            ids: Catalog ids; an empty list returns [] without a request

        Returns:
            Items in the order the catalog returned them
        """
        if not ids:
            return []

        ids = [self._require_id(game_id) for game_id in ids]
        cache_key = f"games:{','.join(sorted(ids))}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for {cache_key}")
            return list(cached)

        data = self._fetch("/thing", {"id": ",".join(ids), "stats": "1"})
        games = [game for game in (self._validate(CatalogDetails, raw) for raw in items_of(data)) if game]

        self.cache.set(cache_key, tuple(games))
        return games

    def get_expansions(self, game_id: str) -> List[CatalogDetails]:
        """Fetch every expansion linked from a base game."""
        game = self.get_details(game_id)
        if game is None:
            return []

        expansion_ids = game.expansion_ids
        if not expansion_ids:
            return []

        logger.info(f"Game {game_id} links {len(expansion_ids)} expansions")
        return self.get_many_details(expansion_ids)

    def get_versions(self, game_id: str) -> Optional[List[VersionRecord]]:
        """
        Fetch published versions of a game.

        Returns:
            Version records, or None when the catalog lists none
        """
        game_id = self._require_id(game_id)
        cache_key = f"versions:{game_id}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for {cache_key}")
            return list(cached)

        data = self._fetch("/thing", {"id": game_id, "versions": "1"})
        items = items_of(data)
        if not items or not isinstance(items[0], dict):
            return None

        block = items[0].get("versions")
        if not isinstance(block, dict) or not block.get("item"):
            return None

        versions = [v for v in (self._validate(VersionRecord, raw) for raw in block["item"]) if v]
        self.cache.set(cache_key, tuple(versions))
        return versions

    @staticmethod
    def _require_id(game_id: Any) -> str:
        text = "" if game_id is None else str(game_id).strip()
        if not text:
            raise InvalidInput("Game ID is required")
        return text

    @staticmethod
    def _validate(model, raw: Any):
        """Validate one raw item; a broken item is skipped, not fatal."""
        if not isinstance(raw, dict):
            logger.warning(f"Skipping malformed catalog item: {raw!r}")
            return None
        try:
            return model.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Skipping catalog item {raw.get('id')!r}: {e.error_count()} validation error(s)")
            return None
