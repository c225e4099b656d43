"""
Catalog module for BoardGameGeek lookups.

This module handles:
- BGG XML API2 requests
- Normalizing response shapes into typed models
- Caching results for the life of the client
"""

from .cache import LRUCache
from .client import CatalogClient
from .schemas import CatalogDetails, CatalogItem, CatalogLink, VersionRecord

__all__ = [
    "CatalogClient",
    "CatalogDetails",
    "CatalogItem",
    "CatalogLink",
    "LRUCache",
    "VersionRecord",
]
