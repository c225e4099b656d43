"""
Second Turn - board game lookup for the marketplace.

This package provides two ways to find a game:
1. Searching and fetching details from the BoardGameGeek XML API
2. Searching a local snapshot of the BGG rank dump
"""

__version__ = "0.1.0"

# Main package imports for convenience
from .catalog import CatalogClient, CatalogDetails, CatalogItem, LRUCache, VersionRecord
from .local_index import BoardgameService, rank_results
from .models import ItemKind, LocalIndexRecord
from .logging_config import setup_logging

__all__ = [
    "BoardgameService",
    "CatalogClient",
    "CatalogDetails",
    "CatalogItem",
    "ItemKind",
    "LRUCache",
    "LocalIndexRecord",
    "VersionRecord",
    "rank_results",
    "setup_logging",
]
