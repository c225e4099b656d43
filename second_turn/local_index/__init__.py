"""
Local index module for searching the BGG rank dump.

This module handles:
- Loading the rank CSV once into memory
- Name and id search over the loaded games
- Popularity ordering of search results
"""

from .ranking import rank_results
from .service import BoardgameService

__all__ = [
    "BoardgameService",
    "rank_results",
]
