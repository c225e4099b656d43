"""
Popularity ordering for local index results.
"""

from typing import Iterable, List, Tuple

from ..config import SEARCH_RESULT_LIMIT
from ..models import LocalIndexRecord


def _sort_key(record: LocalIndexRecord) -> Tuple[int, float]:
    # Ranked games first, best (lowest) rank first; then unranked by rating
    if record.rank is not None and record.rank > 0:
        return 0, record.rank
    return 1, -(record.average_rating or 0.0)


def rank_results(records: Iterable[LocalIndexRecord], limit: int = SEARCH_RESULT_LIMIT) -> List[LocalIndexRecord]:
    """
    Order search hits for display and keep the top ``limit``.

    Args:
        records: Raw matches from ``BoardgameService.search``
        limit: Maximum number of results returned

    Returns:
        Ranked games ascending by rank, then unranked games by rating
    """
    return sorted(records, key=_sort_key)[:limit]
