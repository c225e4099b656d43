"""
In-memory game index built from the BoardGameGeek rank dump CSV.

The file is read once; searches are linear scans over the loaded records.
"""

import logging
import math
import re
import threading
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from ..error_handling import IndexUnavailable, InvalidInput
from ..models import ItemKind, LocalIndexRecord

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")

REQUIRED_COLUMNS = ("id", "name")


class BoardgameService:
    """
    Name and id search over a fixed snapshot of the catalog.
    """

    def __init__(self, csv_path: Path):
        """
        Initialize the service. Nothing is read until ``load`` runs.

        Args:
            csv_path: Path to the rank dump CSV
        """
        self.csv_path = Path(csv_path)
        self._lock = threading.Lock()
        self._records: Optional[Tuple[LocalIndexRecord, ...]] = None
        self._error: Optional[IndexUnavailable] = None

    @property
    def is_ready(self) -> bool:
        return self._records is not None

    @property
    def count(self) -> int:
        return len(self._records) if self._records is not None else 0

    def load(self) -> None:
        """
        Read the CSV exactly once.

        Callers arriving while the first load runs block on it and share
        its outcome. A failed load is remembered and re-raised on every call.

        Raises:
            IndexUnavailable: the file could not be read, lacks id/name columns,
                or has headers that collide once normalized
        """
        with self._lock:
            if self._records is not None:
                return
            if self._error is not None:
                raise self._error

            try:
                records = self._read_records()
            except Exception as e:
                logger.error(f"Loading game index from {self.csv_path} failed; "
                             f"the index stays unavailable until restart: {e}")
                self._error = IndexUnavailable(f"Game index could not be loaded from {self.csv_path}")
                raise self._error from e

            self._records = records
            logger.info(f"Loaded {len(records)} valid games from {self.csv_path}")

    def start_background_load(self) -> threading.Thread:
        """Warm the index on a daemon thread."""
        thread = threading.Thread(target=self._background_load, name="boardgame-index-load", daemon=True)
        thread.start()
        return thread

    def _background_load(self) -> None:
        try:
            self.load()
        except IndexUnavailable:
            # Already logged; searches will raise it
            return

    def _read_records(self) -> Tuple[LocalIndexRecord, ...]:
        df = pd.read_csv(self.csv_path, dtype=str, keep_default_na=False)
        df.columns = [str(column).strip().lower() for column in df.columns]
        duplicated = sorted(set(df.columns[df.columns.duplicated()]))
        if duplicated:
            raise ValueError(f"CSV has duplicate columns after normalizing headers: {', '.join(duplicated)}")

        missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
        if missing:
            raise ValueError(f"CSV is missing required columns: {', '.join(missing)}")

        def numeric(column: str) -> pd.Series:
            if column not in df.columns:
                return pd.Series([float("nan")] * len(df), index=df.index)
            return pd.to_numeric(df[column].str.strip(), errors="coerce")

        years = numeric("yearpublished")
        ranks = numeric("rank")
        rating_column = "bayesaverage" if "bayesaverage" in df.columns else "average"
        ratings = numeric(rating_column)
        if "is_expansion" in df.columns:
            expansions = df["is_expansion"].str.strip()
        else:
            expansions = pd.Series([""] * len(df), index=df.index)

        records = []
        skipped = 0
        for game_id, name, year, rank, rating, is_expansion in zip(
                df["id"], df["name"], years, ranks, ratings, expansions):
            game_id = game_id.strip() if isinstance(game_id, str) else ""
            if not game_id or not isinstance(name, str) or not name.strip():
                skipped += 1
                continue

            rank_value = _whole(rank)
            records.append(LocalIndexRecord(
                id=game_id,
                name=name,
                year_published=_whole(year),
                rank=rank_value if rank_value is not None and rank_value > 0 else None,
                average_rating=float(rating) if math.isfinite(rating) else None,
                kind=ItemKind.EXPANSION if is_expansion == "1" else ItemKind.BASE_GAME,
            ))

        if skipped:
            logger.debug(f"Skipped {skipped} rows without an id or name")
        return tuple(records)

    def search(self, query: str) -> List[LocalIndexRecord]:
        """
        Search loaded games by id or name.

        An all-digit query matches the id exactly and returns at most one
        record. Any other query matches names containing it, ignoring case,
        in file order.

        Raises:
            InvalidInput: blank query
            IndexUnavailable: the index failed to load
        """
        if not query or not query.strip():
            raise InvalidInput("Query parameter is required")

        self.load()
        records = self._records or ()

        if _DIGITS.fullmatch(query):
            for record in records:
                if record.id == query:
                    return [record]
            return []

        needle = query.lower()
        matches = []
        for record in records:
            if not isinstance(record.name, str):
                logger.warning(f"Search skipped an item with a non-string name: {record!r}")
                continue
            if needle in record.name.lower():
                matches.append(record)
        return matches


def _whole(value: float) -> Optional[int]:
    """Integer part of a parsed number, ``None`` for NaN or infinity."""
    if pd.isna(value) or not math.isfinite(value):
        return None
    return int(value)
