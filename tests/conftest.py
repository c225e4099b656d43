"""Pytest fixtures shared across the test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from second_turn.catalog import CatalogClient, LRUCache
from tests.helpers import RANKS_CSV_ROWS, FakeSession


@pytest.fixture
def make_client() -> Callable[..., tuple[CatalogClient, FakeSession]]:
    """Build a catalog client whose HTTP calls are answered by ``handler``."""

    def _make(handler: Callable[[str, dict], Any], capacity: int = 64):
        session = FakeSession(handler)
        client = CatalogClient("https://bgg.test/xmlapi2", LRUCache(capacity), session=session, timeout=10)
        return client, session

    return _make


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write rank dump rows to a CSV under ``tmp_path``."""

    def _write(rows: list[str] = RANKS_CSV_ROWS, name: str = "boardgames_ranks.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(rows) + "\n", encoding="utf-8")
        return path

    return _write
