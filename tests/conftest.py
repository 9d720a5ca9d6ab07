from __future__ import annotations

import pytest

from pocket_table.core.indexer import build_move_tables
from pocket_table.search.bfs import explore_all


@pytest.fixture(scope="session")
def move_tables():
    return build_move_tables()


@pytest.fixture(scope="session")
def full_search(move_tables):
    # Full 3,674,160-state search; shared by every test that needs it.
    return explore_all(move_tables)
