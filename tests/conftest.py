"""pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from apriori_transactions import TransactionStore

# {0,1}, {0,1,2}, {1,2}, {0,2}
SCENARIO_LINES = ["0 1\n", "0 1 2\n", "1 2\n", "0 2\n"]


@pytest.fixture
def scenario_store() -> TransactionStore:
    return TransactionStore.from_lines(SCENARIO_LINES)


@pytest.fixture
def basket_store() -> TransactionStore:
    # Groceries-like baskets with a gap in the item ids (4 never appears)
    return TransactionStore.from_transactions(
        [
            [0, 1, 2],
            [1, 2],
            [0, 1, 2, 3],
            [1, 3, 5],
            [0, 1, 5],
            [1, 2, 5],
        ]
    )


@pytest.fixture
def scenario_file(tmp_path):
    path = tmp_path / "transactions.txt"
    path.write_text("".join(SCENARIO_LINES))
    return path
