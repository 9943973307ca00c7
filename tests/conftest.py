"""Shared fixtures: the sample order dataset and a search engine over it."""
from __future__ import annotations

import pytest

from formsearch.application.search import CriteriaSearchEngine
from formsearch.testing.fixtures import Order, sample_orders


@pytest.fixture
def orders() -> list[Order]:
    return sample_orders()


@pytest.fixture
def engine(orders: list[Order]) -> CriteriaSearchEngine[Order]:
    return CriteriaSearchEngine(orders)
