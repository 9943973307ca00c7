"""Testing generators – Hypothesis strategies for order records."""
from formsearch.testing.generators.strategies import order_strategy, orders_strategy

__all__ = ["order_strategy", "orders_strategy"]
