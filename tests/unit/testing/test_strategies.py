"""Unit tests for the hypothesis strategies and sample fixtures."""

from __future__ import annotations

from hypothesis import given

from formsearch.testing.fixtures import Order, OrderSearch, sample_orders
from formsearch.testing.generators import order_strategy, orders_strategy


class TestOrderStrategy:
    @given(order_strategy())
    def test_builds_orders(self, order: Order) -> None:
        assert isinstance(order, Order)
        assert len(order.items) <= 3
        assert len(set(order.tags)) == len(order.tags)

    @given(order_strategy(tx_number=7))
    def test_fixed_tx_number(self, order: Order) -> None:
        assert order.tx_number == 7


class TestOrdersStrategy:
    @given(orders_strategy(max_size=8))
    def test_numbered_in_order(self, orders: list[Order]) -> None:
        assert [o.tx_number for o in orders] == list(range(1, len(orders) + 1))
        assert len(orders) <= 8


class TestSampleOrders:
    def test_fresh_copies(self) -> None:
        first = sample_orders()
        first[0].tags.append("changed")
        assert "changed" not in sample_orders()[0].tags

    def test_form_targets_resolve(self) -> None:
        assert OrderSearch().compiler().invalid_field(OrderSearch()) is None
