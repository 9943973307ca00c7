"""Testing fixtures – order records and an order search form."""
from formsearch.testing.fixtures.orders import (
    Address,
    Customer,
    Item,
    Order,
    OrderSearch,
    sample_orders,
)

__all__ = ["Address", "Customer", "Item", "Order", "OrderSearch", "sample_orders"]
