"""Testing support – sample records, search forms and generators.

Import in your tests::

    from formsearch.testing.fixtures import OrderSearch, sample_orders
"""

from formsearch.testing.fixtures import (
    Address,
    Customer,
    Item,
    Order,
    OrderSearch,
    sample_orders,
)
from formsearch.testing.generators import order_strategy, orders_strategy

__all__ = [
    "Address",
    "Customer",
    "Item",
    "Order",
    "OrderSearch",
    "order_strategy",
    "orders_strategy",
    "sample_orders",
]
