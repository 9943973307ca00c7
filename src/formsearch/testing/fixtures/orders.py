"""Testing fixtures – Order / Customer / Address / Item records.

``sample_orders()`` returns five orders:

==  ==========  ========  =====  ==============================
tx  date        customer  zip    item prices
==  ==========  ========  =====  ==============================
1   2016-02-09  Billy     75432  100.00, 200000
2   2016-02-02  John      56545  50.00
3   2016-01-10  Jacob     90210  0.01
4   2015-10-09  Jill      85753  9500.00, 2000.57
5   2015-11-04  Joan      9771   57.99
==  ==========  ========  =====  ==============================
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from formsearch.application.search import Comparison, Quantifier, SearchForm, criterion

__all__ = ["Address", "Customer", "Item", "Order", "OrderSearch", "sample_orders"]


@dataclass
class Address:
    street_number: int
    street_name: str
    zip_code: int


@dataclass
class Customer:
    name: str
    customer_address: Address | None = None


@dataclass
class Item:
    description: str
    price: Decimal


@dataclass
class Order:
    tx_number: int
    tx_date: datetime
    order_customer: Customer | None = None
    items: list[Item] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)


@dataclass
class OrderSearch(SearchForm[Order]):
    transaction_date_from: datetime | None = criterion("tx_date", Comparison.GREATER_OR_EQUAL)
    transaction_date_to: datetime | None = criterion("tx_date", Comparison.LESS_OR_EQUAL)
    tx_number: int | None = criterion()
    customer_name: str | None = criterion("Order.order_customer.name")
    customer_zip: int | None = criterion("Order.order_customer.customer_address.zip_code")
    min_big_ticket_item_price: Decimal | None = criterion("Order.items.price", Comparison.GREATER_OR_EQUAL)
    max_big_ticket_item_price: Decimal | None = criterion(
        "Order.items.price", Comparison.GREATER_OR_EQUAL, Quantifier.NONE
    )
    first_item_description: str | None = criterion("items.description", quantifier=Quantifier.FIRST_MATCH)
    tag: str | None = criterion("tags")


def _order(
    tx: int,
    when: datetime,
    name: str,
    street: tuple[int, str],
    zip_code: int,
    items: list[tuple[str, str]],
    tags: list[str] | None = None,
) -> Order:
    return Order(
        tx_number=tx,
        tx_date=when,
        order_customer=Customer(name, Address(street[0], street[1], zip_code)),
        items=[Item(description, Decimal(price)) for description, price in items],
        tags=tags or [],
    )


def sample_orders() -> list[Order]:
    return [
        _order(1, datetime(2016, 2, 9), "Billy", (11, "Maple"), 75432,
               [("Light bulb", "100.00"), ("House", "200000")], ["home"]),
        _order(2, datetime(2016, 2, 2), "John", (22, "Ironwood"), 56545,
               [("Monitor", "50.00")], ["office"]),
        _order(3, datetime(2016, 1, 10), "Jacob", (33, "Birch"), 90210,
               [("Staple", "0.01")], ["office", "bulk"]),
        _order(4, datetime(2015, 10, 9), "Jill", (44, "Sycamore"), 85753,
               [("Chapstick", "9500.00"), ("Headphones", "2000.57")]),
        _order(5, datetime(2015, 11, 4), "Joan", (55, "Oak"), 9771,
               [("Phone", "57.99")], ["home"]),
    ]
