"""Unit tests for PathResolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

import pytest

from formsearch.application.search import PathResolver
from formsearch.kernel.errors import UnknownMemberError, UnsupportedNestedCollectionError
from formsearch.testing.fixtures import Address, Customer, Item, Order


@dataclass
class Branch:
    name: str
    customers: list[Customer] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)


@pytest.fixture
def resolver() -> PathResolver:
    return PathResolver(Order)


class TestDequalify:
    def test_strips_root_type_name(self, resolver: PathResolver) -> None:
        assert resolver.dequalify("Order.order_customer.name") == ["order_customer", "name"]

    def test_keeps_unqualified_path(self, resolver: PathResolver) -> None:
        assert resolver.dequalify("order_customer.name") == ["order_customer", "name"]

    def test_single_segment_is_never_stripped(self, resolver: PathResolver) -> None:
        assert resolver.dequalify("Order") == ["Order"]

    def test_name_match_is_case_sensitive(self, resolver: PathResolver) -> None:
        assert resolver.dequalify("order.tx_number") == ["order", "tx_number"]


class TestResolve:
    def test_single_level(self, resolver: PathResolver) -> None:
        path = resolver.resolve("tx_number")
        assert path.segments == ("tx_number",)
        assert path.value_type is int
        assert not path.crosses_collection

    def test_multi_level_through_optionals(self, resolver: PathResolver) -> None:
        path = resolver.resolve("Order.order_customer.customer_address.zip_code")
        assert path.segments == ("order_customer", "customer_address", "zip_code")
        assert path.types == (Customer | None, Address | None, int)
        assert path.head == path.segments
        assert path.tail == ()

    def test_crossing_a_collection(self, resolver: PathResolver) -> None:
        path = resolver.resolve("Order.items.price")
        assert path.crosses_collection
        assert path.collection_index == 0
        assert path.element_type is Item
        assert path.head == ("items",)
        assert path.tail == ("price",)
        assert path.value_type is Decimal

    def test_ending_on_a_collection(self, resolver: PathResolver) -> None:
        path = resolver.resolve("tags")
        assert path.crosses_collection
        assert path.element_type is str
        assert path.head == ("tags",)
        assert path.tail == ()

    def test_multi_segment_tail(self) -> None:
        path = PathResolver(Branch).resolve("customers.customer_address.zip_code")
        assert path.head == ("customers",)
        assert path.tail == ("customer_address", "zip_code")

    def test_keeps_original_path(self, resolver: PathResolver) -> None:
        assert resolver.resolve("Order.tx_date").path == "Order.tx_date"


class TestResolveFailures:
    def test_unknown_top_level_member(self, resolver: PathResolver) -> None:
        with pytest.raises(UnknownMemberError) as info:
            resolver.resolve("transaction_number")
        assert info.value.member == "transaction_number"
        assert info.value.owner is Order

    def test_unknown_nested_member(self, resolver: PathResolver) -> None:
        with pytest.raises(UnknownMemberError) as info:
            resolver.resolve("order_customer.customer_address.zip")
        assert info.value.member == "zip"
        assert info.value.owner is Address
        assert info.value.path == "order_customer.customer_address.zip"

    def test_unknown_member_on_element_type(self, resolver: PathResolver) -> None:
        with pytest.raises(UnknownMemberError) as info:
            resolver.resolve("items.cost")
        assert info.value.owner is Item

    def test_case_sensitive(self, resolver: PathResolver) -> None:
        with pytest.raises(UnknownMemberError):
            resolver.resolve("TxNumber")

    @pytest.mark.parametrize("path", ["", "Order.", "order_customer..name"])
    def test_empty_segments(self, resolver: PathResolver, path: str) -> None:
        with pytest.raises(UnknownMemberError):
            resolver.resolve(path)

    def test_member_of_scalar(self, resolver: PathResolver) -> None:
        with pytest.raises(UnknownMemberError):
            resolver.resolve("tx_number.real")

    def test_second_collection(self) -> None:
        with pytest.raises(UnsupportedNestedCollectionError):
            PathResolver(Branch).resolve("orders.items.price")

    def test_collection_ending_after_collection(self) -> None:
        with pytest.raises(UnsupportedNestedCollectionError):
            PathResolver(Branch).resolve("orders.tags")

    def test_exists(self, resolver: PathResolver) -> None:
        assert resolver.exists("items.price")
        assert not resolver.exists("items.cost")
        assert not PathResolver(Branch).exists("orders.items.price")


class TestEffectiveType:
    def test_unwraps_collection_when_selecting_single(self) -> None:
        assert PathResolver.effective_type(list[Item], select_single=True) is Item

    def test_keeps_collection_otherwise(self) -> None:
        assert PathResolver.effective_type(list[Item], select_single=False) == list[Item]

    def test_scalar_unchanged(self) -> None:
        assert PathResolver.effective_type(int) is int
