"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from formsearch.kernel.errors import (
    BaseError,
    InvalidSortFieldError,
    MalformedQuantifierError,
    SearchError,
    UnknownMemberError,
    UnsupportedNestedCollectionError,
    UnsupportedValueTypeError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "formsearch_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_names_cause(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert err.to_dict()["cause"] == "ValueError: original"
        assert err.cause is err.__cause__

    def test_detail_is_copied(self) -> None:
        detail = {"key": "val"}
        err = BaseError("m", detail=detail)
        err.with_detail(extra=1)
        assert detail == {"key": "val"}
        assert err.detail == {"key": "val", "extra": 1}

    def test_with_detail_returns_self(self) -> None:
        err = BaseError("m")
        assert err.with_detail(path="a.b") is err

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["message"] == "oops"

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class _Owner:
    pass


class TestSearchErrors:
    @pytest.mark.parametrize(
        "err",
        [
            UnknownMemberError("nope"),
            UnsupportedValueTypeError(int),
            MalformedQuantifierError("x"),
            UnsupportedNestedCollectionError("a.b.c"),
            InvalidSortFieldError("items.price"),
        ],
    )
    def test_all_are_search_errors(self, err: SearchError) -> None:
        assert isinstance(err, SearchError)
        assert isinstance(err, BaseError)

    def test_codes(self) -> None:
        assert UnknownMemberError("m").code == "unknown_member"
        assert UnsupportedValueTypeError(int).code == "unsupported_value_type"
        assert MalformedQuantifierError("x").code == "malformed_quantifier"
        assert UnsupportedNestedCollectionError("p").code == "unsupported_nested_collection"
        assert InvalidSortFieldError("p").code == "invalid_sort_field"

    def test_unknown_member_names_owner(self) -> None:
        err = UnknownMemberError("zip", path="customer.zip", owner=_Owner)
        assert err.member == "zip"
        assert err.path == "customer.zip"
        assert err.detail["owner"] == "_Owner"
        assert "_Owner" in err.message

    def test_unsupported_value_type_detail(self) -> None:
        err = UnsupportedValueTypeError(int)
        assert err.detail == {"value_type": "int"}

    def test_malformed_quantifier_keeps_encoding(self) -> None:
        assert MalformedQuantifierError("!").encoding == "!"

    def test_field_name_defaults_to_none(self) -> None:
        assert UnknownMemberError("m").field_name is None

    def test_with_field_tags_and_returns_self(self) -> None:
        err = UnknownMemberError("m")
        assert err.with_field("customer_zip") is err
        assert err.field_name == "customer_zip"
        assert err.detail["field"] == "customer_zip"

    def test_with_field_is_serialised(self) -> None:
        err = MalformedQuantifierError("?").with_field("tag")
        assert json.loads(str(err))["detail"]["field"] == "tag"
