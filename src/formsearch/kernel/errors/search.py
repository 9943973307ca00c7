"""Search errors – raised while validating a form or compiling its criteria.

None of these are raised while records are being filtered, sorted or paged:
by then the predicate has already been built from known-good paths.
"""

from __future__ import annotations

from typing import Any

from formsearch.kernel.errors.base import BaseError
from formsearch.kernel.types.introspection import type_name


class SearchError(BaseError):
    """A search form or one of its criteria cannot be used."""

    default_code = "search_error"

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.field_name: str | None = None

    def with_field(self, field_name: str) -> "SearchError":
        """Tag the error with the form field it was raised for and return it."""
        self.field_name = field_name
        self.with_detail(field=field_name)
        return self


class UnknownMemberError(SearchError):
    """A path segment does not name a member of the type reached so far."""

    default_code = "unknown_member"

    def __init__(self, member: str, *, path: str = "", owner: Any = None, **kwargs: Any) -> None:
        owner_name = type_name(owner) if owner is not None else "record"
        super().__init__(
            f"'{member}' is not a member of {owner_name}",
            detail={"member": member, "path": path, "owner": owner_name},
            **kwargs,
        )
        self.member = member
        self.path = path
        self.owner = owner


class UnsupportedValueTypeError(SearchError):
    """Criterion values must be text or an optional type."""

    default_code = "unsupported_value_type"

    def __init__(self, value_type: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Criterion values of type {type_name(value_type)} are not supported; "
            "use str or an optional type",
            detail={"value_type": type_name(value_type)},
            **kwargs,
        )
        self.value_type = value_type


class MalformedQuantifierError(SearchError):
    """A quantifier encoding is too short or names no known method."""

    default_code = "malformed_quantifier"

    def __init__(self, encoding: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid quantifier {encoding!r}",
            detail={"encoding": encoding},
            **kwargs,
        )
        self.encoding = encoding


class UnsupportedNestedCollectionError(SearchError):
    """A path crosses more than one collection."""

    default_code = "unsupported_nested_collection"

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            f"Path '{path}' crosses more than one collection",
            detail={"path": path},
            **kwargs,
        )
        self.path = path


class InvalidSortFieldError(SearchError):
    """The sort field resolves, but not to a single value per record."""

    default_code = "invalid_sort_field"

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot sort by '{path}': the path crosses a collection",
            detail={"path": path},
            **kwargs,
        )
        self.path = path


__all__ = [
    "InvalidSortFieldError",
    "MalformedQuantifierError",
    "SearchError",
    "UnknownMemberError",
    "UnsupportedNestedCollectionError",
    "UnsupportedValueTypeError",
]
