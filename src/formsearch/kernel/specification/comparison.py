"""Comparison specifications – ``record.a.b <op> value``."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Any, Callable, Sequence, TypeVar

from formsearch.kernel.specification.base import BaseSpecification

T = TypeVar("T")


class Comparison(str, Enum):
    """Binary comparison applied between a record value and a criterion value."""

    EQUAL = "eq"
    NOT_EQUAL = "neq"
    GREATER_THAN = "gt"
    GREATER_OR_EQUAL = "gte"
    LESS_THAN = "lt"
    LESS_OR_EQUAL = "lte"

    @property
    def is_ordering(self) -> bool:
        return self not in (Comparison.EQUAL, Comparison.NOT_EQUAL)

    def apply(self, left: Any, right: Any) -> bool:
        """Compare *left* with *right*.

        Ordering comparisons against ``None`` are false rather than an error,
        so a record with a missing value never satisfies ``gt``/``lte``/...
        """
        if self.is_ordering and (left is None or right is None):
            return False
        return bool(_OPERATORS[self](left, right))


_OPERATORS: dict[Comparison, Callable[[Any, Any], Any]] = {
    Comparison.EQUAL: operator.eq,
    Comparison.NOT_EQUAL: operator.ne,
    Comparison.GREATER_THAN: operator.gt,
    Comparison.GREATER_OR_EQUAL: operator.ge,
    Comparison.LESS_THAN: operator.lt,
    Comparison.LESS_OR_EQUAL: operator.le,
}


def read_member(candidate: Any, segments: Sequence[str]) -> Any:
    """Follow *segments* from *candidate*; a ``None`` along the way yields ``None``."""
    value = candidate
    for segment in segments:
        if value is None:
            return None
        value = getattr(value, segment)
    return value


class ComparisonSpecification(BaseSpecification[T]):
    """``read_member(candidate, segments) <comparison> value``.

    With no segments the candidate itself is compared, which is how elements
    of a collection of scalars are tested.
    """

    def __init__(self, segments: Sequence[str], comparison: Comparison, value: Any) -> None:
        self.segments: tuple[str, ...] = tuple(segments)
        self.comparison = Comparison(comparison)
        self.value = value

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.comparison.apply(read_member(candidate, self.segments), self.value)

    def __repr__(self) -> str:
        path = ".".join(self.segments) or "<self>"
        return f"ComparisonSpecification({path} {self.comparison.value} {self.value!r})"


__all__ = ["Comparison", "ComparisonSpecification", "read_member"]
