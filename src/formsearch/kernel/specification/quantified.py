"""Quantified specifications – lift an element test through a collection."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Sequence, TypeVar

from formsearch.kernel.errors import MalformedQuantifierError
from formsearch.kernel.specification.base import BaseSpecification
from formsearch.kernel.specification.comparison import read_member

T = TypeVar("T")

NEGATION_MARKER = "!"

_MISSING = object()


class Quantifier(str, Enum):
    """Encoded quantifier modes.

    A leading ``!`` negates the quantified result, so ``NONE`` is ``!any``.
    """

    ANY = "any"
    NONE = "!any"
    FIRST_MATCH = "first"


def _any(elements: Iterable[Any], inner: BaseSpecification[Any]) -> bool:
    return any(inner.is_satisfied_by(element) for element in elements)


def _first(elements: Iterable[Any], inner: BaseSpecification[Any]) -> bool:
    first = next(iter(elements), _MISSING)
    if first is _MISSING:
        return False
    return inner.is_satisfied_by(first)


_METHODS = {
    "any": _any,
    "first": _first,
}


def parse_quantifier(encoding: Quantifier | str) -> tuple[str, bool]:
    """Split an encoded quantifier into ``(method, negated)``.

    Raises:
        MalformedQuantifierError: encoding shorter than two characters or
            naming an unknown method.
    """
    raw = encoding.value if isinstance(encoding, Quantifier) else str(encoding)
    if len(raw) < 2:
        raise MalformedQuantifierError(raw)
    negated = raw.startswith(NEGATION_MARKER)
    method = raw[len(NEGATION_MARKER):] if negated else raw
    if method not in _METHODS:
        raise MalformedQuantifierError(raw)
    return method, negated


class QuantifiedSpecification(BaseSpecification[T]):
    """Apply *inner* to the elements of the collection at *segments*.

    * ``any``   – at least one element satisfies *inner*.
    * ``first`` – the first element in iteration order satisfies *inner*;
      an empty collection is false.

    A negated quantifier flips the result (``!any`` means no element
    matches). A ``None`` collection is treated as empty.
    """

    def __init__(
        self,
        segments: Sequence[str],
        inner: BaseSpecification[Any],
        quantifier: Quantifier | str = Quantifier.ANY,
    ) -> None:
        self.segments: tuple[str, ...] = tuple(segments)
        self.inner = inner
        self.method, self.negated = parse_quantifier(quantifier)

    def is_satisfied_by(self, candidate: T) -> bool:
        elements = read_member(candidate, self.segments)
        if elements is None:
            elements = ()
        return _METHODS[self.method](elements, self.inner) != self.negated

    def __repr__(self) -> str:
        marker = NEGATION_MARKER if self.negated else ""
        return f"QuantifiedSpecification({'.'.join(self.segments)} {marker}{self.method} {self.inner!r})"


__all__ = ["NEGATION_MARKER", "QuantifiedSpecification", "Quantifier", "parse_quantifier"]
