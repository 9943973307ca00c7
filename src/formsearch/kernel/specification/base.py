"""Specification pattern – composable boolean record predicates."""

from __future__ import annotations

import abc
from typing import Generic, TypeVar

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """Abstract base for specifications – provides operator overloads.

    Subclass this (or ``Specification``) and implement ``is_satisfied_by``.
    Specifications are callable, so a compiled one can be handed straight to
    :func:`filter`.

    Example::

        class Shipped(BaseSpecification[Order]):
            def is_satisfied_by(self, candidate: Order) -> bool:
                return candidate.shipped

        spec = Shipped() & PlacedAfter(cutoff)
        shipped_orders = list(filter(spec, orders))
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)

    # Operator overloads -----------------------------------------------
    def __and__(self, other: "BaseSpecification[T]") -> "BaseSpecification[T]":
        if isinstance(other, AlwaysSatisfied):
            return self
        return AndSpecification(self, other)

    def __or__(self, other: "BaseSpecification[T]") -> "OrSpecification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "NotSpecification[T]":
        return NotSpecification(self)


Specification = BaseSpecification  # type: ignore[misc]


class AlwaysSatisfied(BaseSpecification[T]):
    """Identity for ``&``: matches every candidate."""

    def is_satisfied_by(self, candidate: T) -> bool:  # noqa: ARG002
        return True

    def __and__(self, other: BaseSpecification[T]) -> BaseSpecification[T]:
        return other

    def __repr__(self) -> str:
        return "AlwaysSatisfied()"


class AndSpecification(BaseSpecification[T]):
    """Conjunction of two specifications."""

    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) and self._right.is_satisfied_by(candidate)

    def __repr__(self) -> str:
        return f"({self._left!r} & {self._right!r})"


class OrSpecification(BaseSpecification[T]):
    """Disjunction of two specifications."""

    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) or self._right.is_satisfied_by(candidate)

    def __repr__(self) -> str:
        return f"({self._left!r} | {self._right!r})"


class NotSpecification(BaseSpecification[T]):
    """Negation of a specification."""

    def __init__(self, spec: BaseSpecification[T]) -> None:
        self._spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._spec.is_satisfied_by(candidate)

    def __repr__(self) -> str:
        return f"~{self._spec!r}"


__all__ = [
    "AlwaysSatisfied",
    "AndSpecification",
    "BaseSpecification",
    "NotSpecification",
    "OrSpecification",
    "Specification",
]
