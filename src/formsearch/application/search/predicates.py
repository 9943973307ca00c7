"""Application search – PredicateBuilder.

Turns one resolved path, a comparison and a literal into a specification
over the record type:

* no collection on the path::

      ComparisonSpecification(("order_customer", "name"), EQUAL, "Billy")

* a collection on the path: the tail after the collection is tested on each
  element and the result lifted through the quantifier::

      QuantifiedSpecification(("items",), ComparisonSpecification(("price",), GTE, 1000), "!any")
"""
from __future__ import annotations

from typing import Any, Generic, TypeVar

from formsearch.application.search.criteria import CriterionField
from formsearch.application.search.paths import PathResolver, ResolvedPath
from formsearch.kernel.specification import (
    BaseSpecification,
    Comparison,
    ComparisonSpecification,
    QuantifiedSpecification,
    Quantifier,
    parse_quantifier,
)
from formsearch.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["PredicateBuilder"]

logger = get_logger(__name__)


class PredicateBuilder(Generic[T]):
    """Build single-criterion specifications for records of ``resolver.root_type``."""

    def __init__(self, resolver: PathResolver) -> None:
        self._resolver = resolver

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    def build(
        self,
        path: ResolvedPath | str,
        comparison: Comparison | str,
        value: Any,
        quantifier: Quantifier | str = Quantifier.ANY,
    ) -> BaseSpecification[T]:
        """Return a specification testing ``record.<path> <comparison> value``.

        The quantifier is validated even when the path crosses no collection.

        Raises:
            UnknownMemberError: *path* is a string that does not resolve.
            UnsupportedNestedCollectionError: *path* crosses two collections.
            MalformedQuantifierError: *quantifier* cannot be parsed.
        """
        parse_quantifier(quantifier)
        resolved = path if isinstance(path, ResolvedPath) else self._resolver.resolve(path)
        comparison = Comparison(comparison)

        if not resolved.crosses_collection:
            return ComparisonSpecification(resolved.segments, comparison, value)

        inner: ComparisonSpecification[Any] = ComparisonSpecification(resolved.tail, comparison, value)
        spec: BaseSpecification[T] = QuantifiedSpecification(resolved.head, inner, quantifier)
        logger.debug(
            "quantified_predicate_built",
            path=resolved.path,
            collection=".".join(resolved.head),
            quantifier=str(getattr(quantifier, "value", quantifier)),
        )
        return spec

    def build_for(self, field: CriterionField, value: Any) -> BaseSpecification[T]:
        """Build the test declared by *field* against *value*."""
        declaration = field.criterion
        return self.build(
            self._resolver.resolve(field.target_path),
            declaration.comparison,
            value,
            declaration.quantifier,
        )
