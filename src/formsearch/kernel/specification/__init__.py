"""Kernel specification – predicate expression tree evaluated against records."""

from formsearch.kernel.specification.base import (
    AlwaysSatisfied,
    AndSpecification,
    BaseSpecification,
    NotSpecification,
    OrSpecification,
    Specification,
)
from formsearch.kernel.specification.comparison import (
    Comparison,
    ComparisonSpecification,
    read_member,
)
from formsearch.kernel.specification.quantified import (
    NEGATION_MARKER,
    QuantifiedSpecification,
    Quantifier,
    parse_quantifier,
)

__all__ = [
    "NEGATION_MARKER",
    "AlwaysSatisfied",
    "AndSpecification",
    "BaseSpecification",
    "Comparison",
    "ComparisonSpecification",
    "NotSpecification",
    "OrSpecification",
    "QuantifiedSpecification",
    "Quantifier",
    "Specification",
    "parse_quantifier",
    "read_member",
]
