"""Application search – criterion declarations on search form fields."""
from __future__ import annotations

import dataclasses
import functools
import typing
from typing import Any

from formsearch.kernel.specification import Comparison, Quantifier

__all__ = ["CRITERION_METADATA_KEY", "Criterion", "CriterionField", "criterion", "declared_criteria"]

CRITERION_METADATA_KEY = "formsearch.criterion"


@dataclasses.dataclass(frozen=True)
class Criterion:
    """Where a form field points and how it is compared.

    ``target`` is a dotted record path; empty means the field's own name.
    ``quantifier`` only matters when the path crosses a collection.
    """

    target: str = ""
    comparison: Comparison = Comparison.EQUAL
    quantifier: Quantifier | str = Quantifier.ANY


def criterion(
    target: str = "",
    comparison: Comparison | str = Comparison.EQUAL,
    quantifier: Quantifier | str = Quantifier.ANY,
    *,
    default: Any = None,
) -> Any:
    """Declare a search form field as a criterion.

    Example::

        @dataclass
        class OrderSearch(SearchForm[Order]):
            placed_from: datetime | None = criterion("tx_date", Comparison.GREATER_OR_EQUAL)
            customer_name: str | None = criterion("Order.order_customer.name")
    """
    declaration = Criterion(target, Comparison(comparison), quantifier)
    return dataclasses.field(default=default, metadata={CRITERION_METADATA_KEY: declaration})


@dataclasses.dataclass(frozen=True)
class CriterionField:
    """A criterion bound to the form field that declares it."""

    name: str
    value_type: Any
    criterion: Criterion

    @property
    def target_path(self) -> str:
        return self.criterion.target or self.name


@functools.lru_cache(maxsize=128)
def declared_criteria(form_type: type) -> tuple[CriterionField, ...]:
    """Every criterion declared on *form_type*, in field order."""
    hints = typing.get_type_hints(form_type)
    return tuple(
        CriterionField(field.name, hints[field.name], field.metadata[CRITERION_METADATA_KEY])
        for field in dataclasses.fields(form_type)
        if CRITERION_METADATA_KEY in field.metadata
    )
