"""Application search – decide whether a criterion value constrains a search.

Only text and optional types can carry criteria. Rules, in priority order:

============================  ==========================================
value type                    meaningful when
============================  ==========================================
``str`` / ``str | None``      not ``None`` and not all whitespace
``int | None``                not ``None`` and ``>= 0``
``Decimal | float | None``    not ``None`` and ``>= 0``
``datetime | None``           not ``None`` and not ``datetime.min``
``date | None``               not ``None`` and not ``date.min``
any other ``X | None``        not ``None``
============================  ==========================================
"""
from __future__ import annotations

import functools
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable

from formsearch.kernel.errors import UnsupportedValueTypeError
from formsearch.kernel.types import is_optional, unwrap_optional

__all__ = ["MeaningfulRule", "is_meaningful", "meaningful_rule"]

MeaningfulRule = Callable[[Any], bool]


def _text(value: Any) -> bool:
    return value is not None and bool(str(value).strip())


def _non_negative(value: Any) -> bool:
    if value is None:
        return False
    # NaN is unordered; Decimal NaN raises on ``>=``
    if isinstance(value, Decimal):
        return not value.is_nan() and value >= 0
    return value == value and value >= 0


def _not_minimum(minimum: Any) -> MeaningfulRule:
    def rule(value: Any) -> bool:
        return value is not None and value != minimum

    return rule


def _not_none(value: Any) -> bool:
    return value is not None


def _subclass(tp: Any, *bases: type) -> bool:
    return isinstance(tp, type) and issubclass(tp, bases)


@functools.lru_cache(maxsize=256)
def meaningful_rule(value_type: Any) -> MeaningfulRule:
    """Return the rule for *value_type*.

    Raises:
        UnsupportedValueTypeError: *value_type* is neither ``str`` nor optional.
    """
    if value_type is str:
        return _text
    if not is_optional(value_type):
        raise UnsupportedValueTypeError(value_type)

    inner = unwrap_optional(value_type)
    if inner is str:
        return _text
    if _subclass(inner, bool):
        return _not_none
    if _subclass(inner, int, float, Decimal):
        return _non_negative
    # datetime before date: datetime is a date subclass
    if _subclass(inner, datetime):
        return _not_minimum(datetime.min)
    if _subclass(inner, date):
        return _not_minimum(date.min)
    return _not_none


def is_meaningful(value_type: Any, value: Any) -> bool:
    return meaningful_rule(value_type)(value)
