"""Application pagination – PageRequest, Sort, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: object) -> "SortDirection | None":
        """Case-insensitive lookup; ``None`` for anything that is not asc/desc."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclasses.dataclass(frozen=True)
class Sort:
    """Single sort criterion."""
    field: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters.

    Out-of-range values are coerced rather than rejected: ``offset`` is never
    negative, and a non-positive ``size`` takes nothing.
    ``max_rows`` is the ceiling up to which the total is counted exactly.
    """
    page: int = 1
    size: int = 10
    sort: Sort | None = None
    max_rows: int = 100

    @property
    def offset(self) -> int:
        return max(0, (self.page - 1) * self.size)

    @property
    def limit(self) -> int:
        return max(0, self.size)


__all__ = ["PageRequest", "Sort", "SortDirection"]
