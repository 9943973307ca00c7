"""Application search – SearchResult generic container."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

__all__ = ["SearchResult"]


@dataclass
class SearchResult(Generic[T]):
    """One page of matching records.

    ``total`` is exact unless ``capped`` is set, in which case more than
    ``total`` records matched and counting stopped at the form's
    ``page_count * page_size`` ceiling.
    """

    items: list[T]
    total: int
    page: int
    page_size: int
    capped: bool = False
    took_ms: int = 0

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return (self.total + self.page_size - 1) // self.page_size

    @property
    def has_next(self) -> bool:
        return self.capped or self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1
