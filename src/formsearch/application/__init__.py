"""Application – search forms, criteria compilation and pagination."""

from formsearch.application.pagination import PageRequest, Sort, SortDirection
from formsearch.application.search import (
    Comparison,
    CriteriaCompiler,
    CriteriaSearchEngine,
    Quantifier,
    SearchForm,
    SearchResult,
    criterion,
)

__all__ = [
    "Comparison",
    "CriteriaCompiler",
    "CriteriaSearchEngine",
    "PageRequest",
    "Quantifier",
    "SearchForm",
    "SearchResult",
    "Sort",
    "SortDirection",
    "criterion",
]
