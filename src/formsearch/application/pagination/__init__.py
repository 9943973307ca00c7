"""Application pagination – page/sort primitives."""
from formsearch.application.pagination.page_request import PageRequest, Sort, SortDirection

__all__ = ["PageRequest", "Sort", "SortDirection"]
