"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── SearchError                       (search.py)
        ├── UnknownMemberError
        ├── UnsupportedValueTypeError
        ├── MalformedQuantifierError
        ├── UnsupportedNestedCollectionError
        └── InvalidSortFieldError
"""

from formsearch.kernel.errors.base import BaseError
from formsearch.kernel.errors.search import (
    InvalidSortFieldError,
    MalformedQuantifierError,
    SearchError,
    UnknownMemberError,
    UnsupportedNestedCollectionError,
    UnsupportedValueTypeError,
)

__all__ = [
    "BaseError",
    "InvalidSortFieldError",
    "MalformedQuantifierError",
    "SearchError",
    "UnknownMemberError",
    "UnsupportedNestedCollectionError",
    "UnsupportedValueTypeError",
]
