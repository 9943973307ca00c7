"""Kernel types – record type introspection helpers."""
from formsearch.kernel.types.introspection import (
    collection_element,
    is_optional,
    member_type,
    type_name,
    unwrap_optional,
)

__all__ = [
    "collection_element",
    "is_optional",
    "member_type",
    "type_name",
    "unwrap_optional",
]
