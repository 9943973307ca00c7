"""Application search – PathResolver and ResolvedPath.

A path is a dot-separated chain of member names starting at the record
type, e.g. ``"order_customer.customer_address.zip_code"``. A leading segment
equal to the record type's own name is dropped, so ``"Order.items.price"``
resolves against ``Order`` the same way ``"items.price"`` does.

When a member is a collection of ``X`` the next segment is looked up on
``X``. At most one collection may be crossed.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from formsearch.kernel.errors import UnknownMemberError, UnsupportedNestedCollectionError
from formsearch.kernel.types import collection_element, member_type, unwrap_optional

__all__ = ["PathResolver", "ResolvedPath"]

SEPARATOR = "."


@dataclasses.dataclass(frozen=True)
class ResolvedPath:
    """Member names from the record root to the final value.

    ``types[i]`` is the declared type of ``segments[i]``. When the path crosses
    a collection, ``collection_index`` is the index of the collection-typed
    segment and ``element_type`` its element type.
    """

    path: str
    segments: tuple[str, ...]
    types: tuple[Any, ...]
    collection_index: int | None = None
    element_type: Any = None

    @property
    def value_type(self) -> Any:
        return self.types[-1]

    @property
    def crosses_collection(self) -> bool:
        return self.collection_index is not None

    @property
    def head(self) -> tuple[str, ...]:
        """Segments up to and including the collection (all of them if none)."""
        if self.collection_index is None:
            return self.segments
        return self.segments[: self.collection_index + 1]

    @property
    def tail(self) -> tuple[str, ...]:
        """Segments evaluated against each collection element."""
        if self.collection_index is None:
            return ()
        return self.segments[self.collection_index + 1:]


class PathResolver:
    """Walk dotted paths over the declared members of *root_type*."""

    def __init__(self, root_type: type) -> None:
        self._root_type = root_type

    @property
    def root_type(self) -> type:
        return self._root_type

    def dequalify(self, path: str) -> list[str]:
        """Split *path* and drop a leading segment naming the root type."""
        segments = path.split(SEPARATOR)
        if len(segments) > 1 and segments[0] == self._root_type.__name__:
            segments = segments[1:]
        return segments

    def resolve(self, path: str) -> ResolvedPath:
        """Resolve *path* level by level.

        Raises:
            UnknownMemberError: a segment is not a member of the type reached
                so far (or the path is empty).
            UnsupportedNestedCollectionError: the path crosses a second
                collection.
        """
        segments = self.dequalify(path)
        if not all(segments):
            raise UnknownMemberError(path, path=path, owner=self._root_type)

        types: list[Any] = []
        collection_index: int | None = None
        element_type: Any = None
        current: Any = self._root_type

        for index, segment in enumerate(segments):
            owner = unwrap_optional(current)
            element = collection_element(current) if index else None
            if element is not None:
                if collection_index is not None:
                    raise UnsupportedNestedCollectionError(path)
                collection_index, element_type = index - 1, element
                owner = unwrap_optional(element)

            found = member_type(owner, segment)
            if found is None:
                raise UnknownMemberError(segment, path=path, owner=owner)
            types.append(found)
            current = found

        # a path may end on a collection; its elements are then tested directly
        trailing = collection_element(current)
        if trailing is not None:
            if collection_index is not None:
                raise UnsupportedNestedCollectionError(path)
            collection_index, element_type = len(segments) - 1, trailing

        return ResolvedPath(
            path=path,
            segments=tuple(segments),
            types=tuple(types),
            collection_index=collection_index,
            element_type=element_type,
        )

    def exists(self, path: str) -> bool:
        """``True`` when every level of *path* names a member.

        Paths that cross more than one collection exist but are not usable;
        they report ``False`` as well.
        """
        try:
            self.resolve(path)
        except (UnknownMemberError, UnsupportedNestedCollectionError):
            return False
        return True

    @staticmethod
    def effective_type(tp: Any, select_single: bool = True) -> Any:
        """``X`` for a collection of ``X`` when *select_single*, else *tp*."""
        if select_single:
            element = collection_element(tp)
            if element is not None:
                return element
        return tp
