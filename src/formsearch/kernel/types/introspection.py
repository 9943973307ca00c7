"""Kernel types – member discovery on record types.

Records are ordinary classes; their members are found through
:func:`typing.get_type_hints` (dataclasses, pydantic/attrs models, annotated
classes) and through annotated ``property`` / ``cached_property`` getters.
"""
from __future__ import annotations

import collections.abc
import functools
import inspect
import types
import typing
from typing import Any, ClassVar, Union, get_args, get_origin

_NONE_TYPE = type(None)

# Generic origins that are iterated element by element.
_COLLECTION_ORIGINS: tuple[type, ...] = (
    list,
    set,
    frozenset,
    tuple,
    collections.abc.Iterable,
    collections.abc.Collection,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
)


def is_optional(tp: Any) -> bool:
    """Return ``True`` for ``X | None`` / ``Optional[X]``."""
    return get_origin(tp) in (Union, types.UnionType) and _NONE_TYPE in get_args(tp)


def unwrap_optional(tp: Any) -> Any:
    """Strip ``None`` from a union; other types are returned unchanged."""
    if not is_optional(tp):
        return tp
    rest = tuple(arg for arg in get_args(tp) if arg is not _NONE_TYPE)
    if len(rest) == 1:
        return rest[0]
    return Union[rest]  # noqa: UP007


def collection_element(tp: Any) -> Any | None:
    """Return ``X`` when *tp* is a collection of ``X``, else ``None``."""
    tp = unwrap_optional(tp)
    origin = get_origin(tp)
    if origin not in _COLLECTION_ORIGINS:
        return None
    args = get_args(tp)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        return None
    return args[0] if args else Any


@functools.lru_cache(maxsize=256)
def _hints(owner: type) -> dict[str, Any]:
    hints = typing.get_type_hints(owner)
    return {name: tp for name, tp in hints.items() if get_origin(tp) is not ClassVar}


def member_type(owner: Any, name: str) -> Any | None:
    """Declared type of member *name* on *owner*, or ``None`` when absent.

    Lookup is exact and case-sensitive.
    """
    if not isinstance(owner, type):
        return None
    hints = _hints(owner)
    if name in hints:
        return hints[name]
    attr = inspect.getattr_static(owner, name, None)
    if isinstance(attr, property) and attr.fget is not None:
        return typing.get_type_hints(attr.fget).get("return", Any)
    if isinstance(attr, functools.cached_property):
        return typing.get_type_hints(attr.func).get("return", Any)
    return None


def type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


__all__ = [
    "collection_element",
    "is_optional",
    "member_type",
    "type_name",
    "unwrap_optional",
]
