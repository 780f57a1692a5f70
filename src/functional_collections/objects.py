"""In-place merging of mappings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from .traversal import each

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping, Sequence

_M = TypeVar("_M", bound="MutableMapping[Any, Any]")

__all__ = ["defaults", "extend"]


def extend(target: _M, sources: Sequence[Mapping[Any, Any]]) -> _M:
    """Copy every key of each source into ``target``, later sources winning.

    ``target`` is modified in place and returned.
    """

    def assign(value: Any, key: Any, *_: object) -> None:
        target[key] = value

    each(sources, lambda source, *_: each(source, assign))
    return target


def defaults(target: _M, sources: Sequence[Mapping[Any, Any]]) -> _M:
    """Fill keys missing from ``target`` without overwriting existing ones.

    A key holding ``None`` counts as missing, the same way ``None`` stands for a
    missing property in :func:`~functional_collections.traversal.property_of`.
    Falsy values such as ``0`` or ``""`` are kept.
    """

    def fill(value: Any, key: Any, *_: object) -> None:
        if target.get(key) is None:
            target[key] = value

    each(sources, lambda source, *_: each(source, fill))
    return target
