"""The single traversal primitive and the small helpers built around it."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, TypeVar, cast, overload

if TYPE_CHECKING:
    from collections.abc import Callable

_K = TypeVar("_K")
_V = TypeVar("_V")
_T = TypeVar("_T")

# Sequences that are treated as scalar values rather than collections.
_SCALAR_SEQUENCES = (str, bytes, bytearray)
# Types compared by value under strict equality; everything else by identity.
_PRIMITIVES = (int, float, complex, str, bytes, bool, type(None))

__all__ = ["each", "identity", "is_sequence", "property_of", "strict_equal"]


def identity(value: _T) -> _T:
    """Return ``value`` unchanged."""

    return value


def is_sequence(value: object) -> bool:
    """Return ``True`` if ``value`` is an ordered sequence collection."""

    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCES)


def strict_equal(left: object, right: object) -> bool:
    """Compare two values without coercing between types.

    Primitives of the same type compare by value; every other object compares
    by identity, so two distinct but equal lists are not strictly equal.
    ``1``, ``1.0`` and ``True`` are three distinct values here.
    """

    if left is right:
        return True
    return type(left) is type(right) and isinstance(left, _PRIMITIVES) and left == right


def property_of(item: object, key: object) -> object:
    """Look up ``key`` on ``item``, returning ``None`` when it is missing."""

    if isinstance(item, Mapping):
        return item.get(key)
    if is_sequence(item):
        sequence = cast("Sequence[object]", item)
        if isinstance(key, int) and 0 <= key < len(sequence):
            return sequence[key]
        return None
    if isinstance(key, str):
        return getattr(item, key, None)
    return None


@overload
def each(
    collection: Mapping[_K, _V],
    iterator: Callable[[_V, _K, Mapping[_K, _V]], object],
) -> None: ...


@overload
def each(
    collection: Sequence[_V],
    iterator: Callable[[_V, int, Sequence[_V]], object],
) -> None: ...


def each(
    collection: Mapping[Any, Any] | Sequence[Any],
    iterator: Callable[..., object],
) -> None:
    """Call ``iterator(value, key, collection)`` for every element.

    Sequences are visited in ascending index order and mappings in insertion
    order. Every other collection helper in this package is built on top of
    this function, so it is the only place that distinguishes the two shapes.

    Raises:
    -------
    TypeError
        If ``collection`` is neither a mapping nor an ordered sequence.
    """

    if isinstance(collection, Mapping):
        for key in list(collection):
            iterator(collection[key], key, collection)
        return
    if is_sequence(collection):
        for index in range(len(collection)):
            iterator(collection[index], index, collection)
        return
    raise TypeError(f"{type(collection).__name__!r} object is not a collection")
