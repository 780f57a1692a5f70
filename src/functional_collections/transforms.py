"""Collection operations derived from :func:`~functional_collections.traversal.each`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeVar, cast

from .traversal import each, identity, property_of, strict_equal

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    _Collection = Mapping[Any, Any] | Sequence[Any]

_T = TypeVar("_T")
_R = TypeVar("_R")
_MISSING: Final = object()

__all__ = [
    "contains",
    "every",
    "filter_",
    "first",
    "index_of",
    "invoke",
    "last",
    "map_",
    "pluck",
    "reduce",
    "reject",
    "some",
    "uniq",
]


def map_(collection: _Collection, fn: Callable[[Any], _R]) -> list[_R]:
    """Return a new list holding ``fn(value)`` for every element."""

    results: list[_R] = []
    each(collection, lambda value, *_: results.append(fn(value)))
    return results


def filter_(collection: _Collection, predicate: Callable[[Any], object]) -> list[Any]:
    """Return the elements for which ``predicate`` is truthy, in order."""

    kept: list[Any] = []

    def keep(value: Any, *_: object) -> None:
        if predicate(value):
            kept.append(value)

    each(collection, keep)
    return kept


def reject(collection: _Collection, predicate: Callable[[Any], object]) -> list[Any]:
    """Return the elements for which ``predicate`` is falsy, in order."""

    return filter_(collection, lambda value: not predicate(value))


def reduce(
    collection: _Collection,
    fn: Callable[[Any, Any], Any],
    initial: Any = _MISSING,
) -> Any:
    """Fold ``collection`` from the left with ``fn(accumulator, value)``.

    When ``initial`` is omitted the first element becomes the accumulator and is
    never passed to ``fn``; folding starts at the second element. ``None`` is an
    ordinary seed value.

    Raises:
    -------
    TypeError
        If ``collection`` is empty and no ``initial`` value was given.
    """

    accumulator = initial

    def step(value: Any, *_: object) -> None:
        nonlocal accumulator
        if accumulator is _MISSING:
            accumulator = value
        else:
            accumulator = fn(accumulator, value)

    each(collection, step)
    if accumulator is _MISSING:
        raise TypeError("reduce() of empty collection with no initial value")
    return accumulator


def contains(collection: _Collection, target: object) -> bool:
    """Return ``True`` if some element is strictly equal to ``target``."""

    return cast(
        "bool",
        reduce(
            collection,
            lambda found, item: found or strict_equal(item, target),
            False,
        ),
    )


def every(
    collection: _Collection, predicate: Callable[[Any], object] = identity
) -> bool:
    """Return ``True`` if ``predicate`` holds for every element."""

    return cast(
        "bool",
        reduce(
            collection,
            lambda passed, value: passed and bool(predicate(value)),
            True,
        ),
    )


def some(
    collection: _Collection, predicate: Callable[[Any], object] = identity
) -> bool:
    """Return ``True`` if ``predicate`` holds for at least one element."""

    return not every(collection, lambda value: not predicate(value))


def _equal_keys(left: object, right: object) -> bool:
    """Same-type value equality, used to compare ``uniq`` keys."""

    return left is right or (type(left) is type(right) and bool(left == right))


def uniq(array: _Collection, fn: Callable[[Any], object] = identity) -> list[Any]:
    """Drop elements whose ``fn`` key was already seen, keeping first occurrences.

    Keys collide when they have the same type and compare equal, so they do not
    need to be hashable and equal containers count as the same key.
    """

    seen: list[object] = []
    unique: list[Any] = []

    def keep_first(value: Any, *_: object) -> None:
        key = fn(value)
        if not some(seen, lambda other: _equal_keys(other, key)):
            seen.append(key)
            unique.append(value)

    each(array, keep_first)
    return unique


def pluck(collection: _Collection, key: object) -> list[Any]:
    """Extract the ``key`` property of every element (``None`` when missing)."""

    return map_(collection, lambda item: property_of(item, key))


def index_of(array: Sequence[Any], target: object) -> int:
    """Return the first index holding ``target``, or ``-1`` when absent."""

    found = -1

    def match(item: Any, index: int, *_: object) -> None:
        nonlocal found
        if found == -1 and strict_equal(item, target):
            found = index

    each(array, match)
    return found


def first(array: Sequence[_T], n: int | None = None) -> _T | list[_T] | None:
    """Return the first element, or a new list of the first ``n`` elements."""

    if n is None:
        return array[0] if array else None
    return list(array[: max(n, 0)])


def last(array: Sequence[_T], n: int | None = None) -> _T | list[_T] | None:
    """Return the last element, or a new list of the last ``n`` elements."""

    if n is None:
        return array[-1] if array else None
    if n <= 0:
        return []
    if n >= len(array):
        return list(array)
    return list(array[len(array) - n :])


def invoke(
    collection: _Collection,
    method_or_name: str | Callable[..., _R],
    args: Sequence[Any] = (),
) -> list[Any]:
    """Call a method on every element and collect the results.

    ``method_or_name`` is either the name of a method looked up on each element,
    or a function that receives the element as its first argument.
    """

    def call(item: Any) -> Any:
        if isinstance(method_or_name, str):
            return getattr(item, method_or_name)(*args)
        return method_or_name(item, *args)

    return map_(collection, call)
