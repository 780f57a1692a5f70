"""Combinators over ordered sequences: sorting, zipping and set-like operations."""

from __future__ import annotations

import decimal
import functools
import numbers
import random
from typing import TYPE_CHECKING, Any

from .transforms import contains, every, filter_, map_, pluck, reduce, reject
from .traversal import is_sequence, property_of

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

__all__ = ["difference", "flatten", "intersection", "shuffle", "sort_by", "zip_"]


def _is_number(value: object) -> bool:
    return isinstance(value, (numbers.Real, decimal.Decimal))


def _compare_keys(left: Any, right: Any) -> int:
    """Order two sort keys, falling back to a total order for mixed types.

    Numbers, ``Decimal`` included, compare numerically and sort before
    everything else. Keys with no natural order between them are ranked by type
    name, then by ``repr``.
    """

    left_numeric = _is_number(left)
    right_numeric = _is_number(right)
    if left_numeric and right_numeric:
        return (left > right) - (left < right)
    if left_numeric or right_numeric:
        return -1 if left_numeric else 1
    try:
        return (left > right) - (left < right)
    except TypeError:
        left_rank = (type(left).__name__, repr(left))
        right_rank = (type(right).__name__, repr(right))
        return (left_rank > right_rank) - (left_rank < right_rank)


def sort_by(
    collection: Sequence[Any], key: str | Callable[[Any], Any]
) -> list[Any]:
    """Return a new list sorted by ``key``.

    ``key`` is either a function computing the sort key of an element or the
    name of the property to sort by. Numeric keys compare numerically; other
    keys use their natural order where one exists. Equal keys keep their input
    order.

    Raises:
    -------
    TypeError
        If ``collection`` is not an ordered sequence.
    """

    if not is_sequence(collection):
        raise TypeError(
            f"sort_by() expects an ordered sequence, got {type(collection).__name__!r}"
        )
    key_fn = (lambda item: property_of(item, key)) if isinstance(key, str) else key
    keyed = map_(collection, lambda item: (key_fn(item), item))
    keyed.sort(key=functools.cmp_to_key(lambda a, b: _compare_keys(a[0], b[0])))
    return map_(keyed, lambda pair: pair[1])


def zip_(arrays: Sequence[Sequence[Any]]) -> list[tuple[Any, ...]]:
    """Group same-index elements of ``arrays`` into tuples.

    The result is as long as the longest array; shorter arrays contribute
    ``None`` past their end.

    Raises:
    -------
    TypeError
        If any of ``arrays`` is not an ordered sequence.
    """

    def measure(size: int, array: Any) -> int:
        if not is_sequence(array):
            raise TypeError(
                f"zip_() expects ordered sequences, got {type(array).__name__!r}"
            )
        return max(size, len(array))

    longest = reduce(arrays, measure, 0)
    return map_(range(longest), lambda index: tuple(pluck(arrays, index)))


def flatten(nested: Sequence[Any]) -> list[Any]:
    """Flatten arbitrarily nested sequences into one list, left to right."""

    def absorb(flat: list[Any], value: Any) -> list[Any]:
        flat.extend(flatten(value) if is_sequence(value) else [value])
        return flat

    return reduce(nested, absorb, [])


def intersection(arrays: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the distinct elements present in every array.

    Membership and duplicates are both decided by strict equality. Elements keep
    the order in which they first appear in the first array.
    """

    if not arrays:
        return []
    others = arrays[1:]
    shared = filter_(
        arrays[0], lambda item: every(others, lambda other: contains(other, item))
    )

    def keep_first(distinct: list[Any], item: Any) -> list[Any]:
        if not contains(distinct, item):
            distinct.append(item)
        return distinct

    return reduce(shared, keep_first, [])


def difference(array: Sequence[Any], others: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the elements of ``array`` that appear in none of ``others``."""

    excluded = flatten(others)
    return reject(array, lambda item: contains(excluded, item))


def shuffle(array: Sequence[Any], rng: random.Random | None = None) -> list[Any]:
    """Return a shuffled copy of ``array`` using the Fisher-Yates algorithm.

    ``rng`` defaults to the :mod:`random` module's shared generator.
    """

    randrange = rng.randrange if rng is not None else random.randrange
    shuffled = list(array)
    for index in range(len(shuffled) - 1, 0, -1):
        swap = randrange(index + 1)
        shuffled[index], shuffled[swap] = shuffled[swap], shuffled[index]
    return shuffled
