"""Decorator that caches results per distinct argument list."""

from __future__ import annotations

import asyncio
import inspect
import pickle
import threading
from collections.abc import Hashable
from functools import wraps
from typing import Awaitable, Callable, Final, ParamSpec, TypeVar, cast, overload

_P = ParamSpec("_P")
_T = TypeVar("_T")
_DecoratedFunc = TypeVar("_DecoratedFunc", bound=Callable[..., object])
_MISSING: Final = object()


def _cache_key(*args: object, **kwargs: object) -> Hashable:
    """Build a cache key from the values of the call arguments.

    Each argument is tagged with its type, so ``1``, ``1.0`` and ``True`` never
    share a key. Unhashable arguments fall back to their pickled form; those
    that cannot be pickled raise the underlying pickling error.
    """
    key = (
        tuple((type(arg), arg) for arg in args),
        tuple(sorted((name, type(value), value) for name, value in kwargs.items())),
    )
    try:
        hash(key)
    except TypeError:
        return pickle.dumps((args, sorted(kwargs.items())))
    return key


def _sync_wrapper(fn: Callable[_P, _T]) -> Callable[_P, _T]:
    cache: dict[Hashable, _T] = {}
    lock = threading.RLock()

    @wraps(fn)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _T:
        key = _cache_key(*args, **kwargs)
        with lock:
            cached = cache.get(key, _MISSING)
        if cached is not _MISSING:
            return cast(_T, cached)
        result = fn(*args, **kwargs)
        with lock:
            return cache.setdefault(key, result)

    return wrapper


def _async_wrapper(
    fn: Callable[_P, Awaitable[_T]],
) -> Callable[_P, Awaitable[_T]]:
    cache: dict[Hashable, _T] = {}
    lock = asyncio.Lock()

    @wraps(fn)
    async def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _T:
        key = _cache_key(*args, **kwargs)
        async with lock:
            cached = cache.get(key, _MISSING)
        if cached is not _MISSING:
            return cast(_T, cached)
        result = await fn(*args, **kwargs)
        async with lock:
            return cache.setdefault(key, result)

    return wrapper


@overload
def memoize(fn: _DecoratedFunc) -> _DecoratedFunc: ...


@overload
def memoize(
    *, enabled: bool = True
) -> Callable[[_DecoratedFunc], _DecoratedFunc]: ...


def memoize(
    fn: _DecoratedFunc | None = None,
    *,
    enabled: bool = True,
) -> Callable[[_DecoratedFunc], _DecoratedFunc] | _DecoratedFunc:
    """Remember the result of ``fn`` for every distinct argument list.

    Parameters
    ----------
    fn : Callable | None, optional
        The function to wrap. When omitted, the decorator is returned for
        deferred application.
    enabled : bool, optional
        If ``False`` skip decorating and return ``fn`` unchanged.

    Returns:
    -------
    Callable
        Either the decorated function or a decorator awaiting a function.

    Notes:
    -----
    Cache keys are built from the type and value of each argument, so equal
    primitive arguments always hit the same entry. Unhashable arguments are
    keyed by their pickled form on a best-effort basis, and unpicklable ones
    raise. The cache is never evicted.
    """

    def decorator(func: _DecoratedFunc) -> _DecoratedFunc:
        if not enabled:
            return func
        if inspect.iscoroutinefunction(func):
            async_fn = cast("Callable[..., Awaitable[object]]", func)
            return cast(_DecoratedFunc, _async_wrapper(async_fn))
        return cast(_DecoratedFunc, _sync_wrapper(func))

    if fn is not None:
        return decorator(fn)
    return decorator
