"""Decorator that lets a callable run at most one time."""

from __future__ import annotations

import asyncio
import dataclasses
import inspect
import threading
from functools import wraps
from typing import Awaitable, Callable, Generic, ParamSpec, TypeVar, cast

_P = ParamSpec("_P")
_T = TypeVar("_T")
_DecoratedFunc = TypeVar("_DecoratedFunc", bound=Callable[..., object])


@dataclasses.dataclass
class _OnceState(Generic[_T]):
    """Private state owned by a single ``once`` wrapper."""

    called: bool = False
    result: _T | None = None


def _sync_wrapper(fn: Callable[_P, _T]) -> Callable[_P, _T]:
    """Wrap a synchronous ``fn`` so only its first successful call runs.

    The lock is held across the first call so parallel callers wait for that
    result instead of calling ``fn`` themselves.
    """
    state: _OnceState[_T] = _OnceState()
    lock = threading.RLock()

    @wraps(fn)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _T:
        with lock:
            if not state.called:
                state.result = fn(*args, **kwargs)
                state.called = True
        return cast(_T, state.result)

    return wrapper


def _async_wrapper(
    fn: Callable[_P, Awaitable[_T]],
) -> Callable[_P, Awaitable[_T]]:
    """Wrap a coroutine function so only its first successful await runs."""
    state: _OnceState[_T] = _OnceState()
    lock = asyncio.Lock()

    @wraps(fn)
    async def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _T:
        async with lock:
            if not state.called:
                state.result = await fn(*args, **kwargs)
                state.called = True
        return cast(_T, state.result)

    return wrapper


def once(fn: _DecoratedFunc) -> _DecoratedFunc:
    """Return a wrapper that calls ``fn`` once and then replays its result.

    The first call's arguments are the only ones ever passed to ``fn``; later
    calls return the cached result whatever their arguments. If the first call
    raises, nothing is cached and the next call tries again. Coroutine functions
    cache their awaited result.
    """

    if inspect.iscoroutinefunction(fn):
        async_fn = cast("Callable[..., Awaitable[object]]", fn)
        return cast(_DecoratedFunc, _async_wrapper(async_fn))
    return cast(_DecoratedFunc, _sync_wrapper(fn))
