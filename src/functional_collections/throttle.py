"""Leading-edge rate limiting for callables."""

from __future__ import annotations

import dataclasses
import logging
import threading
from functools import wraps
from typing import TYPE_CHECKING, Generic, ParamSpec, TypeVar

from .scheduling import get_default_scheduler

if TYPE_CHECKING:
    from collections.abc import Callable

    from .scheduling import Scheduler

_P = ParamSpec("_P")
_T = TypeVar("_T")
_LOGGER = logging.getLogger(__name__)


@dataclasses.dataclass
class _ThrottleState(Generic[_T]):
    """Private state owned by a single ``throttle`` wrapper."""

    cooling: bool = False
    result: _T | None = None


def throttle(
    fn: Callable[_P, _T],
    wait: float,
    *,
    scheduler: Scheduler | None = None,
) -> Callable[_P, _T | None]:
    """Allow at most one call to ``fn`` per ``wait`` seconds.

    The first call of a window runs ``fn`` immediately and starts a cooldown of
    ``wait`` seconds. Calls made during the cooldown are dropped: they neither
    run ``fn`` later nor extend the cooldown, and they return the result of the
    last call that did run (``None`` before the first one).

    Parameters
    ----------
    fn : Callable
        The function to rate limit.
    wait : float
        Length of the cooldown window, in seconds.
    scheduler : Scheduler | None, optional
        Where the end of each cooldown is scheduled. Defaults to the scheduler
        returned by :func:`~functional_collections.scheduling.get_default_scheduler`
        at decoration time.
    """

    state: _ThrottleState[_T] = _ThrottleState()
    lock = threading.Lock()
    timer = scheduler if scheduler is not None else get_default_scheduler()
    name = getattr(fn, "__qualname__", repr(fn))

    def cool_down() -> None:
        with lock:
            state.cooling = False
        _LOGGER.debug("Throttle window for %s expired", name)

    @wraps(fn)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _T | None:
        with lock:
            if state.cooling:
                _LOGGER.debug("Dropped throttled call to %s", name)
                return state.result
            state.cooling = True
        try:
            timer.call_later(wait, cool_down)
        except BaseException:
            with lock:
                state.cooling = False
            raise
        result = fn(*args, **kwargs)
        with lock:
            state.result = result
        return result

    return wrapper
