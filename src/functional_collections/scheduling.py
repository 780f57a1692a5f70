"""Timer back-ends used by the time-based decorators."""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
import threading
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable

_LOGGER = logging.getLogger(__name__)
_Entry = tuple[float, int, "Callable[..., object]", tuple[object, ...]]

__all__ = [
    "AsyncioScheduler",
    "ManualScheduler",
    "Scheduler",
    "ThreadingScheduler",
    "get_default_scheduler",
    "set_default_scheduler",
]


class Scheduler(Protocol):
    """Anything able to run a callback after a delay in seconds."""

    def call_later(
        self, delay: float, callback: Callable[..., object], *args: object
    ) -> None:
        """Run ``callback(*args)`` no earlier than ``delay`` seconds from now."""
        ...


class ThreadingScheduler:
    """Run each callback on its own daemon :class:`threading.Timer`."""

    def call_later(
        self, delay: float, callback: Callable[..., object], *args: object
    ) -> None:
        timer = threading.Timer(max(delay, 0.0), callback, args=args)
        timer.daemon = True
        timer.start()
        _LOGGER.debug("Scheduled %r on a timer thread in %.3fs", callback, delay)


class AsyncioScheduler:
    """Run callbacks on an asyncio event loop.

    Without an explicit ``loop`` the loop running at scheduling time is used, so
    calls must then come from inside a coroutine or loop callback.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(
        self, delay: float, callback: Callable[..., object], *args: object
    ) -> None:
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        loop.call_later(max(delay, 0.0), callback, *args)
        _LOGGER.debug("Scheduled %r on the event loop in %.3fs", callback, delay)


class ManualScheduler:
    """Deterministic scheduler driven by a virtual clock.

    Nothing runs until :meth:`advance` moves the clock forward. Due callbacks
    run in trigger-time order on the caller's thread, and callbacks sharing a
    trigger time run in the order they were scheduled.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._queue: list[_Entry] = []
        self._counter = itertools.count()
        self._lock = threading.Lock()

    @property
    def now(self) -> float:
        """The current virtual time."""
        return self._now

    @property
    def pending(self) -> int:
        """Number of callbacks waiting to run."""
        with self._lock:
            return len(self._queue)

    def call_later(
        self, delay: float, callback: Callable[..., object], *args: object
    ) -> None:
        with self._lock:
            when = self._now + max(delay, 0.0)
            heapq.heappush(self._queue, (when, next(self._counter), callback, args))
        _LOGGER.debug("Scheduled %r at virtual time %.3f", callback, when)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running every callback that falls due.

        Callbacks scheduled while advancing run too if they fall due before the
        new time. Exceptions raised by a callback propagate to the caller, with
        the clock left at that callback's trigger time.

        Returns:
        -------
        int
            The number of callbacks that ran.
        """
        if seconds < 0:
            raise ValueError("Cannot advance a scheduler backwards")
        target = self._now + seconds
        ran = 0
        while True:
            with self._lock:
                if not self._queue or self._queue[0][0] > target:
                    self._now = target
                    return ran
                when, _, callback, args = heapq.heappop(self._queue)
                self._now = when
            callback(*args)
            ran += 1


_default_scheduler: Scheduler = ThreadingScheduler()


def get_default_scheduler() -> Scheduler:
    """Return the scheduler used when a decorator is not given one."""

    return _default_scheduler


def set_default_scheduler(scheduler: Scheduler) -> Scheduler:
    """Replace the default scheduler, returning the previous one."""

    global _default_scheduler
    previous = _default_scheduler
    _default_scheduler = scheduler
    return previous
