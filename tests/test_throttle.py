from __future__ import annotations

import asyncio
import threading
import time
from typing import TYPE_CHECKING

import pytest
from functional_collections import (
    AsyncioScheduler,
    ManualScheduler,
    ThreadingScheduler,
    throttle,
)

if TYPE_CHECKING:
    from collections.abc import Callable


def test_back_to_back_calls_fire_once() -> None:
    scheduler = ManualScheduler()
    calls: list[int] = []
    throttled = throttle(calls.append, 100, scheduler=scheduler)
    throttled(1)
    throttled(2)
    throttled(3)
    assert calls == [1]


def test_fires_again_after_window() -> None:
    scheduler = ManualScheduler()
    calls: list[int] = []
    throttled = throttle(calls.append, 100, scheduler=scheduler)
    throttled(1)
    scheduler.advance(100)
    throttled(2)
    assert calls == [1, 2]


def test_dropped_calls_do_not_extend_the_window() -> None:
    scheduler = ManualScheduler()
    calls: list[int] = []
    throttled = throttle(calls.append, 10, scheduler=scheduler)
    throttled(1)
    scheduler.advance(9)
    throttled(2)
    scheduler.advance(1)
    throttled(3)
    assert calls == [1, 3]


def test_dropped_calls_are_not_queued() -> None:
    scheduler = ManualScheduler()
    calls: list[int] = []
    throttled = throttle(calls.append, 10, scheduler=scheduler)
    throttled(1)
    throttled(2)
    scheduler.advance(50)
    assert calls == [1]
    assert scheduler.pending == 0


def test_dropped_calls_return_last_result() -> None:
    scheduler = ManualScheduler()
    throttled = throttle(lambda x: x * 10, 5, scheduler=scheduler)
    assert throttled(1) == 10
    assert throttled(2) == 10
    scheduler.advance(5)
    assert throttled(3) == 30


def test_instances_are_independent() -> None:
    scheduler = ManualScheduler()
    calls: list[str] = []
    first = throttle(calls.append, 10, scheduler=scheduler)
    second = throttle(calls.append, 10, scheduler=scheduler)
    first("a")
    second("b")
    first("c")
    assert calls == ["a", "b"]


def test_window_expires_even_if_call_raises() -> None:
    scheduler = ManualScheduler()
    attempts: list[int] = []

    def fail(value: int) -> None:
        attempts.append(value)
        raise RuntimeError("nope")

    throttled = throttle(fail, 1, scheduler=scheduler)
    with pytest.raises(RuntimeError):
        throttled(1)
    throttled(2)
    scheduler.advance(1)
    with pytest.raises(RuntimeError):
        throttled(3)
    assert attempts == [1, 3]


class BrokenScheduler:
    def __init__(self) -> None:
        self.fail = True
        self.inner = ManualScheduler()

    def call_later(self, delay: float, callback: Callable[..., object]) -> None:
        if self.fail:
            raise RuntimeError("timer unavailable")
        self.inner.call_later(delay, callback)


def test_scheduler_failure_leaves_throttle_idle() -> None:
    scheduler = BrokenScheduler()
    calls: list[int] = []
    throttled = throttle(calls.append, 10, scheduler=scheduler)
    with pytest.raises(RuntimeError, match="timer unavailable"):
        throttled(1)
    scheduler.fail = False
    throttled(2)
    throttled(3)
    assert calls == [2]


def test_asyncio_scheduler_outside_loop_does_not_stick() -> None:
    calls: list[int] = []
    throttled = throttle(calls.append, 0.01, scheduler=AsyncioScheduler())
    with pytest.raises(RuntimeError):
        throttled(1)

    async def main() -> None:
        throttled(2)

    asyncio.run(main())
    assert calls == [2]


def test_parallel_callers_fire_once() -> None:
    scheduler = ManualScheduler()
    calls: list[int] = []
    throttled = throttle(calls.append, 10, scheduler=scheduler)
    barrier = threading.Barrier(8)

    def worker(value: int) -> None:
        barrier.wait()
        throttled(value)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(calls) == 1


def test_real_timer_reopens_window() -> None:
    calls: list[int] = []
    throttled = throttle(calls.append, 0.05, scheduler=ThreadingScheduler())
    throttled(1)
    throttled(2)
    deadline = time.monotonic() + 5
    while len(calls) < 2 and time.monotonic() < deadline:
        time.sleep(0.01)
        throttled(3)
    assert calls == [1, 3]


def test_preserves_metadata() -> None:
    def handler() -> None:
        """Handle an event."""

    wrapped = throttle(handler, 1, scheduler=ManualScheduler())
    assert wrapped.__name__ == "handler"
    assert wrapped.__doc__ == "Handle an event."
