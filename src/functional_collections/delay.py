"""Run a callable once after a delay without blocking the caller."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .scheduling import get_default_scheduler

if TYPE_CHECKING:
    from collections.abc import Callable

    from .scheduling import Scheduler

_LOGGER = logging.getLogger(__name__)


def delay(
    fn: Callable[..., object],
    wait: float,
    *args: object,
    scheduler: Scheduler | None = None,
    **kwargs: object,
) -> None:
    """Call ``fn(*args, **kwargs)`` once, no earlier than ``wait`` seconds from now.

    ``delay`` returns immediately; the call runs on ``scheduler`` or, when it is
    omitted, on the default scheduler. Pending calls cannot be cancelled.
    """

    target = scheduler if scheduler is not None else get_default_scheduler()

    def fire() -> None:
        _LOGGER.debug("Running delayed call to %s", getattr(fn, "__qualname__", fn))
        fn(*args, **kwargs)

    target.call_later(wait, fire)
