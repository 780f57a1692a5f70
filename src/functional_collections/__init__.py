"""Public package surface for the functional-collections project."""

from .arrays import difference, flatten, intersection, shuffle, sort_by, zip_
from .delay import delay
from .memoize import memoize
from .objects import defaults, extend
from .once import once
from .scheduling import (
    AsyncioScheduler,
    ManualScheduler,
    Scheduler,
    ThreadingScheduler,
    get_default_scheduler,
    set_default_scheduler,
)
from .throttle import throttle
from .transforms import (
    contains,
    every,
    filter_,
    first,
    index_of,
    invoke,
    last,
    map_,
    pluck,
    reduce,
    reject,
    some,
    uniq,
)
from .traversal import each, identity, is_sequence, property_of, strict_equal
from .version import __version__

__all__ = [
    "AsyncioScheduler",
    "ManualScheduler",
    "Scheduler",
    "ThreadingScheduler",
    "__version__",
    "contains",
    "defaults",
    "delay",
    "difference",
    "each",
    "every",
    "extend",
    "filter_",
    "first",
    "flatten",
    "get_default_scheduler",
    "identity",
    "index_of",
    "intersection",
    "invoke",
    "is_sequence",
    "last",
    "map_",
    "memoize",
    "once",
    "pluck",
    "property_of",
    "reduce",
    "reject",
    "set_default_scheduler",
    "shuffle",
    "some",
    "sort_by",
    "strict_equal",
    "throttle",
    "uniq",
    "zip_",
]
