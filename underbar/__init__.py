r"""
               _         _
 _  _ _ _  __| |___ _ _| |__  __ _ _ _
| || | ' \/ _` / -_) '_| '_ \/ _` | '_|
 \_,_|_||_\__,_\___|_| |_.__/\__,_|_|
"""

# expose the iteration core and the operations built on it
from .extensions.core import (
    each,
    first,
    last,
    index_of,
    filter,
    reject,
    uniq,
    map,
    pluck,
    invoke,
    reduce,
    contains,
    every,
    some
)

# expose set algebra
from .extensions.set import intersection, difference
from .extensions.zip import zip
from .extensions.utility import flatten, shuffle

# expose function decorators
from .extensions.functions import once, memoize, delay

# expose supporting types
from .types import MISSING, strict_equals
from .collection import (
    IterableCollection,
    SequenceCollection,
    MappingCollection,
    as_collection
)
from .errors import UnderbarError, InvalidArgumentType, MissingMethod
from .scheduler import (
    Scheduler,
    ScheduledCall,
    ThreadingScheduler,
    ManualScheduler,
    get_scheduler,
    set_scheduler
)
from .config import Settings, get_settings
from .logger import logger, setup_logger

# define what `import *` does
__all__ = [
    "each",
    "first",
    "last",
    "index_of",
    "filter",
    "reject",
    "uniq",
    "map",
    "pluck",
    "invoke",
    "reduce",
    "contains",
    "every",
    "some",
    "intersection",
    "difference",
    "zip",
    "flatten",
    "shuffle",
    "once",
    "memoize",
    "delay",
    "MISSING",
    "strict_equals",
    "IterableCollection",
    "SequenceCollection",
    "MappingCollection",
    "as_collection",
    "UnderbarError",
    "InvalidArgumentType",
    "MissingMethod",
    "Scheduler",
    "ScheduledCall",
    "ThreadingScheduler",
    "ManualScheduler",
    "get_scheduler",
    "set_scheduler",
    "Settings",
    "get_settings",
    "logger",
    "setup_logger"
]
