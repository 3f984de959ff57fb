from __future__ import annotations
from dataclasses import dataclass, field
from functools import wraps
from numbers import Real

from ..collection import ensure_callable
from ..errors import InvalidArgumentType
from ..logger import get_logger
from ..scheduler import ScheduledCall, Scheduler, get_scheduler
from ..types import *

log = get_logger("functions")


@dataclass
class _OnceState:
    called: bool = False
    result: Any = None


@dataclass
class _MemoState:
    cache: Dict[Tuple[type, Hashable], Any] = field(default_factory=dict)


def once(func: Callable[..., T]) -> Callable[..., T]:
    """
    wrap func so it runs at most once. every later call returns the first result,
    whatever arguments it gets. a first call that raises does not count.
    """
    ensure_callable(func, "once")
    state = _OnceState()

    @wraps(func)
    def wrapper(*args, **kwargs):
        if not state.called:
            state.result = func(*args, **kwargs)
            state.called = True
        return state.result

    return wrapper


def memoize(func: Callable[[K], T]) -> Callable[[K], T]:
    """
    cache the results of a one-argument function, keyed by the argument's type and value.
    the cache only grows.
    """
    ensure_callable(func, "memoize")
    state = _MemoState()

    @wraps(func)
    def wrapper(arg):
        key = (type(arg), arg)
        try:
            return state.cache[key]
        except KeyError:
            pass
        except TypeError:
            raise InvalidArgumentType("memoize", "a hashable argument", arg) from None
        log.debug("memoize miss for %s(%r)", getattr(func, '__name__', func), arg)
        result = state.cache[key] = func(arg)
        return result

    return wrapper


def delay(func: Callable[..., Any], wait_ms: float, *args: Any,
          scheduler: Optional[Scheduler] = None) -> ScheduledCall:
    """
    run func(*args) no sooner than wait_ms milliseconds from now and return immediately.
    the result of func is discarded; the returned handle can cancel the call.
    """
    ensure_callable(func, "delay")
    if isinstance(wait_ms, bool) or not isinstance(wait_ms, Real):
        raise InvalidArgumentType("delay", "a number of milliseconds", wait_ms)
    target = scheduler if scheduler is not None else get_scheduler()
    return target.call_later(max(float(wait_ms), 0.0), func, *args)
