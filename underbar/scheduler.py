from __future__ import annotations
import heapq
import itertools
import threading
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Tuple

from .config import get_settings
from .logger import get_logger

log = get_logger("scheduler")


class ScheduledCall:
    """
    handle for one deferred invocation. cancelling before it fires prevents it from running.
    due_ms is absolute, on the clock of the scheduler that made it (its now_ms).
    """

    def __init__(self, callback: Callable[..., Any], args: Tuple[Any, ...], due_ms: float):
        self.callback = callback
        self.args = args
        self.due_ms = due_ms
        self._cancelled = False
        self._fired = False
        self._on_cancel: Optional[Callable[[], None]] = None

    @property
    def cancelled(self) -> bool: return self._cancelled

    @property
    def fired(self) -> bool: return self._fired

    def cancel(self) -> bool:
        """returns false when the call already ran or was already cancelled"""
        if self._fired or self._cancelled:
            return False
        self._cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()
        log.debug("cancelled %r", self)
        return True

    def _run(self) -> None:
        if self._cancelled or self._fired:
            return
        self._fired = True
        log.debug("firing %r", self)
        # return value is discarded
        self.callback(*self.args)

    def __repr__(self) -> str:
        name = getattr(self.callback, '__name__', repr(self.callback))
        return f"ScheduledCall(callback={name}, due_ms={self.due_ms})"


# --- abstract base class ---

class Scheduler(ABC):
    @property
    @abstractmethod
    def now_ms(self) -> float:
        """current time on this scheduler's clock, in milliseconds"""
        pass

    @abstractmethod
    def call_later(self, wait_ms: float, callback: Callable[..., Any], *args: Any) -> ScheduledCall:
        """run callback(*args) no sooner than wait_ms milliseconds from now"""
        pass


class ThreadingScheduler(Scheduler):
    """one daemon threading.Timer per call. errors surface through threading.excepthook."""

    @property
    def now_ms(self) -> float:
        return time.monotonic() * 1000.0

    def call_later(self, wait_ms: float, callback: Callable[..., Any], *args: Any) -> ScheduledCall:
        call = ScheduledCall(callback, args, due_ms=self.now_ms + wait_ms)

        def fire():
            try:
                call._run()
            except Exception:
                log.exception("delayed call %r raised", call)
                raise

        timer = threading.Timer(wait_ms / 1000.0, fire)
        timer.daemon = True
        call._on_cancel = timer.cancel
        timer.start()
        log.debug("scheduled %r on %s", call, timer.name)
        return call


class ManualScheduler(Scheduler):
    """
    a fake clock. nothing runs until advance() or run_pending() is called,
    then due calls run in due-time order, ties in submission order.
    """

    def __init__(self, start_ms: float = 0.0):
        self._now_ms = start_ms
        self._queue: List[Tuple[float, int, ScheduledCall]] = []
        self._counter = itertools.count()

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @now_ms.setter
    def now_ms(self, value: float) -> None:
        self._now_ms = value

    @property
    def pending(self) -> int:
        return sum(1 for _, _, call in self._queue if not call.cancelled)

    def call_later(self, wait_ms: float, callback: Callable[..., Any], *args: Any) -> ScheduledCall:
        call = ScheduledCall(callback, args, due_ms=self.now_ms + wait_ms)
        heapq.heappush(self._queue, (call.due_ms, next(self._counter), call))
        log.debug("scheduled %r at now_ms=%s", call, self.now_ms)
        return call

    def run_pending(self) -> int:
        """run every call already due at the current time. returns how many ran."""
        ran = 0
        while self._queue and self._queue[0][0] <= self.now_ms:
            _, _, call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            call._run()
            ran += 1
        return ran

    def advance(self, ms: float) -> int:
        """
        move the clock forward, running calls as their due time is passed.
        the clock always ends at the target, even when a callback raises; calls that
        were due but did not run stay queued and run on the next run_pending().
        """
        if ms < 0:
            raise ValueError("cannot move the clock backwards")
        target = self.now_ms + ms
        ran = 0
        # step through due times so callbacks observe the clock at their own due time
        try:
            while self._queue and self._queue[0][0] <= target:
                self.now_ms = max(self.now_ms, self._queue[0][0])
                ran += self.run_pending()
        finally:
            self.now_ms = target
        return ran


# --- process default ---

_default_scheduler: Optional[Scheduler] = None
_default_lock = threading.Lock()


def _build_default() -> Scheduler:
    if get_settings().scheduler == "manual":
        return ManualScheduler()
    return ThreadingScheduler()


def get_scheduler() -> Scheduler:
    """the scheduler delay() uses when none is passed"""
    global _default_scheduler
    with _default_lock:
        if _default_scheduler is None:
            _default_scheduler = _build_default()
        return _default_scheduler


def set_scheduler(scheduler: Optional[Scheduler]) -> Optional[Scheduler]:
    """install a new default (None resets to the configured one). returns the previous default."""
    global _default_scheduler
    with _default_lock:
        previous = _default_scheduler
        _default_scheduler = scheduler
        return previous
