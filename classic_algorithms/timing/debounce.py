"""Debounce wrappers that only run the last call of a burst.

``debounce`` schedules the wrapped callable on a ``threading.Timer``;
``debounce_async`` schedules it on the running asyncio loop and hands each
caller a future.
"""
from __future__ import annotations

import asyncio
import inspect
import threading
from typing import Any, Callable, Dict, Optional, Protocol, Set, Tuple

import structlog

from ..errors import InvalidRangeError, InvalidTypeError, SupersededCallError

logger = structlog.get_logger(__name__)


class _Timer(Protocol):
    daemon: bool

    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[..., Any]], _Timer]


def _validate(fn: Any, delay: Any) -> float:
    if not callable(fn):
        raise InvalidTypeError(f"fn must be callable, got {type(fn).__name__}")
    if isinstance(delay, bool) or not isinstance(delay, (int, float)):
        raise InvalidTypeError(f"delay must be a number of seconds, got {type(delay).__name__}")
    if delay < 0:
        raise InvalidRangeError(f"delay must not be negative, got {delay}")
    return float(delay)


class Debounced:
    """Callable wrapper that delays ``fn`` until calls stop for ``delay`` seconds.

    Every call cancels the pending timer (if any) and schedules a new one with
    the latest arguments. The wrapper owns exactly one pending timer at a time.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        delay: float,
        *,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self._fn = fn
        self._delay = _validate(fn, delay)
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Optional[_Timer] = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        """True while a call is scheduled but has not fired yet."""

        with self._lock:
            return self._timer is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            timer = self._timer_factory(self._delay, lambda: self._fire(timer, args, kwargs))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def _fire(self, timer: _Timer, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> None:
        with self._lock:
            # A cancelled timer can still fire if cancel() raced with expiry.
            if self._timer is not timer:
                return
            self._timer = None
        try:
            self._fn(*args, **kwargs)
        except Exception:
            logger.exception("debounced call failed", fn=getattr(self._fn, "__name__", repr(self._fn)))


class AsyncDebounced:
    """Asyncio flavour of :class:`Debounced`.

    Each call returns an ``asyncio.Future``. The future of the call that
    actually fires resolves with the result of ``fn`` (awaited when ``fn``
    returns an awaitable) or with its exception. A call that is superseded
    before firing has its future failed with :class:`SupersededCallError`, so
    no caller is left waiting forever.
    """

    def __init__(self, fn: Callable[..., Any], delay: float) -> None:
        self._fn = fn
        self._delay = _validate(fn, delay)
        self._handle: Optional[asyncio.TimerHandle] = None
        self._future: Optional[asyncio.Future] = None
        # 事件循环只弱引用任务，运行中的 awaitable 由这里持有
        self._tasks: Set[asyncio.Future] = set()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self, *args: Any, **kwargs: Any) -> asyncio.Future:
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self._future is not None and not self._future.done():
            self._future.set_exception(SupersededCallError("superseded by a later call"))

        future = loop.create_future()
        self._future = future
        self._handle = loop.call_later(self._delay, self._fire, future, args, kwargs)
        return future

    def _fire(self, future: asyncio.Future, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> None:
        self._handle = None
        self._future = None
        if future.done():
            return
        try:
            result = self._fn(*args, **kwargs)
        except Exception as exc:
            future.set_exception(exc)
            return
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
            task.add_done_callback(lambda done: _settle_from(done, future))
        else:
            future.set_result(result)


def _settle_from(task: asyncio.Future, future: asyncio.Future) -> None:
    if future.done():
        return
    if task.cancelled():
        future.cancel()
    elif task.exception() is not None:
        future.set_exception(task.exception())
    else:
        future.set_result(task.result())


def debounce(
    fn: Callable[..., Any],
    delay: float,
    *,
    timer_factory: TimerFactory = threading.Timer,
) -> Debounced:
    """Wrap ``fn`` so that a burst of calls results in a single deferred call."""

    return Debounced(fn, delay, timer_factory=timer_factory)


def debounce_async(fn: Callable[..., Any], delay: float) -> AsyncDebounced:
    """Wrap ``fn`` for asyncio code; see :class:`AsyncDebounced`."""

    return AsyncDebounced(fn, delay)
