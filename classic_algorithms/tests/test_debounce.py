import asyncio
import threading
import time

import pytest

from classic_algorithms.errors import InvalidRangeError, InvalidTypeError, SupersededCallError
from classic_algorithms.timing.debounce import debounce, debounce_async


class FakeTimer:
    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.function()


@pytest.fixture
def timers():
    return []


@pytest.fixture
def timer_factory(timers):
    def factory(interval, function):
        timer = FakeTimer(interval, function)
        timers.append(timer)
        return timer

    return factory


def test_debounce_runs_only_last_call(timers, timer_factory):
    calls = []
    debounced = debounce(lambda *args, **kwargs: calls.append((args, kwargs)), 0.5,
                         timer_factory=timer_factory)

    debounced(1)
    debounced(2)
    debounced(3, key="last")

    assert len(timers) == 3
    assert all(timer.started and timer.daemon for timer in timers)
    assert all(timer.interval == 0.5 for timer in timers)
    assert [timer.cancelled for timer in timers] == [True, True, False]
    assert debounced.pending

    for timer in timers:
        timer.fire()

    assert calls == [((3,), {"key": "last"})]
    assert not debounced.pending


def test_debounce_ignores_stale_timer_that_fires_after_cancel(timers, timer_factory):
    calls = []
    debounced = debounce(calls.append, 1, timer_factory=timer_factory)
    debounced("first")
    debounced("second")

    timers[0].function()  # expiry raced with cancel()
    assert calls == []

    timers[1].fire()
    assert calls == ["second"]


def test_debounce_separate_bursts_each_fire(timers, timer_factory):
    calls = []
    debounced = debounce(calls.append, 1, timer_factory=timer_factory)
    debounced("a")
    timers[-1].fire()
    debounced("b")
    timers[-1].fire()
    assert calls == ["a", "b"]


def test_debounce_swallows_errors_on_timer_thread(timers, timer_factory):
    def boom():
        raise RuntimeError("boom")

    debounced = debounce(boom, 0, timer_factory=timer_factory)
    debounced()
    timers[0].fire()
    assert not debounced.pending


def test_debounce_with_real_timer():
    calls = []
    fired = threading.Event()

    def record(value):
        calls.append(value)
        fired.set()

    debounced = debounce(record, 0.05)
    for value in (1, 2, 3):
        debounced(value)

    assert fired.wait(timeout=2)
    time.sleep(0.1)
    assert calls == [3]


def test_debounce_validates_arguments():
    with pytest.raises(InvalidTypeError):
        debounce(123, 1)
    with pytest.raises(InvalidTypeError):
        debounce(print, "1")
    with pytest.raises(InvalidRangeError):
        debounce(print, -1)


def test_async_debounce_resolves_last_and_supersedes_others():
    async def scenario():
        calls = []

        def double(x):
            calls.append(x)
            return x * 2

        debounced = debounce_async(double, 0.01)
        first = debounced(1)
        second = debounced(2)
        third = debounced(3)

        assert await third == 6
        with pytest.raises(SupersededCallError):
            await first
        with pytest.raises(SupersededCallError):
            await second
        assert calls == [3]
        assert not debounced.pending

    asyncio.run(scenario())


def test_async_debounce_awaits_coroutine_functions():
    async def scenario():
        async def echo(value):
            await asyncio.sleep(0)
            return value

        debounced = debounce_async(echo, 0.01)
        assert await debounced("x") == "x"

    asyncio.run(scenario())


def test_async_debounce_propagates_errors_to_winning_call():
    async def scenario():
        def fail():
            raise ValueError("bad")

        debounced = debounce_async(fail, 0.01)
        with pytest.raises(ValueError):
            await debounced()

    asyncio.run(scenario())


def test_async_debounce_new_burst_after_fire():
    async def scenario():
        debounced = debounce_async(lambda v: v, 0.01)
        assert await debounced("a") == "a"
        assert await debounced("b") == "b"

    asyncio.run(scenario())


def test_async_debounce_holds_running_task_until_done():
    async def scenario():
        release = asyncio.Event()

        async def slow(value):
            await release.wait()
            return value

        debounced = debounce_async(slow, 0)
        future = debounced("x")
        while not debounced._tasks:
            await asyncio.sleep(0)
        assert len(debounced._tasks) == 1
        assert not future.done()

        release.set()
        assert await future == "x"
        assert debounced._tasks == set()

    asyncio.run(scenario())
