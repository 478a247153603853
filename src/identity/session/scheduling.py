"""Schedulers for the session machine's deferred work.

The machine never calls the event loop directly: it asks a ``Scheduler`` to run
a callback on the next tick, after a delay, or to drive a coroutine. In the
storefront that is the running asyncio loop; ``ManualScheduler`` replaces it with
a virtual clock so ordering can be fixed step by step.
"""

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque


class TimerHandle(ABC):
    @abstractmethod
    def cancel(self) -> None: ...


class Scheduler(ABC):
    """Abstract interface over a single-threaded cooperative event loop."""

    @abstractmethod
    def call_soon(self, callback, *args) -> None:
        """Run ``callback(*args)`` on the next tick, after the current frame returns."""
        ...

    @abstractmethod
    def call_later(self, delay: float, callback, *args) -> TimerHandle:
        """Run ``callback(*args)`` once ``delay`` seconds have passed."""
        ...

    @abstractmethod
    def spawn(self, coro) -> None:
        """Start driving ``coro`` as an independent task."""
        ...


class AsyncioScheduler(Scheduler):
    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop
        self._tasks: set[asyncio.Task] = set()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_soon(self, callback, *args) -> None:
        self.loop.call_soon(callback, *args)

    def call_later(self, delay: float, callback, *args) -> TimerHandle:
        return self.loop.call_later(delay, callback, *args)

    def spawn(self, coro) -> None:
        task = self.loop.create_task(coro)
        # The loop only keeps weak references to tasks
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)


class _ManualTimer(TimerHandle):
    def __init__(self, when, callback, args):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(Scheduler):
    """Deterministic scheduler with a virtual clock.

    Nothing runs until the owner calls ``run_pending()`` or ``advance()``.
    Spawned coroutines are stepped with ``send(None)``; one that suspends is
    parked and polled again once per ``run_pending()`` call, so it should only
    await objects that yield bare ``None`` (such as ``ProviderGate``), never
    asyncio futures.
    """

    def __init__(self):
        self.now = 0.0
        self._ready = deque()
        self._parked = []
        self._timers = []
        self._sequence = itertools.count()

    def call_soon(self, callback, *args) -> None:
        self._ready.append((callback, args))

    def call_later(self, delay: float, callback, *args) -> TimerHandle:
        timer = _ManualTimer(self.now + delay, callback, args)
        heapq.heappush(self._timers, (timer.when, next(self._sequence), timer))
        return timer

    def spawn(self, coro) -> None:
        self._ready.append((self._step, (coro,)))

    def _step(self, coro) -> None:
        try:
            coro.send(None)
        except StopIteration:
            return
        self._parked.append(coro)

    @property
    def pending_timers(self) -> int:
        return sum(1 for _, _, timer in self._timers if not timer.cancelled)

    @property
    def idle(self) -> bool:
        return not self._ready and not self._parked

    def run_pending(self) -> int:
        """Run every ready callback, including ones queued while running.

        Parked coroutines are resumed once. Returns the number of callbacks run.
        """
        for coro in self._parked:
            self._ready.append((self._step, (coro,)))
        self._parked = []

        ran = 0
        while self._ready:
            callback, args = self._ready.popleft()
            callback(*args)
            ran += 1
        return ran

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due timers in order."""
        target = self.now + seconds
        self.run_pending()
        while self._timers and self._timers[0][0] <= target:
            when, _, timer = heapq.heappop(self._timers)
            self.now = when
            if not timer.cancelled:
                self._ready.append((timer.callback, timer.args))
                self.run_pending()
        self.now = target

    def close(self) -> None:
        """Drop all pending work, closing coroutines that never finished."""
        for callback, args in self._ready:
            if callback == self._step:
                args[0].close()
        for coro in self._parked:
            coro.close()
        self._ready.clear()
        self._parked = []
        self._timers = []
