"""Fake implementation of the Scheduler protocol for testing.

FakeScheduler runs spins on a virtual clock: sleep() advances the clock by
the requested amount instead of waiting, then yields once to the event loop
so concurrently scheduled tasks still interleave. Deferred callbacks are
queued and only run when the test calls run_pending(), which makes the
"next render pass" explicit.
"""

import asyncio
from collections.abc import Callable


class FakeScheduler:
    """Deterministic scheduler with a virtual monotonic clock.

    Attributes:
        now: Current virtual time in seconds.
        sleeps: Every duration passed to sleep(), in call order.
        sleep_hooks: Callables invoked at the start of each sleep(), useful
            for sampling state once per tick.

    Example:
        >>> scheduler = FakeScheduler()
        >>> selector = CarouselSelector(scheduler, WrappedList(items))
        >>> await selector.spin()
        >>> assert scheduler.now >= CLASSIC_SPIN.min_seconds
    """

    def __init__(self, start: float = 0.0) -> None:
        self.now = start
        self.sleeps: list[float] = []
        self.sleep_hooks: list[Callable[[], None]] = []
        self._pending: list[Callable[[], None]] = []

    def monotonic(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        for hook in self.sleep_hooks:
            hook()
        self.sleeps.append(seconds)
        self.now += seconds
        await asyncio.sleep(0)

    def call_soon(self, callback: Callable[[], None]) -> None:
        self._pending.append(callback)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def run_pending(self) -> int:
        """Run every queued callback once and return how many ran."""
        callbacks, self._pending = self._pending, []
        for callback in callbacks:
            callback()
        return len(callbacks)
