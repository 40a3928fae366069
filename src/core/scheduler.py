"""Scheduling protocol for the UI update loop.

The selector never touches wall-clock timers directly. It asks a Scheduler
for the current monotonic time, awaits its sleep between spin ticks, and
hands it deferred callbacks for the next render pass. Production code uses
the running asyncio loop; tests inject a fake that advances a virtual clock.
"""

import asyncio
from collections.abc import Callable
from typing import Protocol


class Scheduler(Protocol):
    """Protocol for the single-threaded loop that owns selector state."""

    def monotonic(self) -> float:
        """Return the current monotonic time in seconds."""
        ...

    async def sleep(self, seconds: float) -> None:
        """Suspend the caller for the given number of seconds.

        Other callbacks on the same loop run while the caller is suspended.
        """
        ...

    def call_soon(self, callback: Callable[[], None]) -> None:
        """Run callback on the next pass of the loop, not synchronously."""
        ...


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop.

    The loop is resolved lazily so the scheduler can be created before the
    loop starts running.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def monotonic(self) -> float:
        return self.loop.time()

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)

    def call_soon(self, callback: Callable[[], None]) -> None:
        self.loop.call_soon(callback)
