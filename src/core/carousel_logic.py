"""Carousel selection logic - platform agnostic.

The selector keeps an index into a WrappedList (real items padded with a
phantom copy at each end) and offers two behaviours on top of it:

- Boundary correction: when a swipe lands on a phantom, the index is
  silently moved to the real item it mirrors on the next render pass, so
  the deck appears to loop forever.
- Spin: a randomized run of ticks through the real items that slows down
  and settles on a uniformly chosen target.

All mutations happen on the scheduler's loop. Renderers read state and call
the three operations; they never write state directly.
"""

import random
from dataclasses import dataclass, field, replace
from typing import Generic, TypeVar

from src.core.config import ROULETTE_SPIN, SpinSettings
from src.core.items import WrappedList
from src.core.logging import get_logger
from src.core.scheduler import Scheduler

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class SelectorState:
    """Selection state exposed to renderers.

    Attributes:
        current_index: Wrapped index of the card on screen.
        is_spinning: True while a spin is ticking.
        labels_visible: Wrapped index to whether that card's text is shown.
            All labels are hidden for the length of a spin.
    """

    current_index: int = 0
    is_spinning: bool = False
    labels_visible: dict[int, bool] = field(default_factory=dict)


class CarouselSelector(Generic[T]):
    """Controls infinite-carousel navigation and randomized selection."""

    def __init__(
        self,
        scheduler: Scheduler,
        items: WrappedList[T] | None = None,
        spin_settings: SpinSettings = ROULETTE_SPIN,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the selector.

        Args:
            scheduler: Loop abstraction used for ticks and deferred updates.
            items: Initial wrapped list. Defaults to an empty list.
            spin_settings: Timing of spins.
            rng: Random source for spin duration and target. Pass a seeded
                random.Random for reproducible spins.
        """
        self._scheduler = scheduler
        self._spin_settings = spin_settings
        self._rng = rng or random.Random()
        self._items: WrappedList[T] = WrappedList()
        self._state = SelectorState()
        # Bumped on every data source switch so stale callbacks and
        # orphaned spins can tell their list is gone
        self._generation = 0
        self.switch_data_source(items if items is not None else WrappedList())

    @property
    def items(self) -> WrappedList[T]:
        return self._items

    @property
    def state(self) -> SelectorState:
        """A snapshot of the current state."""
        return replace(self._state, labels_visible=dict(self._state.labels_visible))

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def is_spinning(self) -> bool:
        return self._state.is_spinning

    @property
    def item_count(self) -> int:
        """Number of real items (phantoms excluded)."""
        return self._items.real_count

    @property
    def current_item(self) -> T | None:
        if self._items.is_empty:
            return None
        return self._items[self._state.current_index]

    @property
    def current_real_index(self) -> int | None:
        """0-based position of the current card in the unwrapped list."""
        if self._items.is_empty:
            return None
        return self._items.real_index(self._state.current_index)

    @property
    def spin_settings(self) -> SpinSettings:
        return self._spin_settings

    def is_label_visible(self, index: int) -> bool:
        return self._state.labels_visible.get(index, False)

    def on_index_changed(self, new_index: int) -> None:
        """Record a swipe to new_index and schedule boundary correction.

        Landing on a phantom moves the index to the real card it mirrors:
        index 0 goes to len-2, index len-1 goes to 1. The move is deferred
        to the next pass of the loop so it never interleaves with the render
        of the phantom itself. Ignored while a spin is in progress, for an
        empty list, or for an index outside the wrapped list.
        """
        if self._items.is_empty:
            logger.debug("index_change_ignored", reason="empty", index=new_index)
            return
        if self._state.is_spinning:
            logger.debug("index_change_ignored", reason="spinning", index=new_index)
            return
        if not 0 <= new_index < len(self._items):
            logger.debug(
                "index_change_ignored",
                reason="out_of_range",
                index=new_index,
                length=len(self._items),
            )
            return

        self._state.current_index = new_index
        if not self._items.is_boundary(new_index):
            return

        if new_index == 0:
            target = self._items.last_real_index
        else:
            target = self._items.first_real_index
        generation = self._generation
        self._scheduler.call_soon(
            lambda: self._correct_boundary(generation, new_index, target)
        )

    def _correct_boundary(self, generation: int, expected: int, target: int) -> None:
        # The list, the spin state or the index may have changed since the
        # correction was scheduled
        if (
            generation != self._generation
            or self._state.is_spinning
            or self._state.current_index != expected
        ):
            return
        self._state.current_index = target
        logger.debug("boundary_corrected", from_index=expected, to_index=target)

    async def spin(self) -> T | None:
        """Spin through the real items and settle on a random one.

        Each tick advances the index by one real position, wrapping from the
        last real item back to the first. The delay between ticks starts at
        the configured initial delay and grows by the growth factor up to the
        maximum delay. Once the elapsed time on the scheduler clock reaches
        the randomly drawn duration, the index snaps to the pre-drawn target,
        spinning stops and, after the reveal delay, labels are shown again.

        Returns:
            The settled item, or None if the spin was ignored (empty list or
            already spinning) or abandoned by a data source switch.
        """
        if self._state.is_spinning:
            logger.debug("spin_ignored", reason="already_spinning")
            return None
        if self._items.is_empty:
            logger.debug("spin_ignored", reason="empty")
            return None

        settings = self._spin_settings
        generation = self._generation
        real_count = self._items.real_count
        duration = self._rng.uniform(settings.min_seconds, settings.max_seconds)
        final_index = self._rng.randint(1, real_count)

        self._state.is_spinning = True
        self._set_labels_visible(False)
        logger.info(
            "spin_started",
            duration_seconds=round(duration, 3),
            final_index=final_index,
            item_count=real_count,
        )

        started = self._scheduler.monotonic()
        delay = settings.initial_delay
        ticks = 0
        settled = False
        try:
            while self._scheduler.monotonic() - started < duration:
                await self._scheduler.sleep(delay)
                if generation != self._generation:
                    logger.info("spin_abandoned", ticks=ticks)
                    return None
                # Step forward through [1, n], wrapping n back to 1
                self._state.current_index = self._state.current_index % real_count + 1
                ticks += 1
                delay = min(delay * settings.growth, settings.max_delay)

            self._state.current_index = final_index
            self._state.is_spinning = False
            settled = True
        finally:
            if not settled and generation == self._generation:
                self._state.is_spinning = False
                self._set_labels_visible(True)

        item = self._items[final_index]
        logger.info(
            "spin_settled",
            final_index=final_index,
            ticks=ticks,
            elapsed_seconds=round(self._scheduler.monotonic() - started, 3),
        )

        try:
            if settings.reveal_delay > 0:
                await self._scheduler.sleep(settings.reveal_delay)
        finally:
            # A switch or a new spin during the reveal delay owns the labels now
            if generation == self._generation and not self._state.is_spinning:
                self._set_labels_visible(True)
        return item

    def switch_data_source(self, items: WrappedList[T]) -> None:
        """Replace the list and reset selection state.

        The index moves to the first real item (0 for an empty list), any
        running spin is abandoned and every label becomes visible.
        """
        self._generation += 1
        self._items = items
        self._state = SelectorState(
            current_index=items.first_real_index,
            is_spinning=False,
            labels_visible={index: True for index in range(len(items))},
        )
        logger.info("data_source_switched", item_count=items.real_count)

    def _set_labels_visible(self, visible: bool) -> None:
        for index in self._state.labels_visible:
            self._state.labels_visible[index] = visible
