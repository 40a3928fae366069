"""Store items and the wrapped list used for the infinite carousel.

All types are platform-agnostic; renderers only read them.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Generic, TypeVar
from uuid import UUID, uuid4

T = TypeVar("T")


@dataclass(frozen=True)
class Item:
    """A single store/restaurant card.

    Attributes:
        name: Store name shown on the card front.
        description: Text shown on the card back.
        filename: Image file for the store (JSON sources only).
        coordinates: (x, y) position on the location map (JSON sources only).
        hours: Weekday or weekday range to opening hours, e.g.
            {"Mon-Fri": "11:00-21:00"} (JSON sources only).
        id: Opaque unique identifier assigned at load time.
    """

    name: str
    description: str
    filename: str | None = None
    coordinates: tuple[float, float] | None = None
    hours: Mapping[str, str] = field(default_factory=dict, compare=False)
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        # Freeze the hours mapping along with the rest of the item
        object.__setattr__(self, "hours", MappingProxyType(dict(self.hours)))


class WrappedList(Generic[T]):
    """A list padded with a boundary duplicate at each end.

    For real items [a, b, c] the wrapped sequence is [c, a, b, c, a]. Index 0
    and index len-1 are phantom copies that let a swipe past either end land
    on a card that looks like the wrap-around neighbour. An empty real list
    produces an empty wrapped list with no phantoms.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._real: tuple[T, ...] = tuple(items)
        if self._real:
            self._wrapped: tuple[T, ...] = (
                self._real[-1],
                *self._real,
                self._real[0],
            )
        else:
            self._wrapped = ()

    def __len__(self) -> int:
        return len(self._wrapped)

    def __getitem__(self, index: int) -> T:
        return self._wrapped[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._wrapped)

    def __repr__(self) -> str:
        return f"WrappedList(real_count={len(self._real)})"

    @property
    def real_items(self) -> tuple[T, ...]:
        return self._real

    @property
    def real_count(self) -> int:
        return len(self._real)

    @property
    def is_empty(self) -> bool:
        return not self._real

    @property
    def first_real_index(self) -> int:
        """Wrapped index of the first real item (0 when empty)."""
        return 1 if self._real else 0

    @property
    def last_real_index(self) -> int:
        """Wrapped index of the last real item (0 when empty)."""
        return len(self._real)

    def is_boundary(self, index: int) -> bool:
        """Whether index points at one of the two phantom duplicates."""
        return bool(self._real) and index in (0, len(self._wrapped) - 1)

    def real_index(self, index: int) -> int:
        """Map a wrapped index to its 0-based position in the real list.

        Raises:
            IndexError: If the list is empty or index is out of range.
        """
        if not 0 <= index < len(self._wrapped):
            raise IndexError(f"wrapped index out of range: {index}")
        return (index - 1) % len(self._real)
