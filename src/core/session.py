"""Carousel session: the state a renderer binds to.

A session ties a resource bundle, the source registry, the selector and the
card faces together. Renderers call load() when the user picks a location,
forward swipes to on_index_changed(), taps to flip() and the random button
to spin(), and read everything else back for display.
"""

import random

from src.core.card_faces import LOADING_TEXT, CardFace, CardFaces, card_text
from src.core.carousel_logic import CarouselSelector
from src.core.config import AppSettings
from src.core.items import Item, WrappedList
from src.core.loaders import load_items
from src.core.locations import DataSource, LocationMap, SourceRegistry, map_for
from src.core.logging import bind_contextvars, get_logger
from src.core.scheduler import Scheduler
from src.ports.resources import ResourceBundle

logger = get_logger(__name__)


class CarouselSession:
    """Wires data loading, selection and card faces for one screen."""

    def __init__(
        self,
        bundle: ResourceBundle,
        scheduler: Scheduler,
        settings: AppSettings | None = None,
        registry: SourceRegistry | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._bundle = bundle
        self._settings = settings or AppSettings()
        self._registry = registry or SourceRegistry()
        self._selector: CarouselSelector[Item] = CarouselSelector(
            scheduler,
            spin_settings=self._settings.spin,
            rng=rng,
        )
        self._faces = CardFaces()
        self._source: DataSource | None = None

    @property
    def selector(self) -> CarouselSelector[Item]:
        return self._selector

    @property
    def faces(self) -> CardFaces:
        return self._faces

    @property
    def source(self) -> DataSource | None:
        """The data source currently loaded, or None before the first load."""
        return self._source

    @property
    def registry(self) -> SourceRegistry:
        return self._registry

    @property
    def is_empty(self) -> bool:
        return self._selector.item_count == 0

    def load(self, source_key: str | None = None) -> int:
        """Load a data source and make it the active deck.

        Args:
            source_key: Registered source key. Defaults to the configured
                default source.

        Returns:
            The number of real items loaded (0 when loading failed).

        Raises:
            KeyError: If source_key is not registered.
        """
        source = self._registry.get(source_key or self._settings.default_source)
        items = load_items(self._bundle, source)
        self._source = source
        bind_contextvars(source=source.key)
        self._selector.switch_data_source(WrappedList(items))
        self._faces.reset()
        return len(items)

    def on_index_changed(self, new_index: int) -> None:
        self._selector.on_index_changed(new_index)

    async def spin(self) -> Item | None:
        return await self._selector.spin()

    def flip(self, position: int | None = None) -> CardFace:
        """Flip the card at position (default: the current card)."""
        if position is None:
            position = self._selector.current_index
        return self._faces.flip(position)

    def text_at(self, position: int) -> str:
        """Text the card at a wrapped position shows right now.

        Raises:
            IndexError: If position is outside the wrapped list.
        """
        if self.is_empty:
            return LOADING_TEXT
        items = self._selector.items
        if not 0 <= position < len(items):
            raise IndexError(f"Card position {position} out of range")
        item = items[position]
        return card_text(
            item,
            self._faces.face(position),
            self._selector.is_label_visible(position),
        )

    def current_text(self) -> str:
        if self.is_empty:
            return LOADING_TEXT
        return self.text_at(self._selector.current_index)

    def current_map(self) -> LocationMap | None:
        """Map for the loaded location, or None before the first load."""
        if self._source is None:
            return None
        return map_for(self._source.title)
