"""Core selection logic and protocols.

This module contains the platform-agnostic carousel selector, the store data
model and loaders, and the ambient logging, error and settings helpers.
"""

from src.core.card_faces import LOADING_TEXT, CardFace, CardFaces, card_text
from src.core.carousel_logic import CarouselSelector, SelectorState
from src.core.config import (
    CLASSIC_SPIN,
    ROULETTE_SPIN,
    SPIN_PRESETS,
    AppSettings,
    SpinSettings,
    load_settings,
)
from src.core.errors import (
    DecodeFailureError,
    ErrorCategory,
    LoadError,
    MissingResourceError,
    classify_error,
)
from src.core.items import Item, WrappedList
from src.core.loaders import load_items, parse_csv, parse_items, parse_json
from src.core.locations import (
    DataSource,
    LocationMap,
    SourceFormat,
    SourceRegistry,
    map_for,
)
from src.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)
from src.core.scheduler import AsyncioScheduler, Scheduler
from src.core.session import CarouselSession

__all__ = [
    # Carousel
    "CarouselSelector",
    "SelectorState",
    "CarouselSession",
    # Card faces
    "CardFace",
    "CardFaces",
    "LOADING_TEXT",
    "card_text",
    # Data model and loading
    "Item",
    "WrappedList",
    "load_items",
    "parse_csv",
    "parse_items",
    "parse_json",
    # Locations
    "DataSource",
    "LocationMap",
    "SourceFormat",
    "SourceRegistry",
    "map_for",
    # Error handling
    "DecodeFailureError",
    "ErrorCategory",
    "LoadError",
    "MissingResourceError",
    "classify_error",
    # Settings
    "AppSettings",
    "CLASSIC_SPIN",
    "ROULETTE_SPIN",
    "SPIN_PRESETS",
    "SpinSettings",
    "load_settings",
    # Scheduling
    "AsyncioScheduler",
    "Scheduler",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "unbind_contextvars",
]
