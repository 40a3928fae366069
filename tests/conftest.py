"""Shared pytest fixtures for the carousel tests."""

from pathlib import Path

import pytest

from src.adapters.memory_bundle import MemoryBundle
from src.core.config import SpinSettings
from src.core.items import Item, WrappedList
from tests.mocks.scheduler import FakeScheduler

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    """Provide a scheduler on a virtual clock starting at t=0."""
    return FakeScheduler()


@pytest.fixture
def sample_items() -> list[Item]:
    """Provide three real items.

    Wrapped, these become [Curry, Ramen, Pho, Curry, Ramen] (length 5).
    """
    return [
        Item(name="Ramen", description="Tonkotsu broth"),
        Item(name="Pho", description="Beef noodle soup"),
        Item(name="Curry", description="Katsu curry rice"),
    ]


@pytest.fixture
def wrapped_items(sample_items: list[Item]) -> WrappedList[Item]:
    return WrappedList(sample_items)


@pytest.fixture
def fast_spin() -> SpinSettings:
    """Spin settings short enough to reason about tick by tick."""
    return SpinSettings(
        min_seconds=1.0,
        max_seconds=2.0,
        initial_delay=0.1,
        growth=1.5,
        max_delay=0.4,
        reveal_delay=0.2,
    )


@pytest.fixture
def memory_bundle() -> MemoryBundle:
    """Provide an in-memory bundle with one CSV and one JSON source."""
    return MemoryBundle(
        {
            "information.csv": 'Ramen,Tonkotsu\nPho,"Beef, herbs"\n\nlonely\n',
            "back_door.json": (
                '[{"stores": "Bento", "description": "Pork chop", '
                '"filename": "bento", "x": 1, "y": 2, '
                '"hours": {"Mon-Fri": "10:00-19:00"}}]'
            ),
        }
    )


@pytest.fixture
def data_dir() -> Path:
    """Directory holding the bundled sample data files."""
    return DATA_DIR
