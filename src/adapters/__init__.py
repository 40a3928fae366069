"""Adapters for external systems.

This module contains implementations of the ResourceBundle protocol for the
places bundled data files can live.
"""

from src.adapters.directory_bundle import DirectoryBundle
from src.adapters.factory import create_bundle
from src.adapters.memory_bundle import MemoryBundle

__all__ = [
    "DirectoryBundle",
    "MemoryBundle",
    "create_bundle",
]
