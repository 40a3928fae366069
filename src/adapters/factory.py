"""Resource bundle factory.

Supported backends:
- "directory": Data files in a directory on disk
- "memory": In-memory resources for testing

Example:
    # Bundle rooted at the data directory
    bundle = create_bundle("directory", root="data")

    # Empty in-memory bundle for testing
    bundle = create_bundle("memory")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Union

from src.adapters.directory_bundle import DirectoryBundle

if TYPE_CHECKING:
    from src.adapters.memory_bundle import MemoryBundle

BundleType = Union["DirectoryBundle", "MemoryBundle"]


def create_bundle(backend: str, **kwargs: str | Path) -> BundleType:
    """Create a resource bundle for the specified backend.

    Args:
        backend: "directory" or "memory".
        **kwargs: Backend-specific options:
            - root: Required for "directory". Directory holding the files.

    Returns:
        A bundle instance of the appropriate type.

    Raises:
        ValueError: If the backend is not supported or required kwargs are missing.
    """
    if backend == "directory":
        root = kwargs.get("root")
        if root is None:
            raise ValueError("'root' is required for directory backend")
        return DirectoryBundle(root)

    if backend == "memory":
        from src.adapters.memory_bundle import MemoryBundle

        return MemoryBundle()

    raise ValueError(
        f"Unsupported backend: {backend!r}. Supported backends: 'directory', 'memory'"
    )
