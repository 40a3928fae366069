"""Resource bundle protocol for bundled, read-only data files.

The app ships its store lists inside the application bundle. This port lets
the core look files up by name and extension without knowing whether they
come from a directory on disk, a packaged archive or an in-memory fixture.
"""

from typing import Protocol


class ResourceBundle(Protocol):
    """Protocol for read-only lookups of bundled text resources."""

    def has_resource(self, name: str, extension: str) -> bool:
        """Check whether a resource exists in the bundle.

        Args:
            name: Resource name without extension (e.g., "information").
            extension: File extension without the dot (e.g., "csv").

        Returns:
            True if the resource can be read.
        """
        ...

    def read_text(self, name: str, extension: str) -> str:
        """Read a resource as UTF-8 text.

        Args:
            name: Resource name without extension.
            extension: File extension without the dot.

        Returns:
            The decoded file contents.

        Raises:
            MissingResourceError: If the resource is not in the bundle.
            DecodeFailureError: If the contents are not valid UTF-8.
        """
        ...
