"""In-memory implementation of the ResourceBundle protocol for testing.

Resources are held in a dict keyed by "name.extension". Values may be str or
bytes; bytes are decoded as UTF-8 on read so decode failures can be
exercised without touching the filesystem.
"""

from src.core.errors import DecodeFailureError, MissingResourceError


class MemoryBundle:
    """Resource bundle backed by a dictionary.

    Example:
        bundle = MemoryBundle({"information.csv": "Ramen,Tonkotsu"})
        bundle.read_text("information", "csv")
    """

    def __init__(self, resources: dict[str, str | bytes] | None = None) -> None:
        self._resources: dict[str, str | bytes] = dict(resources or {})

    def add(self, name: str, extension: str, content: str | bytes) -> None:
        """Add or replace a resource."""
        self._resources[f"{name}.{extension}"] = content

    def has_resource(self, name: str, extension: str) -> bool:
        return f"{name}.{extension}" in self._resources

    def read_text(self, name: str, extension: str) -> str:
        key = f"{name}.{extension}"
        if key not in self._resources:
            raise MissingResourceError(
                f"Resource not found in bundle: {key}", resource=key
            )
        content = self._resources[key]
        if isinstance(content, str):
            return content
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as ex:
            raise DecodeFailureError.from_exception(ex) from ex
