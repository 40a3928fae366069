"""Filesystem implementation of the ResourceBundle protocol."""

from pathlib import Path

from src.core.errors import DecodeFailureError, MissingResourceError
from src.core.logging import get_logger

logger = get_logger(__name__)


class DirectoryBundle:
    """Resource bundle backed by a flat directory of data files.

    Resources are resolved as "<root>/<name>.<extension>".

    Example:
        bundle = DirectoryBundle("data")
        text = bundle.read_text("information", "csv")
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def _path_for(self, name: str, extension: str) -> Path:
        return self._root / f"{name}.{extension}"

    def has_resource(self, name: str, extension: str) -> bool:
        return self._path_for(name, extension).is_file()

    def read_text(self, name: str, extension: str) -> str:
        path = self._path_for(name, extension)
        if not path.is_file():
            raise MissingResourceError(
                f"Resource not found in bundle: {path}",
                resource=path.name,
            )
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as ex:
            raise DecodeFailureError.from_exception(ex) from ex
        except OSError as ex:
            logger.warning("resource_read_failed", path=str(path), error=str(ex))
            raise MissingResourceError(
                f"Resource could not be read: {path}",
                original_error=ex,
                resource=path.name,
            ) from ex
