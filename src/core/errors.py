"""Error classification for bundled data loading.

Only two things can go wrong when the app reads its store lists: the named
file is not in the bundle, or its contents cannot be decoded. Both are
raised as LoadError subclasses by the loaders and turned into an empty
item list (plus a log line) at the load_items boundary.

Example:
    from src.core.errors import LoadError, classify_error

    try:
        text = bundle.read_text("information", "csv")
    except OSError as ex:
        raise LoadError.from_exception(ex) from ex
"""

import json
from enum import Enum, auto

from pydantic import ValidationError

from src.core.logging import get_logger

logger = get_logger(__name__)


class ErrorCategory(Enum):
    """Classification of load failures."""

    MISSING_RESOURCE = auto()  # Named data file absent from the bundle
    DECODE_FAILURE = auto()  # Malformed file contents
    UNKNOWN = auto()  # Unclassified error


class LoadError(Exception):
    """Error raised while loading a bundled data source.

    Attributes:
        category: The specific kind of load failure.
        original_error: The underlying exception that was classified.
    """

    default_category = ErrorCategory.UNKNOWN

    def __init__(
        self,
        message: str,
        category: ErrorCategory | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category or self.default_category
        self.original_error = original_error

    @classmethod
    def from_exception(
        cls,
        ex: Exception,
        category: ErrorCategory | None = None,
    ) -> "LoadError":
        """Create a LoadError (of the matching subclass) from an exception."""
        if category is None:
            category = classify_error(ex)
        error_cls: type[LoadError] = cls
        if cls is LoadError:
            error_cls = _CATEGORY_CLASSES.get(category, LoadError)
        return error_cls(message=str(ex), category=category, original_error=ex)


class MissingResourceError(LoadError):
    """The requested data file does not exist in the resource bundle.

    Attributes:
        resource: The "name.extension" that was looked up, when known.
    """

    default_category = ErrorCategory.MISSING_RESOURCE

    def __init__(
        self,
        message: str,
        category: ErrorCategory | None = None,
        original_error: Exception | None = None,
        resource: str | None = None,
    ) -> None:
        super().__init__(message, category, original_error)
        self.resource = resource


class DecodeFailureError(LoadError):
    """The data file exists but its contents could not be decoded."""

    default_category = ErrorCategory.DECODE_FAILURE


_CATEGORY_CLASSES: dict[ErrorCategory, type[LoadError]] = {
    ErrorCategory.MISSING_RESOURCE: MissingResourceError,
    ErrorCategory.DECODE_FAILURE: DecodeFailureError,
}


def classify_error(error: Exception) -> ErrorCategory:
    """Classify an exception into a load error category.

    Args:
        error: The exception to classify.

    Returns:
        The ErrorCategory that best matches the error.
    """
    if isinstance(error, LoadError):
        return error.category

    if isinstance(error, (FileNotFoundError, IsADirectoryError)):
        return ErrorCategory.MISSING_RESOURCE

    # JSONDecodeError and UnicodeDecodeError are ValueError subclasses,
    # so they must be matched before the generic message checks below
    if isinstance(
        error,
        (json.JSONDecodeError, UnicodeDecodeError, ValidationError),
    ):
        return ErrorCategory.DECODE_FAILURE

    error_str = str(error).lower()
    if "not found" in error_str or "no such file" in error_str:
        return ErrorCategory.MISSING_RESOURCE
    if "decode" in error_str or "malformed" in error_str:
        return ErrorCategory.DECODE_FAILURE

    logger.debug("unclassified_load_error", error_type=type(error).__name__)
    return ErrorCategory.UNKNOWN
