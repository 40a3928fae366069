"""Parsing of bundled store lists into Items.

Two formats are supported:

- CSV: one store per line, "name,description". Double quotes may wrap any
  part of a field so it can contain commas; the quotes themselves are
  dropped. Blank lines and lines with fewer than two fields are skipped.
  There is no header row.
- JSON: an array of objects with keys "stores" (the name), "description",
  "filename", "x", "y" and "hours". Any decode or validation error rejects
  the whole file.

parse_csv and parse_json raise LoadError subclasses; load_items is the
degrading boundary that logs and returns an empty list instead.
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from src.core.errors import DecodeFailureError, LoadError
from src.core.items import Item
from src.core.locations import DataSource, SourceFormat
from src.core.logging import get_logger
from src.ports.resources import ResourceBundle

logger = get_logger(__name__)


class StoreRecord(BaseModel):
    """Schema for one store in a JSON data source."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(..., alias="stores")
    description: str
    filename: str | None = None
    x: float | None = None
    y: float | None = None
    hours: dict[str, str] = Field(default_factory=dict)

    def to_item(self) -> Item:
        coordinates = None
        if self.x is not None and self.y is not None:
            coordinates = (self.x, self.y)
        return Item(
            name=self.name,
            description=self.description,
            filename=self.filename,
            coordinates=coordinates,
            hours=self.hours,
        )


_STORE_LIST_ADAPTER = TypeAdapter(list[StoreRecord])


def split_csv_line(line: str) -> list[str]:
    """Split one CSV line into fields.

    Every double quote toggles quoted mode and is dropped; only commas
    outside quotes separate fields. A quote left open runs to the end of
    the line.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
    fields.append("".join(current))
    return fields


def parse_csv(text: str) -> list[Item]:
    """Parse CSV text into items, dropping lines that do not form a record."""
    items: list[Item] = []
    dropped = 0
    for line_number, line in enumerate(text.lstrip("\ufeff").splitlines(), start=1):
        if not line.strip():
            continue
        fields = split_csv_line(line)
        if len(fields) < 2:
            dropped += 1
            logger.debug("csv_line_dropped", line=line_number, reason="too_few_fields")
            continue
        items.append(Item(name=fields[0].strip(), description=fields[1].strip()))

    if dropped:
        logger.info("csv_lines_dropped", dropped=dropped, parsed=len(items))
    return items


def parse_json(text: str) -> list[Item]:
    """Parse a JSON store array into items.

    Raises:
        DecodeFailureError: If the text is not valid JSON or any record does
            not match the store schema.
    """
    try:
        records = _STORE_LIST_ADAPTER.validate_json(text)
    except ValidationError as ex:
        raise DecodeFailureError(
            f"Malformed store list: {ex.error_count()} validation error(s)",
            original_error=ex,
        ) from ex
    return [record.to_item() for record in records]


def parse_items(text: str, source_format: SourceFormat) -> list[Item]:
    """Parse text in the given format."""
    if source_format is SourceFormat.CSV:
        return parse_csv(text)
    return parse_json(text)


def load_items(bundle: ResourceBundle, source: DataSource) -> list[Item]:
    """Load a data source from the bundle, degrading to an empty list.

    Missing resources and decode failures are logged with their category;
    the caller shows its loading/empty state for an empty result.
    """
    try:
        text = bundle.read_text(source.resource, source.extension)
        items = parse_items(text, source.format)
    except LoadError as ex:
        logger.warning(
            "data_source_load_failed",
            source=source.key,
            resource=f"{source.resource}.{source.extension}",
            category=ex.category.name,
            error=str(ex),
        )
        return []

    logger.info("data_source_loaded", source=source.key, count=len(items))
    return items
