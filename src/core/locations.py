"""Bundled data sources and the location maps shown next to them."""

from dataclasses import dataclass
from enum import Enum


class SourceFormat(Enum):
    """File format of a bundled data source."""

    CSV = "csv"
    JSON = "json"


@dataclass(frozen=True)
class DataSource:
    """A bundled store list the user can switch to.

    Attributes:
        key: Stable identifier used by settings and renderers.
        title: Location name shown to the user.
        resource: Bundle resource name without extension.
        format: Format of the resource, which is also its file extension.
    """

    key: str
    title: str
    resource: str
    format: SourceFormat

    @property
    def extension(self) -> str:
        return self.format.value


@dataclass(frozen=True)
class LocationMap:
    """Map image for a location."""

    title: str
    image_name: str


BACK_DOOR_TITLE = "後門"
SUPPER_STREET_TITLE = "宵夜街"

BACK_DOOR_MAP = LocationMap(title="後門地圖", image_name="back_door_map")
SUPPER_STREET_MAP = LocationMap(title="宵夜街地圖", image_name="supper_street_map")

DEFAULT_SOURCES: tuple[DataSource, ...] = (
    DataSource("information", "WhatoEat", "information", SourceFormat.CSV),
    DataSource("back_door", BACK_DOOR_TITLE, "back_door", SourceFormat.JSON),
    DataSource("supper_street", SUPPER_STREET_TITLE, "supper_street", SourceFormat.JSON),
)


def map_for(location_title: str) -> LocationMap:
    """Return the map for a location title.

    Only the back door has its own map; every other location shows the
    supper street map.
    """
    if location_title == BACK_DOOR_TITLE:
        return BACK_DOOR_MAP
    return SUPPER_STREET_MAP


class SourceRegistry:
    """Lookup of data sources by key, in registration order."""

    def __init__(self, sources: tuple[DataSource, ...] = DEFAULT_SOURCES) -> None:
        self._sources: dict[str, DataSource] = {}
        for source in sources:
            self.register(source)

    def register(self, source: DataSource) -> None:
        if source.key in self._sources:
            raise ValueError(f"Duplicate data source key: {source.key!r}")
        self._sources[source.key] = source

    def get(self, key: str) -> DataSource:
        """Return the source for key.

        Raises:
            KeyError: If no source is registered under key.
        """
        try:
            return self._sources[key]
        except KeyError:
            raise KeyError(
                f"Unknown data source: {key!r}. "
                f"Known sources: {', '.join(self._sources)}"
            ) from None

    def keys(self) -> list[str]:
        return list(self._sources)

    def __contains__(self, key: object) -> bool:
        return key in self._sources

    def __len__(self) -> int:
        return len(self._sources)
