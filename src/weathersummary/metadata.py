"""Station metadata scan and title resolution.

Metadata is a first-wins fold over the data rows: each field has its own
accumulator that is set from the first row offering a usable value and is
ignored afterwards. The title is resolved once, after the scan.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Mapping, Optional
from .csvline import parse_number, strip_quotes
from .models import StationMetadata

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Weather Station Data"

_TEXT_FIELDS = (("NAME", "name"), ("STATION", "station_id"))
_NUMBER_FIELDS = (("ELEVATION", "elevation"), ("LATITUDE", "latitude"), ("LONGITUDE", "longitude"))


class MetadataAccumulator:
    """Collects station metadata while the table parser walks its rows."""

    def __init__(self) -> None:
        self._values: Dict[str, Optional[object]] = {
            attr: None for _, attr in _TEXT_FIELDS + _NUMBER_FIELDS
        }

    @property
    def complete(self) -> bool:
        return all(v is not None for v in self._values.values())

    def update(self, values: List[str], columns: Mapping[str, int], row_number: int = 0) -> None:
        # guard-then-set per field; rules are independent of each other
        for column, attr in _TEXT_FIELDS:
            if self._values[attr] is not None or column not in columns:
                continue
            text = strip_quotes(values[columns[column]]).strip()
            if text:
                self._values[attr] = text
                logger.debug("%s found on row %d: %s", column, row_number, text)

        for column, attr in _NUMBER_FIELDS:
            if self._values[attr] is not None or column not in columns:
                continue
            raw = values[columns[column]]
            if not raw:
                continue
            number = parse_number(raw)
            if number is None:
                logger.debug("could not parse %s on row %d: %r", column, row_number, raw)
                continue
            self._values[attr] = number
            logger.debug("%s found on row %d: %s", column, row_number, number)

    def freeze(self) -> StationMetadata:
        return StationMetadata(**self._values)


def strip_csv_suffix(filename: str) -> str:
    if filename.lower().endswith(".csv"):
        return filename[: -len(".csv")]
    return filename


def resolve_title(
    metadata: StationMetadata,
    columns: Mapping[str, int],
    filename: Optional[str] = None,
) -> str:
    name, station_id = metadata.name, metadata.station_id
    if name and station_id:
        return f"{name} ({station_id})"
    if name:
        logger.warning("Station ID not found, using name only: %s", name)
        return name
    if station_id:
        logger.warning("Station name not found, using ID only: %s", station_id)
        return f"Station ({station_id})"
    # the filename only stands in when the file never had name/id columns at all
    if "NAME" not in columns and "STATION" not in columns and filename:
        title = strip_csv_suffix(filename)
        logger.warning("Neither NAME nor STATION column found, using filename %r as title", title)
        return title
    logger.warning("Could not determine station name or ID, using default title")
    return DEFAULT_TITLE
