# table level parsing: csv text -> header index, validated observation records and station metadata
# row problems are skipped and counted, only structural problems raise

from __future__ import annotations
import logging
import re
from typing import Dict, List, Optional
from .config import Settings, get_settings
from .csvline import parse_line, parse_number, strip_quotes
from .errors import EmptyResultError, SchemaError, StructuralError
from .metadata import MetadataAccumulator
from .models import ObservationRecord, ParsedTable

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("DATE", "TMAX", "TMIN")
OPTIONAL_COLUMNS = ("ELEVATION", "LATITUDE", "LONGITUDE", "NAME", "STATION")

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

def resolve_columns(headers: List[str]) -> Dict[str, int]:
    # exact, case sensitive match; first occurrence of a name wins
    columns: Dict[str, int] = {}
    for name in REQUIRED_COLUMNS + OPTIONAL_COLUMNS:
        if name in headers:
            columns[name] = headers.index(name)

    missing = [name for name in REQUIRED_COLUMNS if name not in columns]
    if missing:
        raise SchemaError(missing)
    for name in OPTIONAL_COLUMNS:
        if name not in columns:
            logger.warning("%s column not found.", name)
    return columns

def build_record(values: List[str], columns: Dict[str, int]) -> Optional[ObservationRecord]:
    date = values[columns["DATE"]]
    if not _DATE_RE.fullmatch(date):
        return None
    tmax = parse_number(values[columns["TMAX"]])
    tmin = parse_number(values[columns["TMIN"]])
    if tmax is None or tmin is None:
        return None
    return ObservationRecord(date=date, tmax=tmax, tmin=tmin)

class _SkipLog:
    # throttles per-row warnings; the count itself is never throttled
    def __init__(self, limit: int):
        self.limit = limit
        self.count = 0

    def skip(self, message: str, *args) -> None:
        if self.count < self.limit:
            logger.warning(message, *args)
        elif self.count == self.limit:
            logger.warning("(further skipped row warnings suppressed)")
        self.count += 1

def parse_table(text: str, filename: Optional[str] = None, settings: Optional[Settings] = None) -> ParsedTable:
    settings = settings or get_settings()
    lines = text.strip().split("\n")
    logger.info("Read %d lines from %s (including header).", len(lines), filename or "input")
    if len(lines) < 2:
        raise StructuralError("CSV file appears to have no data rows.")

    headers = [strip_quotes(h) for h in parse_line(lines[0].strip())]
    logger.debug("Detected headers: %s", headers)
    columns = resolve_columns(headers)

    accumulator = MetadataAccumulator()
    records: List[ObservationRecord] = []
    skips = _SkipLog(settings.skip_warning_limit)

    for i, raw in enumerate(lines[1:], start=2):
        line = raw.strip()
        if not line:
            continue
        values = parse_line(line)
        if len(values) < len(headers):
            skips.skip("Skipping row %d due to incorrect column count (%d vs %d): %s",
                       i, len(values), len(headers), line)
            continue

        # metadata comes from every length-valid row, even ones whose readings are bad
        if not accumulator.complete:
            accumulator.update(values, columns, row_number=i)

        record = build_record(values, columns)
        if record is None:
            skips.skip("Skipping invalid row %d (check DATE format YYYY-MM-DD or TMAX/TMIN numbers): %s",
                       i, line)
            continue
        records.append(record)

    logger.info("Parsed %d valid data rows, skipped %d rows.", len(records), skips.count)
    if not records:
        raise EmptyResultError("Parsing finished, but no valid data rows were found at all.")

    return ParsedTable(
        records=records,
        metadata=accumulator.freeze(),
        columns=columns,
        skipped_rows=skips.count,
        total_lines=len(lines),
    )
