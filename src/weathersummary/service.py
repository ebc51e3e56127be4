# orchestration and business rules.
# pure functions (filter, group and average) plus summarize_csv, which runs the whole pipeline for one file
# summarize_all uses ThreadPoolExecutor to summarize several files independently, results are never merged

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union
from .config import Settings, get_settings
from .errors import EmptyResultError, WeatherCSVError
from .metadata import resolve_title
from .models import (
    FileOutcome,
    MonthlySummary,
    ObservationRecord,
    OverallAverages,
    StationReport,
    mean,
)
from .parsing import parse_table

logger = logging.getLogger(__name__)

# july/august from 2014 onwards
MIN_YEAR = 2014
TARGET_MONTHS = (7, 8)

def in_target_window(record: ObservationRecord) -> bool:
    return record.year >= MIN_YEAR and record.month in TARGET_MONTHS

def filter_records(records: List[ObservationRecord]) -> List[ObservationRecord]:
    filtered = [r for r in records if in_target_window(r)]
    logger.info("Found %d rows matching July/August %d+.", len(filtered), MIN_YEAR)
    if not filtered:
        raise EmptyResultError(
            f"No data found matching the criteria (July/August from {MIN_YEAR} onwards) in the file."
        )
    return filtered

def monthly_summaries(records: List[ObservationRecord]) -> List[MonthlySummary]:
    # a group only exists once a record lands in it, so no group is ever empty
    groups: Dict[Tuple[int, int], List[ObservationRecord]] = {}
    for r in records:
        groups.setdefault((r.year, r.month), []).append(r)

    summaries = [
        MonthlySummary(
            year=year,
            month=month,
            avg_tmax=mean([r.tmax for r in rows]),
            avg_tmin=mean([r.tmin for r in rows]),
            days=len(rows),
        )
        for (year, month), rows in groups.items()
    ]
    return sorted(summaries, key=lambda s: (s.year, s.month))

def overall_averages(records: List[ObservationRecord]) -> OverallAverages:
    july = [r for r in records if r.date[5:7] == "07"]
    august = [r for r in records if r.date[5:7] == "08"]
    return OverallAverages(
        july_tmax=mean([r.tmax for r in july]),
        july_tmin=mean([r.tmin for r in july]),
        aug_tmax=mean([r.tmax for r in august]),
        aug_tmin=mean([r.tmin for r in august]),
    )

# single file path: parse -> title -> filter -> aggregate
def summarize_csv(text: str, filename: Optional[str] = None, settings: Optional[Settings] = None) -> StationReport:
    table = parse_table(text, filename, settings=settings)
    title = resolve_title(table.metadata, table.columns, filename)
    filtered = filter_records(table.records)

    report = StationReport(
        title=title,
        elevation=table.metadata.elevation,
        coordinates=table.metadata.coordinates,
        monthly=monthly_summaries(filtered),
        overall=overall_averages(filtered),
        data_points=len(filtered),
        # chart series, ISO dates sort chronologically as strings
        observations=sorted(filtered, key=lambda r: r.date),
        skipped_rows=table.skipped_rows,
    )
    logger.info("Summary ready for %s (%d daily data points).", title, report.data_points)
    return report

def summarize_file(path: Union[str, Path], settings: Optional[Settings] = None) -> StationReport:
    path = Path(path)
    try:
        # utf-8-sig drops the BOM some spreadsheet exports put in front of the header
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise WeatherCSVError(f"Could not read {str(path)!r}: {exc}") from exc
    return summarize_csv(text, filename=path.name, settings=settings)

def _summarize_outcome(path: Union[str, Path], settings: Settings) -> FileOutcome:
    # keeping this small makes it ideal as the function we submit to the thread pool
    try:
        return FileOutcome(source=str(path), report=summarize_file(path, settings=settings))
    except WeatherCSVError as exc:
        logger.error("Error processing %s: %s", path, exc)
        return FileOutcome(source=str(path), error=str(exc))

def summarize_all(
    paths: Sequence[Union[str, Path]],
    max_workers: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> List[FileOutcome]:
    settings = settings or get_settings()
    workers = max_workers or settings.max_workers
    results: Dict[int, FileOutcome] = {}

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {
            pool.submit(_summarize_outcome, path, settings): idx
            for idx, path in enumerate(paths)
        }
        for fut in as_completed(futures):
            # anything other than WeatherCSVError is a bug and propagates
            results[futures[fut]] = fut.result()

    # input order keeps cli output deterministic
    return [results[idx] for idx in range(len(paths))]
