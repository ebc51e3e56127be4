# models and tiny stats helper to keep data shapes explicit and reusable across the app

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

@dataclass(frozen=True)
class ObservationRecord:
    # immutable value object for one daily observation, date is ISO YYYY-MM-DD, temps in °F
    date: str
    tmax: float
    tmin: float

    @property
    def year(self) -> int:
        return int(self.date[0:4])

    @property
    def month(self) -> int:
        return int(self.date[5:7])

@dataclass(frozen=True)
class StationMetadata:
    name: Optional[str] = None
    station_id: Optional[str] = None
    elevation: Optional[float] = None  # meters
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def coordinates(self) -> Optional[Tuple[float, float]]:
        # a map needs both halves of the pair
        if self.latitude is None or self.longitude is None:
            return None
        return (self.latitude, self.longitude)

@dataclass(frozen=True)
class ParsedTable:
    # everything the table pass produces before filtering
    records: List[ObservationRecord]
    metadata: StationMetadata
    columns: Dict[str, int]
    skipped_rows: int = 0
    total_lines: int = 0

@dataclass(frozen=True)
class MonthlySummary:
    year: int
    month: int
    avg_tmax: float
    avg_tmin: float
    days: int = 1

@dataclass(frozen=True)
class OverallAverages:
    # None means no contributing records, never zero
    july_tmax: Optional[float] = None
    july_tmin: Optional[float] = None
    aug_tmax: Optional[float] = None
    aug_tmin: Optional[float] = None

@dataclass(frozen=True)
class StationReport:
    # output value object used by consumers, the cli and the dag
    title: str
    elevation: Optional[float]
    coordinates: Optional[Tuple[float, float]]
    monthly: List[MonthlySummary]
    overall: OverallAverages
    data_points: int
    observations: List[ObservationRecord] = field(default_factory=list)
    skipped_rows: int = 0

@dataclass(frozen=True)
class FileOutcome:
    # one per input file in a batch, exactly one of report/error is set
    source: str
    report: Optional[StationReport] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.report is not None

def mean(values: List[float]) -> Optional[float]:
    # simple average that returns None on empty input so "no data" never reads as zero
    return sum(values) / len(values) if values else None
