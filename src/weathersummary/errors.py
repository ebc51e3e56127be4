# error types surfaced by the pipeline
# callers only need to catch WeatherCSVError, the message is meant for the user as is

from __future__ import annotations
from typing import Iterable

class WeatherCSVError(ValueError):
    # single base type used to propagate clear messages from the pipeline
    pass

class StructuralError(WeatherCSVError):
    # input has a header but no data lines
    pass

class SchemaError(WeatherCSVError):
    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(
            f"Could not find required column(s) {', '.join(self.missing)} in header."
        )

class EmptyResultError(WeatherCSVError):
    # nothing left to aggregate, either after row validation or after the date filter
    pass
