# table parser tests; every case builds its csv inline except the fixture-backed one

import logging
from pathlib import Path
import pytest
from weathersummary.config import Settings
from weathersummary.errors import EmptyResultError, SchemaError, StructuralError, WeatherCSVError
from weathersummary.models import ObservationRecord
from weathersummary.parsing import parse_table, resolve_columns

DATA = Path(__file__).parent / "data"
SETTINGS = Settings()


def test_header_only_is_structural_error():
    with pytest.raises(StructuralError):
        parse_table("DATE,TMAX,TMIN\n", settings=SETTINGS)

def test_empty_input_is_structural_error():
    with pytest.raises(StructuralError):
        parse_table("", settings=SETTINGS)

def test_missing_tmin_names_the_column():
    with pytest.raises(SchemaError) as exc_info:
        parse_table("DATE,TMAX\n2014-07-10,80\n", settings=SETTINGS)
    assert exc_info.value.missing == ("TMIN",)
    assert "TMIN" in str(exc_info.value)
    # callers only need the base type
    assert isinstance(exc_info.value, WeatherCSVError)

def test_header_match_is_case_sensitive():
    with pytest.raises(SchemaError) as exc_info:
        resolve_columns(["date", "TMAX", "tmin"])
    assert exc_info.value.missing == ("DATE", "TMIN")

def test_quoted_header_tokens_resolve():
    columns = resolve_columns(["STATION", "DATE", "TMAX", "TMIN"])
    assert columns == {"DATE": 1, "TMAX": 2, "TMIN": 3, "STATION": 0}

def test_fixture_rows_are_validated_and_counted():
    text = (DATA / "springfield.csv").read_text()
    table = parse_table(text, "springfield.csv", settings=SETTINGS)

    assert [r.date for r in table.records] == [
        "2013-07-15", "2014-07-10", "2014-07-11", "2014-08-20", "2015-06-01",
    ]
    # wrong date format, empty temperatures and a short row
    assert table.skipped_rows == 3
    assert table.records[1] == ObservationRecord(date="2014-07-10", tmax=80.0, tmin=60.0)

def test_wrong_date_format_is_skipped_not_fatal():
    text = "DATE,TMAX,TMIN\n2014/07/10,80,60\n2014-07-11,81,61\n"
    table = parse_table(text, settings=SETTINGS)
    assert [r.date for r in table.records] == ["2014-07-11"]
    assert table.skipped_rows == 1

def test_extra_fields_are_allowed():
    table = parse_table("DATE,TMAX,TMIN\n2014-07-10,80,60,extra\n", settings=SETTINGS)
    assert len(table.records) == 1

def test_blank_lines_are_ignored_and_not_counted():
    table = parse_table("DATE,TMAX,TMIN\r\n\r\n2014-07-10,80,60\r\n   \n", settings=SETTINGS)
    assert len(table.records) == 1
    assert table.skipped_rows == 0

def test_no_valid_rows_is_empty_result_error():
    with pytest.raises(EmptyResultError):
        parse_table("DATE,TMAX,TMIN\nbad,80,60\n2014-07-10,x,60\n", settings=SETTINGS)

def test_metadata_taken_from_rows_with_bad_readings():
    text = (
        "DATE,TMAX,TMIN,ELEVATION\n"
        "2014-07-10,,,1609.3\n"
        "2014-07-11,85,60,1700\n"
    )
    table = parse_table(text, settings=SETTINGS)
    assert table.metadata.elevation == 1609.3

def test_skip_warnings_are_throttled(caplog):
    rows = "\n".join("bad,1,2" for _ in range(4))
    text = f"DATE,TMAX,TMIN\n{rows}\n2014-07-10,80,60\n"
    with caplog.at_level(logging.WARNING, logger="weathersummary.parsing"):
        table = parse_table(text, settings=Settings(skip_warning_limit=2))

    messages = [r.getMessage() for r in caplog.records if r.name == "weathersummary.parsing"]
    skipped = [m for m in messages if m.startswith("Skipping")]
    assert len(skipped) == 2
    assert sum("suppressed" in m for m in messages) == 1
    # throttling never changes the count
    assert table.skipped_rows == 4
