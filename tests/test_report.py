# text presentation and cli; reports are built by hand so these tests do not depend on parsing

from pathlib import Path
from weathersummary import cli
from weathersummary.models import MonthlySummary, OverallAverages, StationReport
from weathersummary.report import elevation_feet, format_report, map_url

DATA = Path(__file__).parent / "data"


def _report(**overrides):
    fields = dict(
        title="Springfield (X1)",
        elevation=100.0,
        coordinates=(40.0, -105.0),
        monthly=[MonthlySummary(year=2014, month=7, avg_tmax=85.0, avg_tmin=65.0, days=2)],
        overall=OverallAverages(july_tmax=85.0, july_tmin=65.0),
        data_points=2,
    )
    fields.update(overrides)
    return StationReport(**fields)

def test_elevation_feet():
    assert round(elevation_feet(100.0), 3) == 328.084

def test_map_url_brackets_the_station():
    url = map_url(40.0, -105.0, delta=0.5)
    assert url.startswith("https://www.openstreetmap.org/export/embed.html?bbox=")
    assert "bbox=-105.5,39.5,-104.5,40.5" in url
    assert url.endswith("&layer=mapnik&marker=40.0,-105.0")

def test_format_report_lists_months_and_known_overall_rows_only():
    text = format_report(_report())
    assert "Elevation: 328 ft (100.0 m)" in text
    assert "Jul" in text and "85.0" in text
    assert "Overall Avg July" in text
    # no august data, so no august footer
    assert "Overall Avg Aug" not in text
    assert text.endswith("(2 daily data points).")

def test_format_report_without_location():
    text = format_report(_report(elevation=None, coordinates=None))
    assert "Elevation: not found in CSV" in text
    assert "Map coordinates not found in CSV." in text

def test_cli_prints_reports_and_errors(tmp_path, capsys):
    bad = tmp_path / "bad.csv"
    bad.write_text("DATE,TMAX\n2014-07-10,80\n")

    code = cli.main([str(DATA / "denver.csv"), str(bad), "--workers", "1"])

    out = capsys.readouterr().out
    assert code == 1
    assert out.startswith("denver\n")
    assert f"Error processing {bad}:" in out

def test_cli_success_exit_code(capsys):
    assert cli.main([str(DATA / "springfield.csv")]) == 0
    assert "SPRINGFIELD, IL US (USC00000001)" in capsys.readouterr().out
