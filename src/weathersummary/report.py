# plain-text presentation of a StationReport
# the browser version drew a chart, a table and an osm iframe; here the same facts become lines of text

from __future__ import annotations
from typing import List, Optional
from .models import StationReport

METERS_TO_FEET = 3.28084
MONTH_NAMES = ["", "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
OSM_EMBED_URL = "https://www.openstreetmap.org/export/embed.html"

def elevation_feet(meters: float) -> float:
    return meters * METERS_TO_FEET

def map_url(latitude: float, longitude: float, delta: float = 0.02) -> str:
    # bounding box around the station, smaller delta = more zoomed in
    bbox = f"{longitude - delta},{latitude - delta},{longitude + delta},{latitude + delta}"
    return f"{OSM_EMBED_URL}?bbox={bbox}&layer=mapnik&marker={latitude},{longitude}"

def _overall_row(label: str, tmax: Optional[float], tmin: Optional[float]) -> Optional[str]:
    if tmax is None or tmin is None:
        return None
    return f"{label:<16}{tmax:>14.1f}{tmin:>14.1f}"

def format_report(report: StationReport) -> str:
    lines: List[str] = [report.title, "=" * len(report.title)]

    if report.elevation is not None:
        lines.append(f"Elevation: {elevation_feet(report.elevation):.0f} ft ({report.elevation:.1f} m)")
    else:
        lines.append("Elevation: not found in CSV")

    if report.coordinates is not None:
        lines.append(f"Map: {map_url(*report.coordinates)}")
    else:
        lines.append("Map coordinates not found in CSV.")

    lines.append("")
    lines.append("July/August Average Temperatures")
    lines.append(f"{'Year':<6}{'Month':<10}{'Avg High (°F)':>14}{'Avg Low (°F)':>14}")
    for s in report.monthly:
        lines.append(f"{s.year:<6}{MONTH_NAMES[s.month]:<10}{s.avg_tmax:>14.1f}{s.avg_tmin:>14.1f}")

    footer = [
        _overall_row("Overall Avg July", report.overall.july_tmax, report.overall.july_tmin),
        _overall_row("Overall Avg Aug", report.overall.aug_tmax, report.overall.aug_tmin),
    ]
    lines.extend(row for row in footer if row is not None)

    lines.append("")
    lines.append(f"Summary loaded for {report.title} ({report.data_points} daily data points).")
    return "\n".join(lines)
