# dags/station_summary_dag.py
from __future__ import annotations
from datetime import datetime, timedelta
from pathlib import Path
from typing import List
from airflow.decorators import dag, task
from airflow.exceptions import AirflowFailException
from weathersummary.config import get_settings
from weathersummary.errors import WeatherCSVError
from weathersummary.report import format_report
from weathersummary.service import summarize_file

@dag(
    dag_id="station_summary",
    start_date=datetime(2025, 1, 1),
    schedule="0 6 * * *",
    catchup=False,
    default_args={"owner": "alex-eng", "retries": 1, "retry_delay": timedelta(minutes=2)},
    tags=["weather", "station-summary"],
)
def station_summary():
    @task
    def list_files() -> List[str]:
        data_dir = Path(get_settings().data_dir)
        files = sorted(str(p) for p in data_dir.glob("*.csv"))
        if not files:
            raise AirflowFailException(f"no CSV files found in {data_dir}")
        return files

    @task(execution_timeout=timedelta(seconds=60))
    def summarize(path: str) -> dict:
        try:
            report = summarize_file(path)
        except WeatherCSVError as e:
            # bad input will not fix itself on retry
            raise AirflowFailException(f"summarize({path}) failed: {e}")
        return {"path": path, "text": format_report(report), "n_points": report.data_points}

    results = summarize.expand(path=list_files())

    @task
    def publish(rows: List[dict]) -> None:
        for r in sorted(rows, key=lambda r: r["path"]):
            print(r["text"])
            print(f"(source: {r['path']}, n={r['n_points']})")

    publish(results)

dag = station_summary()
