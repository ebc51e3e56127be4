# connects input (csv paths) to the service and prints one report per file in the order given.

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional
from .config import get_settings
from .report import format_report
from .service import summarize_all

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weathersummary",
        description="Summarize July/August temperatures from daily station CSV exports.",
    )
    parser.add_argument("files", nargs="+", help="CSV file(s) with DATE, TMAX and TMIN columns")
    parser.add_argument("--workers", type=int, default=None, help="files summarized in parallel")
    parser.add_argument("--log-level", default=None, help="overrides WEATHERSUMMARY_LOG_LEVEL")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    # uses threads under the hood (ThreadPoolExecutor in service.summarize_all)
    outcomes = summarize_all(args.files, max_workers=args.workers, settings=settings)
    failed = False
    for i, outcome in enumerate(outcomes):
        if i:
            print()
        if outcome.ok:
            print(format_report(outcome.report))
        else:
            failed = True
            print(f"Error processing {outcome.source}: {outcome.error}")
    return 1 if failed else 0

if __name__ == "__main__":
    sys.exit(main())
