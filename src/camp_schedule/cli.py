"""Load the camp schedule from the published sheet as JSON or table.

Run with: camp-schedule
Table:    camp-schedule --table
Local:    camp-schedule --file schedule.csv --inspect
Output:   camp-schedule --output data/schedule.json

Exit codes:
  0 = success (JSON or table on stdout, or file written for --output)
  1 = error (message on stderr)
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from camp_schedule.config import get_config
from camp_schedule.errors import ScheduleError
from camp_schedule.fetch import SheetFetcher
from camp_schedule.loader import ScheduleLoader
from camp_schedule.logging import setup_logging
from camp_schedule.models import LoadResult
from camp_schedule.parser import parse_schedule_with_stats
from camp_schedule.render import format_stats, format_table, to_json


def _log(msg: str) -> None:
    """Write diagnostic messages to stderr so stdout stays clean for JSON."""
    print(msg, file=sys.stderr)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments using argparse."""
    parser = argparse.ArgumentParser(
        prog="camp-schedule",
        description="Load the camp schedule from a published sheet as JSON or table.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--url",
        type=str,
        default=None,
        help="Published CSV export URL (default: SCHEDULE_CSV_URL or the built-in sheet).",
    )
    source_group.add_argument(
        "--file",
        type=str,
        default=None,
        help="Parse a local CSV file instead of fetching (no sample fallback).",
    )

    parser.add_argument(
        "--table",
        action="store_true",
        help="Output a human-readable table instead of JSON.",
    )
    parser.add_argument(
        "--inspect",
        action="store_true",
        help="Print a summary of the parse to stderr.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write JSON to this file instead of stdout.",
    )
    parser.add_argument(
        "--no-fallback",
        action="store_true",
        help="Fail instead of substituting the sample schedule.",
    )
    return parser.parse_args(argv)


def _load(args: argparse.Namespace) -> LoadResult:
    config = get_config()

    if args.file:
        text = Path(args.file).read_text(encoding="utf-8")
        schedule, stats = parse_schedule_with_stats(text)
        return LoadResult(schedule=schedule, source="file", stats=stats)

    fetcher = SheetFetcher(
        args.url or config.schedule_csv_url,
        timeout=config.request_timeout,
        attempts=config.fetch_attempts,
        retry_wait=config.fetch_retry_wait,
    )
    loader = ScheduleLoader(
        fetcher,
        fallback_delay=config.fallback_delay,
        use_fallback=not args.no_fallback,
    )
    return loader.load()


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _parse_args(argv)
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)

    try:
        result = _load(args)
    except (ScheduleError, OSError, UnicodeDecodeError) as e:
        _log(f"ERROR: {e}")
        return 1

    if result.source == "sample":
        _log(f"  Sample schedule loaded (sheet data unavailable: {result.error})")
    if args.inspect and result.stats is not None:
        _log(format_stats(result.stats))

    if args.output:
        output_file = Path(args.output)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(to_json(result.schedule), encoding="utf-8")
        _log(f"  {len(result.schedule)} days -> {args.output}")
    elif args.table:
        print(format_table(result.schedule))
    else:
        print(to_json(result.schedule))
    return 0


if __name__ == "__main__":
    sys.exit(main())
