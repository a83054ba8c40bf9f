"""Command-line entry point for clickup-report."""

import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import List, Optional

from rich.console import Console

from clickupreport.config import ConfigurationError, Settings, load_settings
from clickupreport.engine.due_dates import DUE_DATE_FORMATS, get_due_date_parser
from clickupreport.engine.report import build_report
from clickupreport.integrations.clickup import ClickUpAPIError, ClickUpClient, collect_tasks
from clickupreport.rendering import ReportRenderer

logger = logging.getLogger(__name__)

USAGE_HINT = """
Usage:
  clickup-report --api-key=YOUR_API_KEY --space-id=YOUR_SPACE_ID
  clickup-report -k YOUR_API_KEY -s YOUR_SPACE_ID

You can also set environment variables (or put them in a .env file):
  CLICKUP_API_KEY=YOUR_API_KEY
  CLICKUP_SPACE_ID=YOUR_SPACE_ID
"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="clickup-report",
        description="Report the tasks of a ClickUp space grouped by status and by list.",
    )
    parser.add_argument("-k", "--api-key", help="ClickUp API key (env: CLICKUP_API_KEY)")
    parser.add_argument("-s", "--space-id", help="ClickUp space ID (env: CLICKUP_SPACE_ID)")
    parser.add_argument(
        "--due-date-format", choices=DUE_DATE_FORMATS,
        help="Wire format of task due dates (env: CLICKUP_DUE_DATE_FORMAT, default: epoch_ms)",
    )
    parser.add_argument(
        "--no-weekly-summary", dest="weekly_summary", action="store_false", default=None,
        help="Skip the count of tasks completed this week",
    )
    parser.add_argument(
        "--timeout", type=float, metavar="SECONDS",
        help="Per-request timeout in seconds (env: CLICKUP_TIMEOUT, default: 10)",
    )
    parser.add_argument(
        "--log-level", metavar="LEVEL",
        help="Logging level (env: CLICKUP_LOG_LEVEL, default: WARNING)",
    )
    return parser.parse_args(argv)


def run(settings: Settings, console: Console, now: Optional[datetime] = None) -> int:
    """Fetch, classify and print one report.

    Returns:
        Process exit code
    """
    due_date_parser = get_due_date_parser(settings.due_date_format)
    client = ClickUpClient.from_settings(settings)

    console.print("Fetching Tasks:")
    try:
        collected = collect_tasks(client)
    except ClickUpAPIError as e:
        logger.error(f"Failed to enumerate lists in space {settings.space_id}: {str(e)}")
        console.print(f"Error getting lists: {e}", markup=False)
        return 1

    report = build_report(
        collected.tasks,
        now=now or datetime.now(timezone.utc),
        parser=due_date_parser,
        weekly_summary=settings.weekly_summary,
    )
    ReportRenderer(console=console, parser=due_date_parser).render(report, skipped_lists=collected.skipped_lists)
    return 0


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = parse_args(argv)
    console = console or Console()

    try:
        settings = load_settings(
            api_key=args.api_key,
            space_id=args.space_id,
            due_date_format=args.due_date_format,
            weekly_summary=args.weekly_summary,
            timeout_seconds=args.timeout,
            log_level=args.log_level,
        )
    except ConfigurationError as e:
        console.print(f"Configuration error: {e}", markup=False)
        console.print(USAGE_HINT, markup=False)
        return 1

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(settings, console)


if __name__ == "__main__":
    sys.exit(main())
