#!/usr/bin/env python3
"""
Finnish Company Search - Command Line Entry Point

Usage:
    python main.py --location Helsinki                # First page of Helsinki companies
    python main.py --business-id 0112038-9            # Look up a single business ID
    python main.py --start 2024-01-01 --end 2024-01-31 --page 2
    python main.py --location Oulu --json             # Print the page as JSON
"""

import argparse
import logging
import sys
from datetime import date, datetime
from typing import List, Optional

from dotenv import load_dotenv

from config import Settings
from core import (
    CriteriaValidationError,
    PRHAPIError,
    PRHClient,
    ResultPage,
    build_criteria,
)

EXIT_OK = 0
EXIT_API_ERROR = 1
EXIT_INVALID_CRITERIA = 2


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def _iso_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Search the Finnish PRH company registry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --location Helsinki                 # Companies in Helsinki
  python main.py --business-id 0112038-9             # Single business ID
  python main.py --start 2024-01-01 --end 2024-01-31 # Registered in January 2024
  python main.py --location Tampere --page 1 --json  # Second page as JSON
        """
    )

    parser.add_argument(
        "--business-id", "-b",
        help="Finnish business ID (Y-tunnus), e.g. 1234567-8"
    )
    parser.add_argument(
        "--location", "-l",
        help="Town name, e.g. Helsinki"
    )
    parser.add_argument(
        "--start",
        type=_iso_date,
        help="Earliest registration date (YYYY-MM-DD)"
    )
    parser.add_argument(
        "--end",
        type=_iso_date,
        help="Latest registration date (YYYY-MM-DD)"
    )
    parser.add_argument(
        "--page", "-p",
        type=int,
        default=0,
        help="Zero-based result page (default: 0)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result page as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser.parse_args(argv)


def format_table(page: ResultPage) -> str:
    """Render a result page as a plain-text table."""
    if not page.results:
        return "No companies found. Try adjusting your search criteria."

    lines = [
        f"{'Business ID':<12} {'Name':<40} {'Registered':<11} {'Ended':<11} Location",
        "-" * 96,
    ]
    for company in page.results:
        lines.append(
            f"{company.business_id:<12} {company.name[:40]:<40} "
            f"{company.registration_date:<11} {company.end_date or 'N/A':<11} "
            f"{company.location or 'N/A'}"
        )
    lines.append("-" * 96)
    lines.append(
        f"Page {page.current_page + 1} of {max(page.total_pages, 1)} "
        f"({page.total_results:,} companies)"
    )
    return "\n".join(lines)


def main(argv=None) -> int:
    """Main entry point."""
    load_dotenv()
    args = parse_args(argv)
    settings = Settings.from_env()
    setup_logging(args.verbose, settings.log_file)

    logger = logging.getLogger(__name__)

    try:
        criteria = build_criteria(
            business_id=args.business_id,
            location=args.location,
            registration_date_start=args.start,
            registration_date_end=args.end,
        ).for_page(args.page)
    except CriteriaValidationError as e:
        for message in e.errors.values():
            print(f"error: {message}", file=sys.stderr)
        return EXIT_INVALID_CRITERIA

    logger.info("Searching PRH registry: %s", criteria)

    with PRHClient(settings) as client:
        try:
            page = client.request_companies(criteria)
        except PRHAPIError as e:
            logger.error(f"Search failed: {e}")
            print("An error occurred while fetching data. Please try again.", file=sys.stderr)
            return EXIT_API_ERROR

    if args.json:
        print(page.to_json())
    else:
        print(format_table(page))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
