"""Command-line interface for jair-harvester."""

import argparse
import logging
import sys
from pathlib import Path

from jair_harvester import __version__
from jair_harvester.clients import (
    SITE_ORIGIN,
    DirectLinkResolver,
    IssueClient,
    PdfLinkResolver,
    ViewerPageResolver,
)
from jair_harvester.downloaders import PDFDownloader
from jair_harvester.harvester import IssueHarvester

DEFAULT_OUTPUT_DIR = Path(".")
DEFAULT_START_ISSUE = 1085
DEFAULT_ISSUE_COUNT = 75
DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRIES = 0


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s: %(message)s",
    )


def build_config(args: argparse.Namespace) -> dict:
    """Build the shared client configuration from parsed arguments."""
    return {
        "base_url": SITE_ORIGIN,
        "timeout": args.timeout,
        "retry_attempts": args.retries + 1,
        "headers": {
            "User-Agent": f"jair-harvester/{__version__}",
        },
    }


def harvest(args: argparse.Namespace) -> int:
    """Execute a harvest run.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    output_dir = args.output
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to create output directory {output_dir}: {e}")
        return 1

    config = build_config(args)
    resolver: PdfLinkResolver = (
        DirectLinkResolver() if args.direct_links else ViewerPageResolver(config)
    )
    end_issue = args.start_issue + args.end_issue - 1
    logger.info(
        f"Harvesting issues {args.start_issue} to {end_issue} into {output_dir}"
    )

    try:
        with IssueClient(config) as issue_client, resolver, PDFDownloader(
            config
        ) as downloader:
            harvester = IssueHarvester(
                output_dir,
                issue_client,
                resolver,
                downloader,
                write_manifest=not args.no_manifest,
            )
            manifest = harvester.harvest(args.start_issue, args.end_issue)

        logger.info(f"Issues processed: {len(manifest.issues)}")
        logger.info(f"  Downloaded: {manifest.downloaded}")
        logger.info(f"  Failed: {manifest.failed}")
        logger.info(f"  Output: {output_dir}")

        return 0

    except Exception as e:
        logger.error(f"Harvest failed: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="jair-harvester",
        description="Download article PDFs from JAIR issue listing pages",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-output", "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help="Directory to save downloaded PDFs (default: current directory)",
    )
    parser.add_argument(
        "-endIssue", "--end-issue",
        dest="end_issue",
        type=int,
        default=DEFAULT_ISSUE_COUNT,
        help=(
            "Number of issues to harvest, counting from the start issue "
            f"(default: {DEFAULT_ISSUE_COUNT})"
        ),
    )
    parser.add_argument(
        "--start-issue",
        type=int,
        default=DEFAULT_START_ISSUE,
        help=f"First issue ID to harvest (default: {DEFAULT_START_ISSUE})",
    )
    parser.add_argument(
        "--direct-links",
        action="store_true",
        help="Treat listing PDF links as direct file URLs instead of viewer pages",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"HTTP request timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=DEFAULT_RETRIES,
        help=(
            "Times to retry a request after a connection failure or timeout "
            f"(default: {DEFAULT_RETRIES})"
        ),
    )
    parser.add_argument(
        "--no-manifest",
        action="store_true",
        help="Do not write harvest-manifest.json",
    )

    args = parser.parse_args(argv)

    return harvest(args)


if __name__ == "__main__":
    sys.exit(main())
