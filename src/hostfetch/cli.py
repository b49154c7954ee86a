"""Command-line interface for hostfetch."""

import argparse
import logging
import sys

from . import __version__
from .collectors import collect_report
from .render import write_report

logger = logging.getLogger("hostfetch")


def setup_logging(debug: bool = False) -> None:
    """Send log records to stderr so stdout carries only the report."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hostfetch",
        description="Print a one-shot system summary next to a small logo",
    )
    parser.add_argument("--version", action="version", version=f"hostfetch {__version__}")
    parser.add_argument("--debug", action="store_true", help="Log fallback values to stderr")
    args, extras = parser.parse_known_args(argv)
    args.extras = extras
    return args


def main(argv=None) -> int:
    """Main CLI entry point. Always returns 0."""
    args = parse_arguments(argv)
    setup_logging(args.debug)
    if args.extras:
        logger.debug(f"Ignoring unexpected arguments: {args.extras}")

    logger.debug("Collecting system snapshot...")
    report = collect_report()

    write_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
