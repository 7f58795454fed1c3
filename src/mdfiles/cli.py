"""Command-line interface for mdfiles."""

import argparse
import logging
import sys

from mdfiles import __version__
from mdfiles.date_matching import parse_date, today
from mdfiles.models import ConfigError, SearchConfig
from mdfiles.output_generators import run


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mdfiles CLI."""
    parser = argparse.ArgumentParser(
        prog="mdfiles",
        description="List files modified on a given date as markdown links.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-d",
        "--date",
        default=argparse.SUPPRESS,
        metavar="DATE",
        help="Date in YYYY-MM-DD format (today if omitted).",
    )
    parser.add_argument(
        "-s",
        "--suffix",
        default=".go",
        help="Only list files whose name ends with this suffix.",
    )
    parser.add_argument(
        "-r",
        "--root",
        default=".",
        help="Directory to search.",
    )
    parser.add_argument(
        "-L",
        "--follow-links",
        action="store_true",
        help="Descend into symlinked directories, visiting each target once.",
    )
    parser.add_argument(
        "--gitignore",
        action="store_true",
        help="Skip paths matched by .gitignore and .git/info/exclude in the root.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress counter on stderr.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped entries to stderr.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def build_config(args: argparse.Namespace) -> SearchConfig:
    """Turn parsed arguments into a SearchConfig.

    Today's date is resolved here once, so the whole run compares against a
    single target even if it crosses midnight.

    Raises:
        ConfigError: If --date is not a valid YYYY-MM-DD date
    """
    date_arg = getattr(args, "date", None)
    return SearchConfig(
        target_date=parse_date(date_arg) if date_arg is not None else today(),
        suffix=args.suffix,
        root=args.root,
        follow_links=args.follow_links,
        use_gitignore=args.gitignore,
        show_progress=args.progress,
    )


def main(argv=None):
    """Main entry point for the mdfiles CLI."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = build_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    status = run(config)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
