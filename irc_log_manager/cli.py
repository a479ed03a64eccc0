"""
Command line interface.

Usage:
    irc-log-manager check [-v]
    irc-log-manager sort [-v] [--since 2019-02-18] [--author nick ...]

``sort`` prints client commands on stdout, two per channel, ready to be
pasted into the client. All narration goes to stderr.
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .channels import read_channels
from .checker import IntegrityChecker
from .config import (
    DEFAULT_QUALIFYING_AUTHORS,
    default_cutoff_date,
    load_settings,
    normalize_date,
)
from .exceptions import ConfigurationError, LogManagerError
from .logging_config import configure_logging, enable_debug, enable_verbose, get_logger
from .ranker import ActivityRanker, author_predicate, directives

logger = get_logger(__name__)


def _iso_date(value: str) -> str:
    try:
        return normalize_date(value)
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Narrate progress on stderr (repeat for debug output)",
    )
    common.add_argument(
        "--weechat-dir", metavar="DIR",
        help="Client directory (default: $WEECHAT_HOME or ~/.weechat)",
    )
    common.add_argument(
        "--workers", type=_positive_int, metavar="N",
        help="Number of worker threads",
    )

    parser = argparse.ArgumentParser(
        prog="irc-log-manager", description="Manage IRC logs of weechat"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser(
        "check", parents=[common], help="check if IRC logs are intact"
    )

    sort_parser = subparsers.add_parser(
        "sort", aliases=["rank"], parents=[common],
        help="sort IRC channels in order of recent activity",
    )
    sort_parser.add_argument(
        "--since", type=_iso_date, metavar="YYYY-MM-DD",
        help="Earliest date counted (default: 30 days ago)",
    )
    sort_parser.add_argument(
        "--author", action="append", metavar="NAME",
        help="Nick whose messages count; repeatable (default: the log owner's nicks)",
    )

    return parser


def run_check(args: argparse.Namespace) -> int:
    settings = load_settings(args.weechat_dir, args.workers)
    channels = read_channels(settings.config_path)

    checker = IntegrityChecker(
        settings.log_dir, extension=settings.log_extension, max_workers=settings.max_workers
    )
    count = checker.check(channels)

    print(f"Checked {count} files, no issue was found")
    return 0


def run_sort(args: argparse.Namespace) -> int:
    settings = load_settings(args.weechat_dir, args.workers)
    channels = read_channels(settings.config_path)

    ranker = ActivityRanker(
        settings.log_dir,
        cutoff_date=args.since or default_cutoff_date(),
        qualifies=author_predicate(args.author or DEFAULT_QUALIFYING_AUTHORS),
        extension=settings.log_extension,
        max_workers=settings.max_workers,
    )
    ranked = ranker.rank(channels)

    for line in directives(ranked):
        print(line)
    return 0


COMMANDS = {
    "check": run_check,
    "sort": run_sort,
    "rank": run_sort,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_usage(sys.stderr)
        return 2

    configure_logging(simple_mode=args.verbose < 2)
    if args.verbose >= 2:
        enable_debug()
    elif args.verbose == 1:
        enable_verbose()

    try:
        return COMMANDS[args.command](args)
    except LogManagerError as e:
        logger.error("Error: %s", e)
        return 1
