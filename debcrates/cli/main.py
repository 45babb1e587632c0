"""
Main CLI entry point for debcrates

Usage:
    debcrates            list every librust package in the apt index
    debcrates serde      only crates whose name contains "serde"
"""

import argparse
import logging
import sys

from .. import __version__
from ..core.pipeline import inventory
from ..core.sources import ToolError

logger = logging.getLogger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_TOOL_FAILURE = 3
EXIT_INTERRUPTED = 130


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""

    parser = argparse.ArgumentParser(
        prog='debcrates',
        description='List Debian-packaged Rust crates and their install status',
    )

    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'debcrates {__version__}'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output (debug log on stderr)'
    )

    parser.add_argument(
        '--nocolor',
        action='store_true',
        help='Disable colored output'
    )

    parser.add_argument(
        'search_term',
        nargs='?',
        default=None,
        help='Only show crates whose name contains this text (case-sensitive)'
    )

    return parser


def parse_args(parser: argparse.ArgumentParser, argv=None) -> argparse.Namespace:
    """Parse arguments, accepting a search term that starts with '-'.

    Crate filters like "-sys" look like options to argparse. A single
    unrecognized dash-prefixed word is taken as the search term when no
    other term was given; anything else is a usage error.
    """
    args, extras = parser.parse_known_args(argv)
    if extras:
        if len(extras) == 1 and extras[0].startswith('-') and args.search_term is None:
            args.search_term = extras[0]
        else:
            parser.error(f"unrecognized arguments: {' '.join(extras)}")
    return args


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parse_args(parser, argv)

    # Configure logging based on verbose flag
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(name)s - %(levelname)s - %(message)s',
            stream=sys.stderr
        )

    # Initialize color support
    from . import colors
    colors.init(nocolor=args.nocolor)

    try:
        records = inventory(search_term=args.search_term)
    except ToolError as e:
        print(colors.error(f"error: {e}"), file=sys.stderr)
        return EXIT_TOOL_FAILURE
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return EXIT_INTERRUPTED

    logger.debug(f"Displaying {len(records)} records")

    from . import display
    status_color = colors.status if colors.enabled() else None
    display.print_table(records, status_color=status_color)
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
