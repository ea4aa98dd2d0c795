"""Command-line interface for treego.

Usage:
    treego <path>                      # print the tree
    treego <path> --search <query>     # print full paths of matching entries
    treego <path> --regex '\\.py$'      # only entries matching a pattern
    treego <path> --dirs-only          # only directories
"""

import argparse
import logging
import os
import re
import sys
from typing import List, Optional

from . import __version__
from .api import build_tree, print_tree, search_tree
from .aio.builder import base_name
from .aio.error_policies import CollectErrorsPolicy

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="treego",
        description="Print directory tree and search files",
    )
    parser.add_argument("path", help="root directory to scan")
    parser.add_argument("-s", "--search", default="",
                        help="search string (prints full path)")
    parser.add_argument("-r", "--regex", default="", help="regex filter")
    parser.add_argument("-d", "--dirs-only", action="store_true",
                        help="show only directories")
    parser.add_argument("-j", "--max-concurrent", type=_positive_int, default=None,
                        help="cap on concurrent filesystem calls (default: unbounded)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log build progress to stderr")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s v{__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, DEBUG when verbose and WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    args = create_parser().parse_args(argv)
    configure_logging(args.verbose)

    regex = None
    if args.regex:
        try:
            regex = re.compile(args.regex)
        except re.error as e:
            print(f"Invalid regex: {e}", file=sys.stderr)
            return 1

    root_path = os.path.normpath(args.path)
    try:
        os.stat(root_path)
    except OSError as e:
        print(f"Invalid path: {e}", file=sys.stderr)
        return 1

    policy = CollectErrorsPolicy()
    # Sorted to match the directory order the original tool printed in.
    root = build_tree(
        root_path,
        max_concurrent=args.max_concurrent,
        sort_entries=True,
        policy=policy,
    )
    if root is None:
        reason = policy.first_error
        if reason is not None:
            print(f"Invalid path: {reason.error_message}", file=sys.stderr)
        else:
            print(f"Invalid path: unable to read {root_path}", file=sys.stderr)
        logger.debug("Build failed with %d error(s)", len(policy.errors))
        return 1

    if args.search:
        search_tree(root, args.search)
    else:
        print(base_name(root_path))
        print_tree(root, "", regex, args.dirs_only)
    return 0


if __name__ == "__main__":
    sys.exit(main())
