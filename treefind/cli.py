#!/usr/bin/env python
"""
Command-line driver for treefind.

Collects a root directory, a file name and the two search selectors,
runs the search and prints the result as JSON. Anything not given on the
command line is prompted for on stdin.

Usage:
    treefind                                   # Prompt for everything
    treefind ~/project setup.py --match all    # Prompt for traversal only
    treefind ~/project setup.py -m 2 -t 2 -v   # All matches, iterative DFS
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Callable, List, Optional

from .aio.api import run_search_async
from .config import SearchConfig
from .errors import ForbiddenRootError, InvalidSelectionError
from .guard import is_forbidden

EXIT_OK = 0
EXIT_FORBIDDEN = 1
EXIT_INVALID_SELECTION = 2

FORBIDDEN_MESSAGE = "This directory is not allowed for safety reasons."
INVALID_SELECTION_MESSAGE = "Invalid selection."

PROMPT_ROOT = "Enter directory to search in: "
PROMPT_FILE_NAME = "Enter file name to search for: "
PROMPT_MATCH = "Search type (1 = first match, 2 = all matches): "
PROMPT_TRAVERSAL = "Traversal (1 = recursive DFS, 2 = iterative DFS): "


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="treefind",
        description="Search a directory tree for files with an exact name.",
    )
    parser.add_argument("root", nargs="?", help="Directory to search in")
    parser.add_argument("file_name", nargs="?", help="File name to search for")
    parser.add_argument(
        "-m", "--match",
        help="1/first = first match, 2/all = all matches",
    )
    parser.add_argument(
        "-t", "--traversal",
        help="1/recursive = recursive DFS, 2/iterative = iterative DFS",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Descend into symlinked directories (no cycle detection)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )
    return parser


def configure_logging(verbosity: int) -> None:
    """Route treefind logs to stderr at a level picked by ``-v`` count."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger("treefind")
    logger.setLevel(level)

    # Replace rather than stack handlers across repeated calls
    for existing in list(logger.handlers):
        if getattr(existing, "_treefind_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s | %(message)s"))
    handler._treefind_handler = True
    logger.addHandler(handler)


def render_result(result: Any) -> str:
    """Render a search result as indented JSON."""
    if isinstance(result, list):
        payload = [node.to_dict() for node in result]
    elif result is None:
        payload = None
    else:
        payload = result.to_dict()
    return json.dumps(payload, indent=2)


def main(
    argv: Optional[List[str]] = None,
    prompt: Callable[[str], str] = input
) -> int:
    """Run the driver.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        prompt: Function used to ask for missing inputs

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    root = args.root if args.root is not None else prompt(PROMPT_ROOT)

    # Decline before asking for anything else
    if is_forbidden(root):
        print(FORBIDDEN_MESSAGE)
        return EXIT_FORBIDDEN

    file_name = args.file_name if args.file_name is not None else prompt(PROMPT_FILE_NAME)
    match_mode = args.match if args.match is not None else prompt(PROMPT_MATCH)
    traversal_mode = args.traversal if args.traversal is not None else prompt(PROMPT_TRAVERSAL)

    try:
        config = SearchConfig.from_selectors(
            root,
            file_name,
            match_mode,
            traversal_mode,
            follow_symlinks=args.follow_symlinks,
        )
    except InvalidSelectionError:
        print(INVALID_SELECTION_MESSAGE)
        return EXIT_INVALID_SELECTION

    print("\nReading directory tree...\n")
    try:
        result = asyncio.run(run_search_async(config))
    except ForbiddenRootError:
        print(FORBIDDEN_MESSAGE)
        return EXIT_FORBIDDEN

    print("Result:\n")
    print(render_result(result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
