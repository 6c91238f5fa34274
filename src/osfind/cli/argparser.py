"""Command-line argument parsing for osfind.

This module defines the command-line interface for osfind, handling argument
parsing and validation. Options use a single dash followed by the full key,
with the value either attached (``-size=+1024``) or as the next argument
(``-size +1024``).
"""

import argparse
from enum import Enum
from typing import Any, Dict

from osfind import __version__
from osfind.predicate.filter_set import FILTER_KEYS


class OptionKey(str, Enum):
    """The closed set of option keys osfind recognizes."""

    HELP = "help"
    PATH = "path"
    INUM = "inum"
    NAME = "name"
    SIZE = "size"
    NLINKS = "nlinks"
    EXEC = "exec"


def strip_quotes(value: str) -> str:
    """Remove one matching pair of surrounding single or double quotes.

    Args:
        value: Raw option value.

    Returns:
        The value without its enclosing quotes, or unchanged if it has none.

    Example:
        >>> strip_quotes("'my file.txt'")
        'my file.txt'
        >>> strip_quotes('"unbalanced')
        '"unbalanced'
    """
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def unsigned_int(value: str) -> int:
    """argparse type for inode numbers and link counts.

    Args:
        value: Raw option value, possibly quoted.

    Returns:
        The parsed non-negative integer.

    Raises:
        argparse.ArgumentTypeError: If the value is not an unsigned integer.
    """
    text = strip_quotes(value).strip()
    if not text.isdecimal():
        raise argparse.ArgumentTypeError(f"'{value}' is not an unsigned integer")
    return int(text)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with osfind's options.
    """
    description = """
    osfind: search a directory tree for files by inode, name, link count and size.

    The tree below PATH is walked breadth-first. Every entry that is not a
    directory is tested against all given filters, and the paths of those that
    pass every filter are printed one per line. Symbolic links are never
    followed: a link is tested as a file in its own right.
    """

    epilog = """
    Size expressions:
      -size==N   files of exactly N bytes
      -size=-N   files smaller than N bytes
      -size=+N   files larger than N bytes
      N is a whole number of bytes. An invalid expression is reported and
      the size filter is ignored.

    Examples:
      # List every file below a directory
      osfind /path/to/dir

      # Find all names for inode 1234
      osfind /path/to/dir -inum=1234

      # Find files called notes.txt that are larger than 1 KiB
      osfind /path/to/dir -name=notes.txt -size=+1024

      # Find files with exactly two hard links
      osfind /path/to/dir -nlinks=2

      # Pass all matches to a program in a single invocation
      osfind /path/to/dir -size=-1 -exec=/bin/ls
    """

    parser = argparse.ArgumentParser(
        prog="osfind",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-" + OptionKey.HELP.value,
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="Show this help message and exit",
    )
    parser.add_argument(
        "-version", "--version", action="version", version=f"osfind {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "directory",
        nargs="?",
        type=strip_quotes,
        metavar="PATH",
        help="The directory to search. Printed paths start with this path.",
    )
    parser.add_argument(
        "-" + OptionKey.PATH.value,
        dest="path_option",
        type=strip_quotes,
        metavar="PATH",
        help="Alternative way to give the directory to search.",
    )
    parser.add_argument(
        "-" + OptionKey.INUM.value,
        type=unsigned_int,
        metavar="N",
        help="Match files whose inode number is N.",
    )
    parser.add_argument(
        "-" + OptionKey.NAME.value,
        type=strip_quotes,
        metavar="NAME",
        help="Match files whose name is exactly NAME (no wildcards).",
    )
    parser.add_argument(
        "-" + OptionKey.NLINKS.value,
        type=unsigned_int,
        metavar="N",
        help="Match files with exactly N hard links.",
    )
    parser.add_argument(
        "-" + OptionKey.SIZE.value,
        type=strip_quotes,
        metavar="[=-+]N",
        help="Match files whose size is equal to (=), less than (-) or greater than (+) N bytes.",
    )
    parser.add_argument(
        "-" + OptionKey.EXEC.value,
        type=strip_quotes,
        metavar="PROGRAM",
        help="Run PROGRAM once with all matching paths as its arguments.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle and stores
    the directory to search in ``args.path``.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.directory is None and args.path_option is None:
        raise ValueError("No path to directory given")
    if args.directory is not None and args.path_option is not None and args.directory != args.path_option:
        raise ValueError("PATH and -path name different directories")
    args.path = args.directory if args.directory is not None else args.path_option
    if not args.path:
        raise ValueError("Path to directory must not be empty")


def filter_options(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the filter values given on the command line.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Mapping of filter keys to values, containing only the filters that were given.
    """
    return {key: getattr(args, key) for key in FILTER_KEYS if getattr(args, key) is not None}
