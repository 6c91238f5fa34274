"""Command-line interface for osfind.

This module provides the command-line entry point: it parses the options,
builds the filter set, walks the tree, prints the matching paths and finally
hands them to an external program if ``-exec`` was given.

Signal Handling Notes:
    - SIGINT: stops the walk before the next directory entry; paths found so far are printed
    - SIGPIPE: stops output when the reading end of the pipe is closed

Exit Codes:
    0: Successful completion (including when some paths could not be read)
    1: Runtime error during execution
    2: Command-line syntax error, unknown option or missing path
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE)

Example:
    # Files in /tmp/x larger than 15 bytes
    $ osfind /tmp/x -size=+15
    /tmp/x/b
    /tmp/x/c/d
"""

import sys
from typing import List

from osfind.cli.argparser import create_parser, filter_options, validate_args
from osfind.cli.safe_writer import SafeWriter
from osfind.cli.signal_handler import setup_signal_handling, signal_handler
from osfind.executor import execute
from osfind.predicate.filter_set import FilterSet
from osfind.walker.directory_walker import DirectoryWalker
from osfind.walker.error_action import ErrorAction


def collect_matches(walker: DirectoryWalker) -> List[str]:
    """Run the walk, stopping at the next entry if SIGINT arrives.

    Args:
        walker: A configured DirectoryWalker.

    Returns:
        Matching paths found before completion or interruption.
    """
    if walker.stop_event is None:
        walker.stop_event = signal_handler.sigint_received
    return walker.walk()


def main() -> None:
    """Main entry point for the osfind command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE)
    """
    setup_signal_handling()

    parser = create_parser()
    # argparse exits with 2 on unknown or malformed options and with 0 after -help
    args = parser.parse_args()

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        predicate = FilterSet.from_options(filter_options(args))
        walker = DirectoryWalker(args.path, predicate, error_action=ErrorAction.WARN)
        results = collect_matches(walker)

        with SafeWriter(sys.stdout.fileno()) as safe_writer:
            try:
                for path in results:
                    safe_writer.write_path(path)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

        if args.exec and results and not signal_handler.interrupted():
            execute(args.exec, results)

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
