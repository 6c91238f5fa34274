"""Running an external program on the search results."""

import subprocess
import sys
from typing import List, Optional, Sequence

from osfind.types import PathType


def build_command(program: PathType, paths: Sequence[str]) -> List[str]:
    """Build the argument vector for a single invocation.

    Args:
        program: Path to the executable.
        paths: Matching paths, passed in result order.

    Returns:
        ``[program, *paths]``

    Example:
        >>> build_command("/bin/echo", ["/tmp/x/a", "/tmp/x/b"])
        ['/bin/echo', '/tmp/x/a', '/tmp/x/b']
    """
    return [str(program), *paths]


def execute(program: PathType, paths: Sequence[str]) -> Optional[int]:
    """Run ``program`` once with every matching path as an argument.

    The call blocks until the child exits. Failures are reported but never
    raised: the outcome of the child does not affect osfind's own exit status.

    Args:
        program: Path to the executable. It is run directly, not through a shell.
        paths: Matching paths to pass as arguments.

    Returns:
        The child's exit status, or None if it could not be started.
    """
    try:
        completed = subprocess.run(build_command(program, paths), check=False)
    except OSError as e:
        print(f"Error: Execution failed: {e.strerror or e}", file=sys.stderr)
        return None

    print(f"Executed. Return code: {completed.returncode}")
    return completed.returncode
