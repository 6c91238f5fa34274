"""Error action enum for handling filesystem errors during directory traversal."""

from enum import Enum


class ErrorAction(str, Enum):
    """Action to take when a directory cannot be opened or an entry cannot be stat'ed.

    Values:
        WARN: Report the failure on stderr and skip the affected path (default behavior)
        IGNORE: Skip the affected path silently
        RAISE: Re-raise the underlying OSError immediately, aborting the walk
    """

    WARN = "warn"
    IGNORE = "ignore"
    RAISE = "raise"
