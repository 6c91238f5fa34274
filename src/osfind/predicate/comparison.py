"""Comparison operators used by attribute tests."""

from enum import Enum
from typing import Any


class Comparison(str, Enum):
    """How an observed attribute value is compared against a target.

    The values are the leading characters of a size expression, so a
    Comparison can be looked up directly from user input.

    Values:
        EQUAL: Observed value equals the target ("=")
        LESS: Observed value is strictly less than the target ("-")
        GREATER: Observed value is strictly greater than the target ("+")
    """

    EQUAL = "="
    LESS = "-"
    GREATER = "+"

    def compare(self, actual: Any, target: Any) -> bool:
        """Apply this comparison to an observed value.

        Args:
            actual: The value read from the file's metadata.
            target: The value the user asked for.

        Returns:
            True if ``actual`` satisfies the comparison against ``target``.

        Example:
            >>> Comparison.LESS.compare(10, 20)
            True
            >>> Comparison.GREATER.compare(10, 20)
            False
        """
        if self is Comparison.LESS:
            return bool(actual < target)
        if self is Comparison.GREATER:
            return bool(actual > target)
        return bool(actual == target)
