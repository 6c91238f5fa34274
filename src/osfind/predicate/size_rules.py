"""Parsing of size expressions such as '=1024', '-10' or '+4096'."""

from osfind.exceptions import InvalidSizeFilterError

from .attribute_test import AttributeTest
from .comparison import Comparison


def parse_byte_count(size_str: str, binary: bool = True) -> int:
    """Parse a whole byte count, optionally with a human-readable unit.

    Args:
        size_str: Size string like '1024', '10K' or '1MiB'. A bare number is a
            count of bytes.
        binary: Whether ambiguous units such as 'K' and 'MB' are powers of 1024.

    Returns:
        Size in bytes

    Raises:
        ValueError: If size_str is not a valid size format or is not a whole number
        ImportError: If humanfriendly library is not available
    """
    try:
        from humanfriendly import parse_size
        from humanfriendly.text import tokenize
    except ImportError:
        raise ImportError("humanfriendly is required for size parsing. " "Install it with: pip install humanfriendly")

    # parse_size truncates fractions instead of rejecting them
    if any(isinstance(token, float) for token in tokenize(size_str)):
        raise ValueError(f"Size must be a whole number of bytes: '{size_str}'")

    try:
        size = int(parse_size(size_str, binary=binary))
    except Exception as e:
        raise ValueError(f"Invalid size format '{size_str}': {e}")
    if size < 0:
        raise ValueError(f"Size cannot be negative: '{size_str}'")
    return size


def parse_size_expression(expression: str, allow_units: bool = False) -> AttributeTest:
    """Turn a size expression into an active size test.

    The first character selects the comparison and the remainder is the size
    in bytes:

    - ``=N`` matches files of exactly N bytes
    - ``-N`` matches files strictly smaller than N bytes
    - ``+N`` matches files strictly larger than N bytes

    Args:
        expression: The raw expression, e.g. ``"+1024"``.
        allow_units: Also accept unit suffixes on the remainder (``+10K``,
            ``-1MiB``), with K, M and G meaning powers of 1024. Off by default,
            where the remainder must be plain decimal digits.

    Returns:
        An AttributeTest on the ``size`` attribute.

    Raises:
        InvalidSizeFilterError: If the operator is missing or unknown, or the
            remainder is not a valid non-negative whole size.

    Example:
        >>> parse_size_expression("+1024")
        AttributeTest(size + 1024)
        >>> parse_size_expression("-1K", allow_units=True)
        AttributeTest(size - 1024)
        >>> parse_size_expression("*1024")
        Traceback (most recent call last):
            ...
        osfind.exceptions.InvalidSizeFilterError: Invalid size filter '*1024': incorrect size key '*'
    """
    if not expression:
        raise InvalidSizeFilterError(expression, "empty expression")

    operator, remainder = expression[0], expression[1:]
    try:
        comparison = Comparison(operator)
    except ValueError:
        raise InvalidSizeFilterError(expression, f"incorrect size key '{operator}'")

    if not remainder.strip():
        raise InvalidSizeFilterError(expression, "missing size value")
    if not allow_units and not remainder.isdecimal():
        raise InvalidSizeFilterError(expression, f"'{remainder}' is not an unsigned integer")

    try:
        target = parse_byte_count(remainder)
    except ValueError as e:
        raise InvalidSizeFilterError(expression, str(e))

    return AttributeTest("size", target, comparison)
