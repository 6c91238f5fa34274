class OsFindError(Exception):
    """
    Base class for all errors raised by osfind.

    Catching this exception covers every configuration problem the package can
    report without also catching unrelated built-in errors.
    """

    pass


class UnknownFilterError(OsFindError, KeyError):
    """
    Exception raised when a filter mapping contains a key osfind does not recognize.

    The recognized keys form a closed set (see ``osfind.cli.argparser.OptionKey``).
    Anything outside it is a fatal configuration error.

    Attributes:
        key (str): The unrecognized key.

    Example:
        >>> error = UnknownFilterError("mtime")
        >>> str(error)
        'Unexpected key: -mtime'
    """

    def __init__(self, key: str) -> None:
        """
        Initialize the exception with the offending key.

        Args:
            key (str): The unrecognized filter key.
        """
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unexpected key: -{self.key}"


class InvalidFilterValueError(OsFindError, ValueError):
    """
    Exception raised when an inode or link-count filter value is not an unsigned integer.

    Unlike size expressions, these values have no sensible fallback, so the error is fatal.

    Attributes:
        key (str): The filter the value was supplied for.
        value (object): The rejected value.

    Example:
        >>> error = InvalidFilterValueError("inum", "-3")
        >>> str(error)
        "Invalid value for -inum: '-3' is not an unsigned integer"
    """

    def __init__(self, key: str, value: object) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid value for -{key}: {value!r} is not an unsigned integer")


class InvalidSizeFilterError(OsFindError, ValueError):
    """
    Exception raised when a size expression cannot be parsed.

    A valid expression is one of ``=``, ``-`` or ``+`` followed by a byte count.
    Callers building a filter set downgrade this error to a warning and leave the
    size filter inactive.

    Attributes:
        expression (str): The rejected expression.

    Example:
        >>> error = InvalidSizeFilterError("*1024", "incorrect size key '*'")
        >>> str(error)
        "Invalid size filter '*1024': incorrect size key '*'"
    """

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid size filter '{expression}': {reason}")
