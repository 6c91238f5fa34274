"""The conjunction of per-attribute tests applied to every candidate file."""

import sys
from collections.abc import Mapping
from typing import Any, List, Optional

from osfind.exceptions import InvalidFilterValueError, InvalidSizeFilterError, UnknownFilterError
from osfind.file_record import FileRecord

from .attribute_test import AttributeTest
from .base_predicate import BasePredicate
from .size_rules import parse_size_expression

# Keys that select a filter, in evaluation order
FILTER_KEYS = ("inum", "name", "nlinks", "size")

# Keys that may share an option mapping with the filters but configure something else
NON_FILTER_KEYS = ("help", "path", "exec")


def parse_unsigned(key: str, value: Any) -> int:
    """Parse an inode number or link count.

    Args:
        key: The option the value belongs to, used in error messages.
        value: An int or a string of decimal digits.

    Returns:
        The non-negative integer.

    Raises:
        InvalidFilterValueError: If the value is negative, boolean or not a number.
    """
    if isinstance(value, bool):
        raise InvalidFilterValueError(key, value)
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(str(value).strip())
        except ValueError:
            raise InvalidFilterValueError(key, value)
    if number < 0:
        raise InvalidFilterValueError(key, value)
    return number


class FilterSet(BasePredicate):
    """Immutable conjunction of up to four attribute tests.

    Each of the inode, name, link-count and size slots holds either an active
    AttributeTest or None. An empty slot always matches, so a FilterSet with
    no active tests matches every candidate ("list everything" mode).

    Attributes:
        inode (Optional[AttributeTest]): Test on the inode number.
        name (Optional[AttributeTest]): Exact test on the entry's base name.
        nlink (Optional[AttributeTest]): Test on the hard-link count.
        size (Optional[AttributeTest]): Comparison on the size in bytes.

    Example:
        >>> filters = FilterSet.from_options({"name": "a", "size": "+15"})
        >>> filters.active_filters()
        [AttributeTest(name = 'a'), AttributeTest(size + 15)]
        >>> FilterSet().is_empty()
        True
    """

    def __init__(
        self,
        inode: Optional[AttributeTest] = None,
        name: Optional[AttributeTest] = None,
        nlink: Optional[AttributeTest] = None,
        size: Optional[AttributeTest] = None,
    ) -> None:
        self._inode = inode
        self._name = name
        self._nlink = nlink
        self._size = size

    @property
    def inode(self) -> Optional[AttributeTest]:
        return self._inode

    @property
    def name(self) -> Optional[AttributeTest]:
        return self._name

    @property
    def nlink(self) -> Optional[AttributeTest]:
        return self._nlink

    @property
    def size(self) -> Optional[AttributeTest]:
        return self._size

    @classmethod
    def from_options(cls, options: Mapping[str, Any], warn: bool = True, allow_units: bool = False) -> "FilterSet":
        """Build a FilterSet from a mapping of filter keys to raw values.

        Keys mapped to None are treated as absent. The ``help``, ``path`` and
        ``exec`` keys are tolerated and ignored so that a full option mapping
        can be passed in unchanged.

        An invalid size expression is not fatal: a warning is printed to
        stderr (unless ``warn`` is False) and the size slot is left inactive.

        Args:
            options: Mapping such as ``{"inum": "42", "size": "+1024"}``.
            warn: Whether to report an ignored size expression on stderr.
            allow_units: Accept unit suffixes in the size value (see ``parse_size_expression``).

        Returns:
            The assembled FilterSet.

        Raises:
            UnknownFilterError: If a key is not a recognized option.
            InvalidFilterValueError: If ``inum`` or ``nlinks`` is not an unsigned integer.
        """
        for key in options:
            if key not in FILTER_KEYS and key not in NON_FILTER_KEYS:
                raise UnknownFilterError(key)

        inode = None
        if options.get("inum") is not None:
            inode = AttributeTest("inode", parse_unsigned("inum", options["inum"]))

        name = None
        if options.get("name") is not None:
            name = AttributeTest("name", str(options["name"]))

        nlink = None
        if options.get("nlinks") is not None:
            nlink = AttributeTest("nlink", parse_unsigned("nlinks", options["nlinks"]))

        size = None
        if options.get("size") is not None:
            try:
                size = parse_size_expression(str(options["size"]), allow_units=allow_units)
            except InvalidSizeFilterError as e:
                if warn:
                    print(f"Warning: {e}; ignoring size filter", file=sys.stderr)

        return cls(inode=inode, name=name, nlink=nlink, size=size)

    def active_filters(self) -> List[AttributeTest]:
        """Return the active tests in evaluation order."""
        return [test for test in (self._inode, self._name, self._nlink, self._size) if test is not None]

    def is_empty(self) -> bool:
        return not self.active_filters()

    def matches(self, record: FileRecord) -> bool:
        """Decide whether a candidate file satisfies every active test.

        Args:
            record: Metadata of the candidate.

        Returns:
            True if all active tests pass (always True for an empty set).
        """
        return (
            (self._inode is None or self._inode.matches(record.inode))
            and (self._name is None or self._name.matches(record.name))
            and (self._nlink is None or self._nlink.matches(record.nlink))
            and (self._size is None or self._size.matches(record.size))
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FilterSet):
            return False
        return self.active_filters() == other.active_filters()

    def __hash__(self) -> int:
        return hash(tuple(self.active_filters()))

    def __repr__(self) -> str:
        return f"FilterSet({', '.join(repr(test) for test in self.active_filters())})"
