"""High-level search entry point.

This module ties the predicate model and the directory walker together so
that a search can be run with a single call.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Union

from osfind.predicate.base_predicate import BasePredicate
from osfind.predicate.filter_set import FilterSet
from osfind.types import PathType
from osfind.walker.directory_walker import DirectoryWalker
from osfind.walker.error_action import ErrorAction


def find(
    root_path: PathType,
    filters: Union[Mapping[str, Any], BasePredicate, None] = None,
    *,
    error_action: Union[str, ErrorAction] = ErrorAction.WARN,
    sort_entries: bool = False,
) -> List[str]:
    """Search a directory tree for files matching all given filters.

    Args:
        root_path: Directory to search. Can be any path-like object.
        filters: Either a mapping of filter keys ("inum", "name", "nlinks",
            "size") to raw values, a ready-made predicate, or None to list
            every non-directory entry.
        error_action: How to handle traversal errors. Defaults to WARN.
        sort_entries: Sort each directory listing by name for deterministic output.

    Returns:
        Matching paths in breadth-first order.

    Raises:
        UnknownFilterError: If the mapping contains an unrecognized key.
        InvalidFilterValueError: If "inum" or "nlinks" is not an unsigned integer.

    Example:
        >>> find("/tmp/x", {"name": "a"})  # doctest: +SKIP
        ['/tmp/x/a']
    """
    predicate: Optional[BasePredicate]
    if filters is None or isinstance(filters, BasePredicate):
        predicate = filters
    else:
        predicate = FilterSet.from_options(filters)

    walker = DirectoryWalker(root_path, predicate, error_action=error_action, sort_entries=sort_entries)
    return walker.walk()
