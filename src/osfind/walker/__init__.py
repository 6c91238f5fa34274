"""Breadth-first directory walker that applies a predicate to every non-directory entry."""

from .directory_walker import DirectoryWalker
from .error_action import ErrorAction
from .traversal_failure import TraversalFailure

__all__ = ["DirectoryWalker", "ErrorAction", "TraversalFailure"]
