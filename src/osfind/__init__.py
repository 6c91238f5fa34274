"""Breadth-first file search by inode, name, link count and size.

This package provides a directory walker and a small predicate model for
locating files whose metadata matches a set of exact or ranged filters.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("osfind")
except PackageNotFoundError:
    __version__ = "unknown"
