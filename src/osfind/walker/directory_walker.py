"""Breadth-first traversal of a directory tree.

This module provides the DirectoryWalker class, which enumerates every
non-directory entry reachable from a root directory, tests each one against a
predicate and reports the paths that match.
"""

import os
import sys
from collections import deque
from contextlib import closing
from threading import Event
from typing import Deque, Iterator, List, Optional, Union

from osfind.file_record import FileRecord
from osfind.predicate.base_predicate import BasePredicate, MatchAll
from osfind.types import PathType

from .error_action import ErrorAction
from .traversal_failure import TraversalFailure

_DOTS = (os.curdir, os.pardir)

_STAGE_MESSAGES = {
    "open": "cannot open directory",
    "read": "error reading directory",
    "stat": "cannot stat",
}


class DirectoryWalker:
    """Breadth-first search for files matching a predicate.

    Directories are processed level by level through a FIFO queue seeded with
    the root. Each dequeued directory is listed completely before the next one
    is opened; subdirectories found in the listing are appended to the queue.
    Every other entry is a candidate and is tested against the predicate.

    Symbolic Link Behavior:
        Entries are examined with a stat call that does not follow symbolic
        links. A symlink to a directory is therefore a candidate like any other
        file and is never entered, so symlink cycles cannot occur.

    Error Handling:
        A directory that cannot be opened, a listing that fails part-way and an
        entry whose metadata cannot be read each affect only that one path.
        The failure is recorded in ``errors`` and handled according to
        ``error_action``:
        - WARN (default): print one line to stderr and continue
        - IGNORE: continue silently
        - RAISE: re-raise the OSError

    Attributes:
        root_path (str): The directory the search starts from.
        predicate (BasePredicate): Decides which candidates are reported.
        error_action (ErrorAction): How traversal errors are handled.
        sort_entries (bool): Whether each listing is sorted by name; otherwise
            the operating system's listing order is used.
        errors (List[TraversalFailure]): Failures from the most recent walk.
        directory_count (int): Directories successfully opened.
        file_count (int): Candidates tested against the predicate.
        match_count (int): Candidates that matched.
        stop_event (Optional[Event]): When set, the walk ends before the next
            entry is examined.
        stopped (bool): Whether the most recent walk ended because of stop_event.

    Example:
        >>> walker = DirectoryWalker("/tmp/x", FilterSet.from_options({"size": "+15"}))  # doctest: +SKIP
        >>> walker.walk()  # doctest: +SKIP
        ['/tmp/x/b', '/tmp/x/c/d']
    """

    def __init__(
        self,
        root_path: PathType,
        predicate: Optional[BasePredicate] = None,
        error_action: Union[str, ErrorAction] = ErrorAction.WARN,
        sort_entries: bool = False,
        stop_event: Optional[Event] = None,
    ) -> None:
        """Initialize a DirectoryWalker.

        Args:
            root_path: Directory to search. Can be any path-like object.
            predicate: Test applied to each candidate. Defaults to matching everything.
            error_action: How to handle traversal errors. Either an ErrorAction or
                one of "warn", "ignore", "raise". Defaults to WARN.
            sort_entries: Sort each directory listing by name. Defaults to False.
            stop_event: Event checked before every directory and every entry; once
                it is set the walk ends early with the matches found so far.

        Raises:
            ValueError: If error_action is not a valid action.
        """
        if isinstance(error_action, str) and not isinstance(error_action, ErrorAction):
            try:
                error_action = ErrorAction(error_action.lower())
            except ValueError:
                raise ValueError(f"Invalid error_action: {error_action}. " "Must be one of: 'warn', 'ignore', 'raise'")

        self.root_path = os.fspath(root_path)
        self.predicate = predicate if predicate is not None else MatchAll()
        self.error_action = error_action
        self.sort_entries = sort_entries
        self.stop_event = stop_event
        self.stopped = False
        self.errors: List[TraversalFailure] = []
        self.directory_count = 0
        self.file_count = 0
        self.match_count = 0

    def walk(self) -> List[str]:
        """Run the search to completion.

        Returns:
            Matching paths in traversal order.

        Raises:
            OSError: Only when error_action is RAISE and a path cannot be processed.
        """
        return list(self.iterate_matches())

    def iterate_matches(self) -> Iterator[str]:
        """Lazily yield matching paths in breadth-first order.

        Counters and ``errors`` are reset at the start of each iteration. If
        the caller stops early, or ``stop_event`` is set, the directory
        currently being listed is closed.

        Yields:
            Full path of each matching non-directory entry.
        """
        self.errors = []
        self.directory_count = 0
        self.file_count = 0
        self.match_count = 0
        self.stopped = False

        pending: Deque[str] = deque([self.root_path])
        while pending:
            if self._stop_requested():
                return
            directory = pending.popleft()
            with closing(self._scan_directory(directory)) as records:
                for record in records:
                    if self._stop_requested():
                        return
                    if record.is_dir:
                        pending.append(record.path)
                        continue

                    self.file_count += 1
                    if self.predicate.matches(record):
                        self.match_count += 1
                        yield record.path

    def _stop_requested(self) -> bool:
        if self.stop_event is not None and self.stop_event.is_set():
            self.stopped = True
        return self.stopped

    def _scan_directory(self, directory: str) -> Iterator[FileRecord]:
        """Yield a FileRecord for every entry of one directory.

        The directory handle is held only for the duration of the listing and is
        released on every exit path.
        """
        try:
            handle = os.scandir(directory)
        except OSError as e:
            self._report(directory, "open", e)
            return

        self.directory_count += 1
        with handle:
            for entry in self._read_entries(handle, directory):
                if entry.name in _DOTS:
                    continue

                try:
                    stat_info = entry.stat(follow_symlinks=False)
                except OSError as e:
                    self._report(entry.path, "stat", e)
                    continue

                yield FileRecord.from_stat(entry.name, entry.path, stat_info)

    def _read_entries(self, handle: Iterator[os.DirEntry], directory: str) -> Iterator[os.DirEntry]:
        """Yield entries of an open listing, stopping cleanly if reading fails."""
        if self.sort_entries:
            try:
                entries = sorted(handle, key=lambda entry: entry.name)
            except OSError as e:
                self._report(directory, "read", e)
                return
            yield from entries
            return

        while True:
            try:
                entry = next(handle)
            except StopIteration:
                return
            except OSError as e:
                self._report(directory, "read", e)
                return
            yield entry

    def _report(self, path: str, stage: str, error: OSError) -> None:
        """Record a traversal failure and apply the configured error action."""
        failure = TraversalFailure(path, stage, error)
        self.errors.append(failure)

        if self.error_action == ErrorAction.RAISE:
            raise error
        if self.error_action == ErrorAction.WARN:
            print(f"Warning: {_STAGE_MESSAGES[stage]} '{path}': {failure.strerror}", file=sys.stderr)
