from abc import ABC, abstractmethod

from osfind.file_record import FileRecord


class BasePredicate(ABC):
    """
    Abstract base class for match/no-match decisions over a file's metadata.

    The directory walker only depends on this interface: anything that can
    answer ``matches(record)`` can drive a search. Implementations must be pure,
    since the same instance is consulted for every candidate of a traversal.

    Example:
        >>> from osfind.file_record import FileRecord
        >>> class LargeFiles(BasePredicate):
        ...     def matches(self, record: FileRecord) -> bool:
        ...         return record.size > 1000
        >>> LargeFiles()(FileRecord("big.bin", "/tmp/big.bin", inode=1, nlink=1, size=4096))
        True
    """

    @abstractmethod
    def matches(self, record: FileRecord) -> bool:
        """
        Determine whether a candidate file should be reported.

        Args:
            record (FileRecord): Metadata of a non-directory entry.

        Returns:
            bool: True if the file belongs in the result.
        """
        pass

    def __call__(self, record: FileRecord) -> bool:
        return self.matches(record)


class MatchAll(BasePredicate):
    """Predicate that accepts every candidate."""

    def matches(self, record: FileRecord) -> bool:
        return True
