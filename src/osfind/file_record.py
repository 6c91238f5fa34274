"""Metadata of a single directory entry seen during traversal."""

import os
import stat
from typing import Any

from osfind.types import FileType


class FileRecord:
    """Class holding the metadata of one directory entry.

    A FileRecord is created the moment an entry is read from its parent's
    listing and lives only until the entry has been classified: enqueued as a
    directory, tested against the predicate, or dropped.

    Attributes:
        name (str): Base name of the entry as returned by the directory listing.
        path (str): Parent path joined with ``name``.
        inode (int): Inode number from stat information.
        nlink (int): Number of hard links.
        size (int): Size in bytes.
        file_type (FileType): Kind of entry, without following symlinks.

    Example:
        >>> record = FileRecord("a", "/tmp/x/a", inode=12, nlink=1, size=10)
        >>> record.is_dir
        False
        >>> record
        FileRecord(path='/tmp/x/a', inode=12, nlink=1, size=10, file_type='file')
    """

    def __init__(
        self,
        name: str,
        path: str,
        inode: int,
        nlink: int,
        size: int,
        file_type: FileType = FileType.FILE,
    ):
        self.name = name
        self.path = path
        self.inode = inode
        self.nlink = nlink
        self.size = size
        self.file_type = file_type

    @classmethod
    def from_stat(cls, name: str, path: str, stat_info: os.stat_result) -> "FileRecord":
        """Build a record from the result of a non-symlink-following stat.

        Args:
            name: Base name of the entry.
            path: Full path of the entry.
            stat_info: Result of ``os.lstat`` (or ``DirEntry.stat(follow_symlinks=False)``).

        Returns:
            The populated FileRecord.
        """
        mode = stat_info.st_mode
        if stat.S_ISDIR(mode):
            file_type = FileType.DIRECTORY
        elif stat.S_ISLNK(mode):
            file_type = FileType.SYMLINK
        elif stat.S_ISREG(mode):
            file_type = FileType.FILE
        else:
            file_type = FileType.OTHER
        return cls(
            name,
            path,
            inode=stat_info.st_ino,
            nlink=stat_info.st_nlink,
            size=stat_info.st_size,
            file_type=file_type,
        )

    @property
    def is_dir(self) -> bool:
        """True only for genuine directories; a symlink to a directory is not one."""
        return self.file_type is FileType.DIRECTORY

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileRecord):
            return False
        return (self.name, self.path, self.inode, self.nlink, self.size, self.file_type) == (
            other.name,
            other.path,
            other.inode,
            other.nlink,
            other.size,
            other.file_type,
        )

    def __hash__(self) -> int:
        return hash((self.path, self.inode))

    def __repr__(self) -> str:
        return (
            f"FileRecord(path={self.path!r}, inode={self.inode}, nlink={self.nlink}, "
            f"size={self.size}, file_type={self.file_type.value!r})"
        )
