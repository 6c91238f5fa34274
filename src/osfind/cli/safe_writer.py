"""Safe output writing utilities for osfind CLI.

This module provides a writer for search results that stops cleanly when the
output pipe is closed. An interrupted walk still gets its partial results written.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from osfind.cli.signal_handler import signal_handler


class SafeWriter:
    """Signal-aware writer for matched paths.

    Paths are encoded with the filesystem encoding (``os.fsencode``), so names
    that are not valid UTF-8 are written back byte for byte.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
        separator: Bytes written after each path.
    """

    def __init__(self, file: Union[int, Path], separator: bytes = b"\n"):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or Path object for writing output.
            separator: Terminator written after every path. Defaults to a newline.
        """
        self.file = file
        self.separator = separator
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            path = Path(file)
            self._file_obj = path.open("wb")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: Union[str, bytes]) -> None:
        """Safely write data with signal checking.

        Args:
            data: Text (encoded with the filesystem encoding) or raw bytes.

        Raises:
            BrokenPipeError: If SIGPIPE was received or the pipe is broken.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.sigpipe_received.is_set():
            raise BrokenPipeError()

        payload = os.fsencode(data) if isinstance(data, str) else data
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_path(self, path: str) -> None:
        """Write one matched path followed by the separator."""
        self.write(os.fsencode(path) + self.separator)

    def close(self) -> None:
        """Close the file if it was opened by this class.

        The writer is marked as closed even if closing fails with a broken pipe.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes precedence over one from close()
            if exc_type is None:
                raise
