"""Record of a path the walker had to skip."""

from typing import Any


class TraversalFailure:
    """A single non-fatal failure encountered while walking a tree.

    Attributes:
        path (str): The directory or entry that could not be processed.
        stage (str): What was being attempted: "open", "read" or "stat".
        error (OSError): The underlying error.

    Example:
        >>> failure = TraversalFailure("/root/secret", "open", PermissionError(13, "Permission denied"))
        >>> failure.strerror
        'Permission denied'
    """

    def __init__(self, path: str, stage: str, error: OSError):
        self.path = path
        self.stage = stage
        self.error = error

    @property
    def strerror(self) -> str:
        """The OS error text, falling back to the exception message."""
        return self.error.strerror or str(self.error)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TraversalFailure):
            return False
        return self.path == other.path and self.stage == other.stage and self.error is other.error

    def __hash__(self) -> int:
        return hash((self.path, self.stage))

    def __repr__(self) -> str:
        return f"TraversalFailure(path={self.path!r}, stage={self.stage!r}, error={self.strerror!r})"
