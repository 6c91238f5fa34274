"""Unit tests for the TraversalFailure record."""

from osfind.walker.traversal_failure import TraversalFailure


def test_strerror_from_os_error():
    failure = TraversalFailure("/secret", "open", PermissionError(13, "Permission denied"))
    assert failure.strerror == "Permission denied"
    assert repr(failure) == "TraversalFailure(path='/secret', stage='open', error='Permission denied')"


def test_strerror_falls_back_to_message():
    """Test errors raised without an errno still produce readable text."""
    failure = TraversalFailure("/x", "read", OSError("listing vanished"))
    assert failure.strerror == "listing vanished"


def test_equality():
    error = FileNotFoundError(2, "No such file or directory")
    assert TraversalFailure("/x", "open", error) == TraversalFailure("/x", "open", error)
    assert TraversalFailure("/x", "open", error) != TraversalFailure("/x", "stat", error)
    assert TraversalFailure("/x", "open", error) != "/x"
