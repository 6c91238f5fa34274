"""Test configuration and fixtures for osfind."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """Create the tree used throughout the docs.

    x/
    ├── a      (10 bytes)
    ├── b      (20 bytes)
    └── c/
        └── d  (30 bytes)
    """
    root = tmp_path / "x"
    root.mkdir()
    (root / "a").write_bytes(b"a" * 10)
    (root / "b").write_bytes(b"b" * 20)
    (root / "c").mkdir()
    (root / "c" / "d").write_bytes(b"d" * 30)
    return root
