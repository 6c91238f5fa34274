"""Unit tests for the Comparison enum."""

import pytest

from osfind.predicate.comparison import Comparison


def test_comparison_values():
    """Test that each comparison is keyed by its size-expression operator."""
    assert Comparison("=") is Comparison.EQUAL
    assert Comparison("-") is Comparison.LESS
    assert Comparison("+") is Comparison.GREATER

    with pytest.raises(ValueError):
        Comparison("*")


@pytest.mark.parametrize(
    "comparison, actual, target, expected",
    [
        (Comparison.EQUAL, 1024, 1024, True),
        (Comparison.EQUAL, 1023, 1024, False),
        (Comparison.LESS, 1023, 1024, True),
        (Comparison.LESS, 1024, 1024, False),
        (Comparison.GREATER, 1025, 1024, True),
        (Comparison.GREATER, 1024, 1024, False),
    ],
)
def test_compare_is_strict(comparison, actual, target, expected):
    """Test that less-than and greater-than exclude the target itself."""
    assert comparison.compare(actual, target) is expected


def test_compare_strings():
    """Test that equality works for names as well as numbers."""
    assert Comparison.EQUAL.compare("a", "a")
    assert not Comparison.EQUAL.compare("a", "a.txt")
