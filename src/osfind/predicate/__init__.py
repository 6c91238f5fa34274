"""Predicate model for deciding whether a file's metadata matches the search."""

from .attribute_test import AttributeTest
from .base_predicate import BasePredicate, MatchAll
from .comparison import Comparison
from .filter_set import FILTER_KEYS, FilterSet
from .size_rules import parse_size_expression

__all__ = [
    "AttributeTest",
    "BasePredicate",
    "Comparison",
    "FILTER_KEYS",
    "FilterSet",
    "MatchAll",
    "parse_size_expression",
]
