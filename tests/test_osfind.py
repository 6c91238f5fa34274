"""Unit tests for the find() entry point."""

import pytest

from osfind.exceptions import InvalidFilterValueError, UnknownFilterError
from osfind.osfind import find
from osfind.predicate.attribute_test import AttributeTest
from osfind.predicate.filter_set import FilterSet
from osfind.walker.error_action import ErrorAction


def test_find_without_filters(sample_tree):
    results = find(sample_tree, sort_entries=True)
    assert results == [str(sample_tree / "a"), str(sample_tree / "b"), str(sample_tree / "c" / "d")]


def test_find_with_mapping(sample_tree):
    assert find(sample_tree, {"size": "+15"}, sort_entries=True) == [
        str(sample_tree / "b"),
        str(sample_tree / "c" / "d"),
    ]
    assert find(sample_tree, {"name": "a"}) == [str(sample_tree / "a")]


def test_find_with_predicate(sample_tree):
    predicate = FilterSet(size=AttributeTest("size", 20))
    assert find(sample_tree, predicate) == [str(sample_tree / "b")]


def test_find_with_invalid_size_lists_everything(sample_tree, capsys):
    results = find(sample_tree, {"size": "*1024"})
    assert len(results) == 3
    assert "ignoring size filter" in capsys.readouterr().err


def test_find_rejects_bad_configuration(sample_tree):
    with pytest.raises(UnknownFilterError):
        find(sample_tree, {"mtime": "+1"})
    with pytest.raises(InvalidFilterValueError):
        find(sample_tree, {"inum": "-1"})


def test_find_error_action(tmp_path):
    assert find(tmp_path / "missing", error_action=ErrorAction.IGNORE) == []
    with pytest.raises(FileNotFoundError):
        find(tmp_path / "missing", error_action="raise")
