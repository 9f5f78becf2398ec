"""Unit tests for template data structure helpers."""

import types

import pytest

from forge_ui.exceptions import TemplateHelperException
from forge_ui.helpers.structures import contain, iter_list, make_dict, merge_dict


def test_make_dict_pairs():
    assert make_dict("a", 1, "b", 2) == {"a": 1, "b": 2}


def test_make_dict_odd_arguments():
    with pytest.raises(TemplateHelperException, match="invalid dict call"):
        make_dict("a", 1, "b")


def test_make_dict_non_string_key():
    with pytest.raises(TemplateHelperException, match="dict keys must be strings"):
        make_dict(1, "a")


def test_merge_dict_pairs_and_maps():
    """Test maps are merged and later entries win."""
    assert merge_dict({"a": 1, "b": 2}, "b", 3, "c", 4) == {"a": 1, "b": 3, "c": 4}


def test_merge_dict_errors():
    with pytest.raises(TemplateHelperException, match="invalid dict call"):
        merge_dict()
    with pytest.raises(TemplateHelperException, match="specify the key for non array values"):
        merge_dict("dangling")
    with pytest.raises(TemplateHelperException, match="dict values must be maps"):
        merge_dict(42)


def test_merge_dict_error_is_client_error():
    with pytest.raises(TemplateHelperException) as exc_info:
        merge_dict(42)
    assert exc_info.value.status_code == 400


def test_iter_list_is_lazy_and_ordered():
    result = iter_list([3, 1, 2])
    assert isinstance(result, types.GeneratorType)
    assert list(result) == [3, 1, 2]


def test_iter_list_none():
    assert list(iter_list(None)) == []


def test_contain():
    assert contain([1, 2, 3], 2) is True
    assert contain([], 2) is False
