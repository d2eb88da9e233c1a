import pytest

from modelsettings.dot_path import delete_path, get_path, has_path, only, set_path, to_mapping


@pytest.mark.parametrize("path", ["missing", "a.missing", "a.b.c.d", "scalar.x"])
def test_get_missing_path_returns_default(path: str) -> None:
    mapping = {"a": {"b": {"c": 1}}, "scalar": 5}
    assert get_path(mapping, path, "default") == "default"


def test_get_without_path_returns_mapping() -> None:
    mapping = {"a": 1}
    assert get_path(mapping, None) is mapping
    assert get_path(mapping, "") is mapping


def test_get_nested_value() -> None:
    mapping = {"ui": {"theme": "light", "sizes": [1, 2]}}
    assert get_path(mapping, "ui.theme") == "light"
    assert get_path(mapping, "ui.sizes") == [1, 2]
    assert get_path(mapping, "ui") == {"theme": "light", "sizes": [1, 2]}


def test_set_then_get() -> None:
    mapping = set_path({}, "a.b.c", 42)
    assert mapping == {"a": {"b": {"c": 42}}}
    assert get_path(mapping, "a.b.c") == 42


def test_set_keeps_siblings() -> None:
    mapping = set_path({"a": {"x": 1}, "b": 2}, "a.y", 3)
    assert mapping == {"a": {"x": 1, "y": 3}, "b": 2}


def test_set_overwrites_scalar_intermediate() -> None:
    mapping = set_path({"a": "scalar"}, "a.b", 1)
    assert mapping == {"a": {"b": 1}}


def test_set_without_path_replaces_root() -> None:
    assert set_path({"a": 1}, None, {"b": 2}) == {"b": 2}
    assert set_path({"a": 1}, None, None) == {}


def test_has_counts_none_values() -> None:
    mapping = {"a": {"b": None}}
    assert has_path(mapping, "a.b") is True
    assert has_path(mapping, "a") is True
    assert has_path(mapping, "a.c") is False
    assert has_path(mapping, "a.b.c") is False
    assert has_path(mapping, None) is False


def test_delete_removes_path() -> None:
    mapping = delete_path(set_path({}, "a.b", 1), "a.b")
    assert has_path(mapping, "a.b") is False
    assert mapping == {"a": {}}


def test_delete_missing_intermediate_is_noop() -> None:
    mapping = {"a": {"b": 1}}
    assert delete_path(mapping, "x.y.z") == {"a": {"b": 1}}
    assert delete_path(mapping, "a.b.c") == {"a": {"b": 1}}


def test_only_keeps_listed_top_level_keys() -> None:
    assert only({"a": 1, "b": 2, "c": 3}, ["a", "b"]) == {"a": 1, "b": 2}
    assert only(None, ["a"]) == {}


def test_to_mapping() -> None:
    assert to_mapping(None) == {}
    assert to_mapping([("a", 1)]) == {"a": 1}
    source = {"a": 1}
    assert to_mapping(source) == source
    assert to_mapping(source) is not source
