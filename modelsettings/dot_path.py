"""
    dot_path: read and write nested mappings addressed by "dot paths", eg. "ui.theme.color"

    The functions operate on plain dicts and don't perform any I/O,
    the mapping passed to `set_path` and `delete_path` is modified in place and returned.
"""
from collections.abc import Mapping, MutableMapping
from typing import Any, Iterable, Optional

DELIMITER = "."


def _segments(path: str) -> list:
    return str(path).split(DELIMITER)


def to_mapping(value: Any) -> dict:
    """
    Coerce `value` to a dict
    :param value: None, a mapping or an iterable of key-value pairs
    :return: new dict
    """
    if value is None:
        return {}
    return dict(value)


def get_path(mapping: Optional[Mapping], path: Optional[str] = None, default: Any = None) -> Any:
    """
    Get a value from a nested mapping
    :param mapping: mapping to traverse
    :param path: dot path, if None the mapping itself is returned
    :param default: returned when the path doesn't resolve
    :return: value at the path
    """
    if not path:
        return mapping
    current = mapping
    for key in _segments(path):
        if isinstance(current, Mapping) and key in current:
            current = current[key]
        else:
            return default
    return current


def has_path(mapping: Optional[Mapping], path: Optional[str]) -> bool:
    """
    :return: True if every segment of the path exists, the value itself may be None
    """
    if not path or not isinstance(mapping, Mapping):
        return False
    current = mapping
    for key in _segments(path):
        if not isinstance(current, Mapping) or key not in current:
            return False
        current = current[key]
    return True


def set_path(mapping: Optional[MutableMapping], path: Optional[str], value: Any) -> dict:
    """
    Set a value in a nested mapping, missing intermediate mappings are created.
    Intermediate values that aren't mappings are overwritten.
    :param mapping: mapping to update
    :param path: dot path, if None the whole mapping is replaced by `value`
    :param value: new value
    :return: the updated mapping
    """
    if not path:
        return to_mapping(value)
    if mapping is None:
        mapping = {}
    keys = _segments(path)
    current = mapping
    for key in keys[:-1]:
        if not isinstance(current.get(key), MutableMapping):
            current[key] = {}
        current = current[key]
    current[keys[-1]] = value
    return mapping


def delete_path(mapping: Optional[MutableMapping], path: Optional[str]) -> dict:
    """
    Delete the key at the end of the path, nothing happens when the path doesn't resolve
    :return: the updated mapping
    """
    if mapping is None:
        return {}
    if not path:
        return mapping
    keys = _segments(path)
    current = mapping
    for key in keys[:-1]:
        if not isinstance(current.get(key), MutableMapping):
            return mapping
        current = current[key]
    current.pop(keys[-1], None)
    return mapping


def only(mapping: Optional[Mapping], keys: Iterable[str]) -> dict:
    """
    :param keys: top level keys to keep
    :return: new dict containing only `keys`
    """
    if not mapping:
        return {}
    keys = list(keys)
    return {k: v for k, v in mapping.items() if k in keys}
