# Column type for the settings attributes and the mapping <-> json text conversion
import json
from collections.abc import Mapping
import modelsettings
from sqlalchemy.types import Text, TypeDecorator
from .errors import DecodeError
from typing import Any, Optional


def decode_mapping(raw: Any, strict: bool = False) -> dict:
    """
    Decode stored settings text
    :param raw: json text, bytes, a mapping or None
    :param strict: raise a DecodeError instead of returning an empty mapping
    :return: dict
    """
    if raw is None or raw == "" or raw == b"":
        return {}
    if isinstance(raw, Mapping):
        return dict(raw)
    try:
        result = json.loads(raw)
    except (TypeError, ValueError) as exc:
        error = DecodeError(exc, raw=raw)
    else:
        if isinstance(result, dict):
            return result
        if result is None:
            return {}
        error = DecodeError(f"not a json object: {type(result).__name__}", raw=raw)

    if strict:
        raise error
    modelsettings.log.warning(f"Invalid settings value {raw!r} ({error.message}), using an empty mapping")
    return {}


def encode_mapping(value: Any) -> Optional[str]:
    """
    Encode a mapping for storage, json text is passed through unchanged
    :return: json text or None
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return json.dumps(dict(value))


class JSONText(TypeDecorator):
    """
    DB type used to store settings mappings as json text,
    the loaded value is always a dict
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return encode_mapping(value)

    def process_result_value(self, value, dialect):
        return decode_mapping(value)
