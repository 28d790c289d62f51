r"""Base class and JSON conversion helpers for the payload records.

Records are plain dataclasses. Field names are snake_case in Python and
camelCase on the wire. Unset (``None``) fields are never emitted.
"""

from __future__ import annotations

__all__ = ["EmptyResponse", "JsonModel", "from_json_value", "to_camel_case", "to_json_value"]

import dataclasses
import functools
import types
from enum import Enum
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints

T = TypeVar("T", bound="JsonModel")


def to_camel_case(name: str) -> str:
    """Convert a snake_case field name to its camelCase wire name.

    Example:
        ```pycon
        >>> from allscreenshots.models.base import to_camel_case
        >>> to_camel_case("block_cookie_banners")
        'blockCookieBanners'
        >>> to_camel_case("url")
        'url'

        ```
    """
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def to_json_value(value: Any) -> Any:
    """Convert a value to a JSON-compatible value.

    Records are converted with ``to_dict``, enums to their value, and
    lists/dicts recursively. Other values are returned unchanged.
    """
    if isinstance(value, JsonModel):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    if isinstance(value, dict):
        return {key: to_json_value(item) for key, item in value.items()}
    return value


def from_json_value(tp: Any, value: Any) -> Any:
    """Convert a decoded JSON value to the given type.

    Args:
        tp: The target type. Supported: ``JsonModel`` subclasses, enums,
            ``list[...]``, ``dict[str, ...]``, optional types, ``Any``,
            and the JSON primitives. ``None`` returns the value as is.
        value: The decoded JSON value.

    Returns:
        The converted value.

    Raises:
        TypeError: If the value does not have the expected shape.
        ValueError: If the value is not a valid enum member.
    """
    if tp is None or tp is Any or value is None:
        return value
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        return from_json_value(args[0] if len(args) == 1 else Any, value)
    if origin is list:
        if not isinstance(value, list):
            msg = f"expected a list, got {type(value).__name__}"
            raise TypeError(msg)
        (item_type,) = get_args(tp) or (Any,)
        return [from_json_value(item_type, item) for item in value]
    if origin is dict:
        if not isinstance(value, dict):
            msg = f"expected an object, got {type(value).__name__}"
            raise TypeError(msg)
        _, item_type = get_args(tp) or (str, Any)
        return {key: from_json_value(item_type, item) for key, item in value.items()}
    if isinstance(tp, type):
        if issubclass(tp, JsonModel):
            return tp.from_dict(value)
        if issubclass(tp, Enum):
            return tp(value)
        if tp is float and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        if not isinstance(value, tp):
            msg = f"expected {tp.__name__}, got {type(value).__name__}"
            raise TypeError(msg)
    return value


@functools.cache
def _resolve_fields(cls: type) -> tuple[tuple[str, str, Any], ...]:
    hints = get_type_hints(cls)
    return tuple(
        (f.name, to_camel_case(f.name), hints[f.name])
        for f in dataclasses.fields(cls)
        if f.init
    )


class JsonModel:
    """Mixin for dataclass records exchanged with the service.

    Example:
        ```pycon
        >>> from allscreenshots.models import ScreenshotRequest, ViewportConfig
        >>> request = ScreenshotRequest(
        ...     url="https://example.com", viewport=ViewportConfig(width=1280), full_page=True
        ... )
        >>> request.to_dict()
        {'url': 'https://example.com', 'viewport': {'width': 1280}, 'fullPage': True}
        >>> ScreenshotRequest.from_dict(request.to_dict()) == request
        True

        ```
    """

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for this record, omitting unset
        fields."""
        data = {}
        for name, wire_name, _ in _resolve_fields(type(self)):
            value = getattr(self, name)
            if value is not None:
                data[wire_name] = to_json_value(value)
        return data

    @classmethod
    def from_dict(cls: type[T], data: dict[str, Any]) -> T:
        """Create a record from a decoded JSON object.

        Unknown keys are ignored and missing optional keys stay ``None``.

        Raises:
            TypeError: If ``data`` is not an object, a required key is
                missing, or a value has the wrong shape.
            ValueError: If a value is not a valid enum member.
        """
        if not isinstance(data, dict):
            msg = f"expected an object for {cls.__name__}, got {type(data).__name__}"
            raise TypeError(msg)
        kwargs = {
            name: from_json_value(tp, data[wire_name])
            for name, wire_name, tp in _resolve_fields(cls)
            if wire_name in data
        }
        return cls(**kwargs)


@dataclasses.dataclass(frozen=True)
class EmptyResponse(JsonModel):
    """Marker returned when a successful response has no content."""
