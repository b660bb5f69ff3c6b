"""JSON round-tripping of plain data and simple objects."""

from __future__ import annotations

import json
from typing import Any, TypeVar

__all__ = ["ParseError", "deserialize", "serialize"]

T = TypeVar("T")

# Malformed text surfaces as the json module's own error, unmodified.
ParseError = json.JSONDecodeError


def _encode_object(obj: Any) -> Any:
    """Encode non-JSON objects from their instance attributes."""
    try:
        return vars(obj)
    except TypeError:
        raise TypeError(
            f"Object of type {type(obj).__name__} is not JSON serializable"
        ) from None


def serialize(value: Any, indent: int | None = None) -> str:
    """Return the JSON text for *value*.

    Keys keep insertion order and non-ASCII text is written as-is. The
    default output is compact (``{"width":10,"height":20}``); pass
    *indent* for pretty-printed output.
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        value,
        indent=indent,
        separators=separators,
        ensure_ascii=False,
        default=_encode_object,
    )


def deserialize(shape: type[T] | T, text: str) -> T:
    """Parse *text* and overlay its fields onto a fresh instance of *shape*.

    *shape* is a class (or an instance, whose class is used). The
    instance is created without calling ``__init__``, so it gets its
    methods from the class and its data only from *text*. Fields are set
    with ``object.__setattr__`` so frozen dataclasses work too.

    ``dict`` and ``list`` shapes (and their subclasses) are built directly
    from the parsed value of the matching type.

    Raises ParseError for malformed JSON. Raises TypeError when the parsed
    value does not fit *shape*, or when instances of *shape* cannot take
    arbitrary attributes (``object``, ``__slots__`` classes and most
    builtins).
    """
    cls = shape if isinstance(shape, type) else type(shape)
    data = json.loads(text)
    for container in (dict, list):
        if issubclass(cls, container) and isinstance(data, container):
            return cls(data)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    instance = cls.__new__(cls)
    if not hasattr(instance, "__dict__"):
        raise TypeError(f"Cannot set JSON fields on {cls.__name__} instances")
    for key, value in data.items():
        object.__setattr__(instance, key, value)
    return instance
