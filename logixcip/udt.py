"""Flattening of dataclass values into tag-name/value mappings for writing.

Fields of a multi-tag dataclass name their controller tag in the field
metadata under the key ``"tag"``, e.g. ``field(metadata={"tag": "TestDint"})``.
"""

from __future__ import annotations

import dataclasses
from typing import Any

_TAG_KEY = "tag"


def _require_dataclass(data: Any) -> None:
    if not dataclasses.is_dataclass(data) or isinstance(data, type):
        raise TypeError(f"expected a dataclass instance, got {type(data).__name__}")


def _flatten(name: str, value: Any, into: dict[str, Any]) -> None:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        into.update(udt_to_dict(name, value))
    elif isinstance(value, tuple):
        # Fixed-size arrays are not flattened.
        return
    else:
        into[name] = value


def multi_to_dict(data: Any) -> dict[str, Any]:
    """Map each field's tag name to its value, expanding nested structures."""
    _require_dataclass(data)
    result: dict[str, Any] = {}
    for fld in dataclasses.fields(data):
        tag = fld.metadata.get(_TAG_KEY, "")
        _flatten(tag, getattr(data, fld.name), result)
    return result


def udt_to_dict(tag: str, data: Any) -> dict[str, Any]:
    """Map "tag.FieldName" to each field's value, expanding nested structures."""
    _require_dataclass(data)
    result: dict[str, Any] = {}
    for fld in dataclasses.fields(data):
        _flatten(f"{tag}.{fld.name}", getattr(data, fld.name), result)
    return result