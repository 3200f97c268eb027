"""Loading JSON scene documents and reading typed members from them."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, List, Optional

from ethrl.core.logger import log
from ethrl.maths.color import Color, Rect
from ethrl.maths.vector2 import Vector2

_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1


class JsonLoadError(Exception):
    """Raised when a JSON document cannot be opened or is not an object."""


class Serializable(ABC):
    """Something that configures itself from a parsed JSON object."""

    @abstractmethod
    def read(self, value: Mapping) -> Any:
        """Read this object's fields from ``value``."""


def load(filename: str) -> dict:
    """Parse ``filename`` and return its top-level JSON object."""
    try:
        with open(filename, encoding="utf-8") as stream:
            text = stream.read()
    except OSError as error:
        log("Error opening file %s.", filename)
        raise JsonLoadError(f"could not open {filename}") from error
    try:
        document = json.loads(text)
    except ValueError as error:
        log("JSON file cannot be read %s.", filename)
        raise JsonLoadError(f"invalid JSON in {filename}") from error
    if not isinstance(document, dict):
        log("JSON file cannot be read %s.", filename)
        raise JsonLoadError(f"{filename} does not hold a JSON object")
    return document


_MISSING = object()


def _member(value: Any, name: str) -> Any:
    if not isinstance(value, Mapping):
        return _MISSING
    return value.get(name, _MISSING)


def _is_int(item: Any) -> bool:
    return isinstance(item, int) and not isinstance(item, bool) and _INT_MIN <= item <= _INT_MAX


def _is_number(item: Any) -> bool:
    return isinstance(item, (int, float)) and not isinstance(item, bool)


def get_int(value: Mapping, name: str) -> Optional[int]:
    """The integer member ``name``, or None if absent or not an integer."""
    item = _member(value, name)
    if item is _MISSING:
        return None
    if not _is_int(item):
        log("Error reading json data %s", name)
        return None
    return item


def get_float(value: Mapping, name: str) -> Optional[float]:
    """The numeric member ``name`` as a float, or None if absent or not a number."""
    item = _member(value, name)
    if item is _MISSING:
        return None
    if not _is_number(item):
        log("Error reading json data %s", name)
        return None
    return float(item)


def get_bool(value: Mapping, name: str) -> Optional[bool]:
    item = _member(value, name)
    if item is _MISSING:
        return None
    if not isinstance(item, bool):
        log("Error reading json data %s", name)
        return None
    return item


def get_string(value: Mapping, name: str) -> Optional[str]:
    item = _member(value, name)
    if item is _MISSING:
        return None
    if not isinstance(item, str):
        log("Error reading json data %s", name)
        return None
    return item


def _array(value: Mapping, name: str, size: Optional[int] = None) -> Optional[list]:
    item = _member(value, name)
    if item is _MISSING:
        return None
    if not isinstance(item, list) or (size is not None and len(item) != size):
        log("error reading json data %s", name)
        return None
    return item


def get_vector2(value: Mapping, name: str) -> Optional[Vector2]:
    """A two-number array as a Vector2."""
    items = _array(value, name, 2)
    if items is None:
        return None
    if not all(_is_number(item) for item in items):
        log("error reading json data (not a float) %s", name)
        return None
    return Vector2(*items)


def get_color(value: Mapping, name: str) -> Optional[Color]:
    """A four-integer array ``[r, g, b, a]`` as a Color."""
    items = _array(value, name, 4)
    if items is None:
        return None
    if not all(_is_int(item) for item in items):
        log("error reading json data (not an int) %s", name)
        return None
    if not all(0 <= item <= 255 for item in items):
        log("error reading json data %s", name)
        return None
    return Color(*items)


def get_rect(value: Mapping, name: str) -> Optional[Rect]:
    """A four-integer array ``[x, y, w, h]`` as a Rect."""
    items = _array(value, name, 4)
    if items is None:
        return None
    if not all(_is_int(item) for item in items):
        log("error reading json data (not an int) %s", name)
        return None
    return Rect(*items)


def get_string_list(value: Mapping, name: str) -> Optional[List[str]]:
    items = _array(value, name)
    if items is None:
        return None
    if not all(isinstance(item, str) for item in items):
        log("error reading json data (not a string) %s", name)
        return None
    return list(items)


def get_int_list(value: Mapping, name: str) -> Optional[List[int]]:
    items = _array(value, name)
    if items is None:
        return None
    if not all(_is_int(item) for item in items):
        log("error reading json data (not an int) %s", name)
        return None
    return list(items)