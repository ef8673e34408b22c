"""Small object helpers: a rectangle value and JSON (de)serialization."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, TypeVar

__all__ = ["Rectangle", "from_json", "to_json"]

T = TypeVar("T")


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Dataclass instances are encoded as their field mappings. Sequence order
    is kept as given.
    """
    return json.dumps(obj, default=_default, separators=(",", ":"))


def from_json(cls: type[T], text: str) -> T:
    """Parse *text* and give the resulting mapping the behaviour of *cls*.

    The instance is created without calling ``cls.__init__``; the parsed keys
    become its attributes, so methods of *cls* operate on the loaded data.

    Raises:
        json.JSONDecodeError: *text* is not valid JSON.
        ValueError: the top-level JSON value is not an object.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    instance = cls.__new__(cls)
    # object.__setattr__ also works on frozen dataclasses
    for key, value in data.items():
        object.__setattr__(instance, key, value)
    return instance
