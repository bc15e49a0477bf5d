"""
Structural classification strategies.

Decides what counts as a JSON object or array. The strategy is chosen once
when the factory is configured.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any, Protocol


class TypeCheck(Protocol):
    def is_object(self, value: Any) -> bool:
        ...

    def is_array(self, value: Any) -> bool:
        ...


class StrictTypeCheck:
    """Only decoded JSON shapes: dict is an object, list is an array."""

    def is_object(self, value: Any) -> bool:
        return isinstance(value, dict)

    def is_array(self, value: Any) -> bool:
        return isinstance(value, list)


class LooseTypeCheck:
    """
    Accept legacy representations.

    Any mapping or attribute bag is an object; tuples count as arrays.
    """

    def is_object(self, value: Any) -> bool:
        return isinstance(value, (Mapping, SimpleNamespace))

    def is_array(self, value: Any) -> bool:
        return isinstance(value, (list, tuple))


TYPE_CHECKS: dict[str, type[StrictTypeCheck] | type[LooseTypeCheck]] = {
    "strict": StrictTypeCheck,
    "loose": LooseTypeCheck,
}
