"""
The ``type`` keyword.

Checks a value against a single type name, a union of names and
sub-schemas, or an inline sub-schema, and words the failure message.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Iterable, Mapping, Sequence

from ..errors import ErrorCollector
from .base import Constraint, Location
from .wording import WORDINGS, TypeAtom, lookup_wording


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationOutcome:
    is_valid: bool
    wordings: tuple[str, ...] = ()


def runtime_kind(value: Any) -> str:
    """Low-level kind name of a decoded value (``double`` for floats, ``NULL`` for None)."""
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, (numbers.Real, Decimal)):
        return "double"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    return "object"


def label_for(value: Any) -> str:
    # Upper-case the first letter of each word, leave the rest alone
    return " ".join(word[:1].upper() + word[1:] for word in runtime_kind(value).split(" "))


def implode_with(elements: Iterable[str], delimiter: str = ", ", list_end: str | None = None) -> str:
    """
    Join phrases, using ``list_end`` between the last two.

    >>> implode_with(["a number", "a string", "a boolean"], ", ", "or")
    'a number, a string or a boolean'
    """
    items = list(elements)
    if list_end is None or len(items) < 2:
        return delimiter.join(items)
    return f"{delimiter.join(items[:-1])} {list_end} {items[-1]}"


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, (bool, complex))


_VALIDATORS: dict[TypeAtom, Callable[[TypeConstraint, Any], bool]] = {
    TypeAtom.INTEGER: lambda c, v: type(v) is int,
    TypeAtom.NUMBER: lambda c, v: _is_number(v),
    TypeAtom.BOOLEAN: lambda c, v: isinstance(v, bool),
    TypeAtom.OBJECT: lambda c, v: c.type_check.is_object(v),
    TypeAtom.ARRAY: lambda c, v: c.type_check.is_array(v),
    TypeAtom.STRING: lambda c, v: isinstance(v, str),
    TypeAtom.EMAIL: lambda c, v: isinstance(v, str),
    TypeAtom.NULL: lambda c, v: v is None,
    TypeAtom.ANY: lambda c, v: True,
}

if set(_VALIDATORS) != set(TypeAtom):
    raise RuntimeError("Type validators do not cover the TypeAtom vocabulary")


class TypeConstraint(Constraint):
    code = "type"

    def check(self, value: Any, schema: Mapping[str, Any] | None = None, path: Location = None) -> None:
        declared = schema.get("type") if schema else None
        if declared is None:
            return

        if isinstance(declared, Mapping):
            # The nested validator reports into our sink
            logger.debug("Delegating inline type schema at %s", path)
            self.factory.create_instance_for("type", sink=self.sink).check(value, declared, path)
            return

        if isinstance(declared, (list, tuple)):
            outcome = self.validate_types_array(value, declared, path)
        elif self.validate_type(value, declared):
            outcome = ValidationOutcome(is_valid=True)
        else:
            outcome = ValidationOutcome(is_valid=False, wordings=(lookup_wording(declared),))

        if outcome.is_valid:
            return

        self.add_error(
            path,
            f"{label_for(value)} value found, but {implode_with(outcome.wordings, ', ', 'or')} is required",
        )

    def validate_types_array(self, value: Any, members: Sequence[Any], path: Location = None) -> ValidationOutcome:
        """
        Evaluate a union of type names and sub-schemas.

        Testing stops at the first match, but every type name still
        contributes its wording. A sub-schema contributes "an object" only
        while no member has matched yet.
        """
        is_valid = False
        wordings: list[str] = []

        for member in members:
            if isinstance(member, Mapping):
                if not is_valid:
                    nested = ErrorCollector()
                    self.factory.create_instance_for("type", sink=nested).check(value, {"type": member}, path)
                    is_valid = nested.is_valid()
                    wordings.append(WORDINGS[TypeAtom.OBJECT])
                continue

            phrase = lookup_wording(member)
            if phrase is not None:
                wordings.append(phrase)
            if not is_valid:
                is_valid = self.validate_type(value, member)
                if is_valid:
                    logger.debug("Union member %r matched at %s", member, path)

        return ValidationOutcome(is_valid=is_valid, wordings=tuple(wordings))

    def validate_type(self, value: Any, name: Any) -> bool:
        """
        Check ``value`` against one type name.

        Raises:
            UnknownTypeAtomError: If the name is not in the vocabulary
        """
        atom = TypeAtom.parse(name)
        if atom is None:
            return True
        return _VALIDATORS[atom](self, value)
