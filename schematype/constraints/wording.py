"""
Type atom vocabulary and the wording catalog.

The catalog maps each type atom to the phrase used in failure messages
("an integer", "a string", ...). It is built once at import and exposed
read-only.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class UnknownTypeAtomError(ValueError):
    """A type name outside the vocabulary was used as a constraint."""


class TypeAtom(Enum):
    """Primitive type names accepted in a schema's ``type`` field."""

    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    EMAIL = "email"  # legacy alias of string
    NULL = "null"
    ANY = "any"

    @classmethod
    def parse(cls, name: Any) -> TypeAtom | None:
        """
        Resolve a declared type name.

        Falsy names mean "no constraint" and resolve to None.

        Raises:
            UnknownTypeAtomError: If the name is not in the vocabulary
        """
        if not name:
            return None
        if isinstance(name, str):
            try:
                return cls(name)
            except ValueError:
                pass
        raise UnknownTypeAtomError(f"{name!r} is an invalid type atom used as constraint")


# ============================================================================
# WORDING CATALOG
# ============================================================================

WORDINGS: Mapping[TypeAtom, str | None] = MappingProxyType(
    {
        TypeAtom.INTEGER: "an integer",
        TypeAtom.NUMBER: "a number",
        TypeAtom.BOOLEAN: "a boolean",
        TypeAtom.OBJECT: "an object",
        TypeAtom.ARRAY: "an array",
        TypeAtom.STRING: "a string",
        TypeAtom.EMAIL: "a string",
        TypeAtom.NULL: "a null",
        # 'any' never fails, so it is never rendered
        TypeAtom.ANY: None,
    }
)


def _check_catalog() -> None:
    missing = [atom.value for atom in TypeAtom if atom not in WORDINGS]
    if missing:
        raise RuntimeError(f"Wording catalog is missing entries for: {', '.join(missing)}")


_check_catalog()


def lookup_wording(name: Any) -> str | None:
    """
    Return the failure-message phrase for a declared type name.

    Unset names and 'any' have no phrase and return None.

    Raises:
        UnknownTypeAtomError: If the name is not in the vocabulary
    """
    try:
        atom = TypeAtom.parse(name)
    except UnknownTypeAtomError:
        raise UnknownTypeAtomError(
            f"no wording available for type atom {name!r}; "
            f"known atoms: {', '.join(known.value for known in TypeAtom)}"
        ) from None
    if atom is None:
        return None
    return WORDINGS[atom]
