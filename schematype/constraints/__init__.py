"""Schema keyword constraints (the ``type`` keyword and its collaborators)."""

from .factory import Factory, UnknownConstraintError
from .type_check import LooseTypeCheck, StrictTypeCheck, TypeCheck
from .type_constraint import TypeConstraint, ValidationOutcome, implode_with
from .wording import WORDINGS, TypeAtom, UnknownTypeAtomError, lookup_wording

__all__ = [
    "Factory",
    "LooseTypeCheck",
    "StrictTypeCheck",
    "TypeAtom",
    "TypeCheck",
    "TypeConstraint",
    "UnknownConstraintError",
    "UnknownTypeAtomError",
    "ValidationOutcome",
    "WORDINGS",
    "implode_with",
    "lookup_wording",
]
