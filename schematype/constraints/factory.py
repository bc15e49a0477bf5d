from __future__ import annotations

from ..errors import ErrorSink
from .base import Constraint
from .type_check import StrictTypeCheck, TypeCheck
from .type_constraint import TypeConstraint


class UnknownConstraintError(KeyError):
    pass


CONSTRAINTS: dict[str, type[Constraint]] = {
    "type": TypeConstraint,
}


class Factory:
    """Builds fresh constraint instances sharing one structural classification strategy."""

    def __init__(self, type_check: TypeCheck | None = None):
        self.type_check: TypeCheck = type_check if type_check is not None else StrictTypeCheck()

    def create_instance_for(self, name: str, sink: ErrorSink | None = None) -> Constraint:
        """
        Create a constraint by keyword name.

        Each instance reports to ``sink``, or to its own collector if none is given.

        Raises:
            UnknownConstraintError: If no constraint is registered under ``name``
        """
        cls = CONSTRAINTS.get(name)
        if cls is None:
            raise UnknownConstraintError(f"Unknown constraint: {name!r} (available: {', '.join(CONSTRAINTS)})")
        return cls(self, sink)
