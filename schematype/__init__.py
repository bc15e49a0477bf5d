"""schematype - the JSON Schema ``type`` keyword."""

from .constraints import Factory, TypeConstraint, UnknownTypeAtomError
from .errors import ErrorCollector, ErrorRecord
from .pointer import JsonPointer

__version__ = "0.1.0"

__all__ = [
    "ErrorCollector",
    "ErrorRecord",
    "Factory",
    "JsonPointer",
    "TypeConstraint",
    "UnknownTypeAtomError",
    "__version__",
]
