from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Protocol

from ..errors import ErrorCollector, ErrorRecord, ErrorSink
from ..pointer import JsonPointer
from .type_check import TypeCheck


Location = JsonPointer | str | None


class ValidatorFactory(Protocol):
    type_check: TypeCheck

    def create_instance_for(self, name: str, sink: ErrorSink | None = None) -> Constraint:
        ...


class Constraint(ABC):
    """
    Base class for a single schema keyword check.

    Failures go to ``sink``; a constraint keeps no state between checks.
    """

    code = ""

    def __init__(self, factory: ValidatorFactory, sink: ErrorSink | None = None):
        self.factory = factory
        self.sink: ErrorSink = sink if sink is not None else ErrorCollector()

    @property
    def type_check(self) -> TypeCheck:
        return self.factory.type_check

    def add_error(self, path: Location, message: str, code: str | None = None) -> None:
        self.sink.add_error(ErrorRecord(path=path, message=message, code=code or self.code))

    @abstractmethod
    def check(self, value: Any, schema: Mapping[str, Any] | None = None, path: Location = None) -> None:
        ...
