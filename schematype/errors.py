"""Error records and the sinks that collect them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .pointer import JsonPointer


@dataclass(frozen=True)
class ErrorRecord:
    """A single validation failure."""

    path: JsonPointer | str | None
    message: str
    code: str = "type"

    def __str__(self) -> str:
        if self.path is None:
            loc = "#"
        elif isinstance(self.path, JsonPointer):
            loc = self.path.property_path_string()
        else:
            loc = self.path
        return f"[{self.code}] {loc} - {self.message}"


class ErrorSink(Protocol):
    def add_error(self, record: ErrorRecord) -> None:
        ...


@dataclass
class ErrorCollector:
    """List-backed error sink."""

    errors: list[ErrorRecord] = field(default_factory=list)

    def add_error(self, record: ErrorRecord) -> None:
        self.errors.append(record)

    def is_valid(self) -> bool:
        return not self.errors

    def reset(self) -> None:
        self.errors.clear()

    def __len__(self) -> int:
        return len(self.errors)
