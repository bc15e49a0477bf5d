"""JSON pointer locating a value inside the validated document."""

from __future__ import annotations

from dataclasses import dataclass


def _escape(segment: str) -> str:
    return segment.replace("~", "~0").replace("/", "~1")


def _unescape(segment: str) -> str:
    return segment.replace("~1", "/").replace("~0", "~")


@dataclass(frozen=True)
class JsonPointer:
    """A document filename plus the property path within it."""

    filename: str = ""
    property_paths: tuple[str, ...] = ()

    @classmethod
    def parse(cls, value: str) -> JsonPointer:
        """
        Parse ``file.json#/a/b`` (the filename part is optional).

        Raises:
            ValueError: If the fragment does not start with '/'
        """
        filename, _, fragment = value.partition("#")
        if not fragment:
            return cls(filename=filename)
        if not fragment.startswith("/"):
            raise ValueError(f"Invalid JSON pointer fragment: {fragment!r}")
        segments = tuple(_unescape(s) for s in fragment[1:].split("/"))
        return cls(filename=filename, property_paths=segments)

    def with_property_path(self, *segments: str | int) -> JsonPointer:
        return JsonPointer(
            filename=self.filename,
            property_paths=self.property_paths + tuple(str(s) for s in segments),
        )

    def property_path_string(self) -> str:
        if not self.property_paths:
            return "#"
        return "#/" + "/".join(_escape(s) for s in self.property_paths)

    def __str__(self) -> str:
        return f"{self.filename}{self.property_path_string()}"
