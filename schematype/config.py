from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from .constraints.factory import Factory
from .constraints.type_check import TYPE_CHECKS


TypeCheckMode = Literal["strict", "loose"]


@dataclass(frozen=True)
class ValidatorConfig:
    type_check: TypeCheckMode = "strict"

    def build_factory(self) -> Factory:
        return Factory(TYPE_CHECKS[self.type_check]())


def _coerce_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def parse_config(data: dict[str, Any]) -> ValidatorConfig:
    section = _coerce_dict(data.get("validator"))

    mode = str(section.get("type_check", "strict")).strip().lower() or "strict"
    if mode not in TYPE_CHECKS:
        raise ValueError(f"type_check must be one of: {', '.join(TYPE_CHECKS)} (got {mode!r})")

    return ValidatorConfig(type_check=mode)  # type: ignore[arg-type]


def load_config(path: Path) -> ValidatorConfig:
    """
    Load validator settings from TOML.

    Only the ``[validator]`` table is read; a missing table means defaults.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the TOML is malformed or a setting is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Failed to parse config TOML: {e}") from e

    return parse_config(data)
