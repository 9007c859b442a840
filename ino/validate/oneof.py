"""Membership in a fixed set of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ino.validate.base import Errors, Validator, _format_value


@dataclass(frozen=True)
class OneOfValidator(Validator[Any]):
    """Requires the value to be one of ``values``."""

    values: frozenset
    description: str

    def validate(self, value: Any) -> Errors:
        if value not in self.values:
            return Errors([f"must be in {self.description}"])
        return Errors()


def one_of(*values: Any) -> OneOfValidator:
    """Return a validator accepting only the given values."""
    description = ", ".join(_format_value(v) for v in values)
    return OneOfValidator(frozenset(values), description)