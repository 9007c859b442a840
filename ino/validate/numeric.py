"""Lower and upper bounds for numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ino.validate.base import Errors, Validator, _format_value


@dataclass(frozen=True)
class MinValidator(Validator[Any]):
    """Requires the value to be at least ``limit``."""

    limit: Any

    def validate(self, value: Any) -> Errors:
        if value < self.limit:
            return Errors(
                [f"must be greater than or equal to {_format_value(self.limit)}"]
            )
        return Errors()


@dataclass(frozen=True)
class MaxValidator(Validator[Any]):
    """Requires the value to be at most ``limit``."""

    limit: Any

    def validate(self, value: Any) -> Errors:
        if value > self.limit:
            return Errors([f"must be less than or equal to {_format_value(self.limit)}"])
        return Errors()


def min_value(limit: Any) -> MinValidator:
    """Return a validator that rejects values below ``limit``."""
    return MinValidator(limit)


def max_value(limit: Any) -> MaxValidator:
    """Return a validator that rejects values above ``limit``."""
    return MaxValidator(limit)