"""Equality checks and an assertion helper for tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ino.validate.base import Errors, Validator, _collect, _format_value


@dataclass(frozen=True)
class DeepEqualValidator(Validator[Any]):
    """Requires the value to equal ``expected``."""

    expected: Any

    def validate(self, actual: Any) -> Errors:
        if actual != self.expected:
            return Errors(
                [
                    f"value expected {_format_value(self.expected)} "
                    f"but got {_format_value(actual)}"
                ]
            )
        return Errors()


def deep_equal(expected: Any) -> DeepEqualValidator:
    """Return a validator comparing values with ``expected``."""
    return DeepEqualValidator(expected)


def must(value: Any, *validators: Validator[Any]) -> None:
    """Raise AssertionError with all messages if any validator rejects ``value``."""
    errors = Errors(_collect(validators, value))
    if errors:
        raise AssertionError(errors.message())