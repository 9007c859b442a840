"""Conditional validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ino.validate.base import Errors, Validator, _collect


@dataclass(frozen=True)
class WhenValidator(Validator[Any]):
    """Runs ``validators`` only when ``condition`` holds for the value."""

    condition: Callable[[Any], bool]
    validators: tuple[Validator[Any], ...] = ()

    def validate(self, value: Any) -> Errors:
        if self.condition(value):
            return Errors(_collect(self.validators, value))
        return Errors()


def when(condition: Callable[[Any], bool], *validators: Validator[Any]) -> WhenValidator:
    """Return a validator active only when ``condition(value)`` is true."""
    return WhenValidator(condition, tuple(validators))


def when_not_none(*validators: Validator[Any]) -> WhenValidator:
    """Return a validator that skips None values."""
    return WhenValidator(lambda value: value is not None, tuple(validators))