"""Aggregate validation of an object through several validators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ino.validate.base import Errors, Validator, _collect


@dataclass(frozen=True)
class StructValidator(Validator[Any]):
    """Runs every validator on the same object and gathers all messages."""

    validators: tuple[Validator[Any], ...] = ()

    def validate(self, value: Any) -> Errors:
        return Errors(_collect(self.validators, value))


def struct(*validators: Validator[Any]) -> StructValidator:
    """Return a validator combining ``validators`` for one object."""
    return StructValidator(tuple(validators))