"""Validation of a single field of an object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ino.validate.base import Errors, FieldDescriptor, Validator, _collect


@dataclass(frozen=True)
class FieldValidator(Validator[Any]):
    """Reads a field from its parent and validates it, prefixing messages."""

    descriptor: FieldDescriptor
    validators: tuple[Validator[Any], ...] = ()

    def validate(self, parent: Any) -> Errors:
        name = self.descriptor.name
        value = self.descriptor.get_value(parent)
        return Errors(f"> '{name}': {err}" for err in _collect(self.validators, value))


def field(descriptor: FieldDescriptor, *validators: Validator[Any]) -> FieldValidator:
    """Return a validator for the field described by ``descriptor``."""
    return FieldValidator(descriptor, tuple(validators))