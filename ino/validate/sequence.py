"""Validators for sequences and their elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from ino.validate.base import Errors, Validator, _collect


@dataclass(frozen=True)
class EachValidator(Validator[Sequence[Any]]):
    """Validates every element, stopping after the first element with errors."""

    validators: tuple[Validator[Any], ...] = ()

    def validate(self, items: Sequence[Any]) -> Errors:
        errors = Errors()
        for index, item in enumerate(items):
            errors.extend(
                f"> [{index}]: {err}" for err in _collect(self.validators, item)
            )
            if errors:
                break
        return errors


@dataclass(frozen=True)
class MinCountValidator(Validator[Sequence[Any]]):
    """Requires at least ``min_length`` elements."""

    min_length: int

    def validate(self, items: Sequence[Any]) -> Errors:
        if len(items) < self.min_length:
            return Errors(
                [f"count must be greater than or equal to {self.min_length}"]
            )
        return Errors()


@dataclass(frozen=True)
class MaxCountValidator(Validator[Sequence[Any]]):
    """Requires at most ``max_length`` elements."""

    max_length: int

    def validate(self, items: Sequence[Any]) -> Errors:
        if len(items) > self.max_length:
            return Errors([f"count must be less than or equal to {self.max_length}"])
        return Errors()


def each(*validators: Validator[Any]) -> EachValidator:
    """Return a validator applying ``validators`` to each element."""
    return EachValidator(tuple(validators))


def min_count(min_length: int) -> MinCountValidator:
    """Return a validator for a minimum number of elements."""
    return MinCountValidator(min_length)


def max_count(max_length: int) -> MaxCountValidator:
    """Return a validator for a maximum number of elements."""
    return MaxCountValidator(max_length)