"""Validators for strings: pattern and length in characters."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Pattern, Union

from ino.validate.base import Errors, Validator


@dataclass(frozen=True)
class RegexValidator(Validator[str]):
    """Requires the pattern to match somewhere in the string."""

    pattern: Pattern[str]

    def validate(self, value: str) -> Errors:
        if self.pattern.search(value) is None:
            return Errors(["mismatch expected pattern"])
        return Errors()


@dataclass(frozen=True)
class RunesExactlyValidator(Validator[str]):
    """Requires exactly ``length`` characters."""

    length: int

    def validate(self, value: str) -> Errors:
        if len(value) != self.length:
            return Errors([f"must have exactly {self.length} characters"])
        return Errors()


@dataclass(frozen=True)
class MinRunesValidator(Validator[str]):
    """Requires at least ``minimum`` characters."""

    minimum: int

    def validate(self, value: str) -> Errors:
        if len(value) < self.minimum:
            return Errors([f"must have at least {self.minimum} characters"])
        return Errors()


@dataclass(frozen=True)
class MaxRunesValidator(Validator[str]):
    """Requires at most ``maximum`` characters."""

    maximum: int

    def validate(self, value: str) -> Errors:
        if len(value) > self.maximum:
            return Errors([f"must have at most {self.maximum} characters"])
        return Errors()


def regex(pattern: Union[str, Pattern[str], None]) -> RegexValidator:
    """Return a validator matching ``pattern``; raises ValueError for None."""
    if pattern is None:
        raise ValueError("regex is nil")
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return RegexValidator(pattern)


def runes_exactly(length: int) -> RunesExactlyValidator:
    """Return a validator for an exact character count."""
    return RunesExactlyValidator(length)


def min_runes(minimum: int) -> MinRunesValidator:
    """Return a validator for a minimum character count."""
    return MinRunesValidator(minimum)


def max_runes(maximum: int) -> MaxRunesValidator:
    """Return a validator for a maximum character count."""
    return MaxRunesValidator(maximum)