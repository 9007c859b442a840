"""Core validation types: error lists, validators and field descriptors."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
S = TypeVar("S")
F = TypeVar("F")


class Errors(list):
    """A list of validation messages; an empty list means the value is valid."""

    def is_valid(self) -> bool:
        """Return True when there are no messages."""
        return not self

    def message(self) -> str:
        """Return all messages joined by newlines."""
        return "\n".join(self)

    def __str__(self) -> str:
        return self.message()


class Validator(ABC, Generic[T]):
    """Something that checks a value and reports problems as messages."""

    @abstractmethod
    def validate(self, value: T) -> Errors:
        """Return the problems found in ``value``; empty when valid."""


@dataclass(frozen=True)
class FuncValidator(Validator[T]):
    """Adapts a plain callable into a validator.

    The callable may return any iterable of messages, or None when valid.
    """

    func: Callable[[T], Optional[Iterable[str]]]

    def validate(self, value: T) -> Errors:
        return Errors(self.func(value) or ())


@dataclass(frozen=True)
class FieldDescriptor(Generic[S, F]):
    """Names a field of an object and knows how to read it.

    Without a getter the value is read as the attribute called ``name``.
    """

    name: str
    getter: Optional[Callable[[S], F]] = None

    def get_value(self, obj: S) -> F:
        if self.getter is None:
            return getattr(obj, self.name)
        return self.getter(obj)


def _collect(validators: Iterable[Validator[Any]], value: Any) -> Iterator[str]:
    """Yield every message produced by ``validators`` for ``value``."""
    for validator in validators:
        yield from validator.validate(value)


def _format_value(value: Any) -> str:
    """Render a value the way messages show it."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    if isinstance(value, dict):
        inner = " ".join(
            f"{_format_value(k)}:{_format_value(v)}" for k, v in value.items()
        )
        return f"map[{inner}]"
    return str(value)