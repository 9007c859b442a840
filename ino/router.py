"""Grouping of routes with shared prefixes and attributes."""

from __future__ import annotations

from typing import Any, Iterable

from ino.route import Route, handle


class StackRoutes(list):
    """A list of routes that can be nested in other groups."""


def routes(*options: Any) -> StackRoutes:
    """Group routes; any option that is not a route or group becomes an attribute.

    Group attributes are appended to each route's own attributes.
    """
    return _make_routes("", options)


def prefix_routes(prefix: str, *options: Any) -> StackRoutes:
    """Group routes under a common path prefix.

    Raises ValueError when the prefix is shorter than two characters or
    does not start with '/'.
    """
    if len(prefix) < 2:
        raise ValueError("router prefix must have at least two characters")
    if not prefix.startswith("/"):
        raise ValueError(f"router prefix must starts with '/': {prefix}")
    return _make_routes(prefix, options)


def _make_routes(prefix: str, options: Iterable[Any]) -> StackRoutes:
    collected: list[Route] = []
    attrs: list[Any] = []
    for option in options:
        if isinstance(option, Route):
            collected.append(option)
        elif isinstance(option, StackRoutes):
            collected.extend(option)
        else:
            attrs.append(option)

    return StackRoutes(
        handle(
            item.method,
            prefix + item.pattern,
            item.handler,
            *item.attrs,
            *attrs,
        )
        for item in collected
    )