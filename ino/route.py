"""Route definitions: an HTTP method, a path template, a handler and attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

METHODS = frozenset(
    {"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "CONNECT", "OPTIONS", "TRACE"}
)


@dataclass(frozen=True)
class Route:
    """A single route. ``attrs`` holds arbitrary extra values attached to it."""

    method: str
    pattern: str
    handler: Callable[..., Any]
    attrs: tuple[Any, ...] = ()


def is_valid_method(method: str) -> bool:
    """Return True if ``method`` is a standard HTTP method name."""
    return method in METHODS


def handle(method: str, pattern: str, handler: Callable[..., Any], *attrs: Any) -> Route:
    """Create a route, checking the pattern, the method and the handler.

    Raises ValueError when the pattern is empty or does not start with '/',
    when the method is unknown, or when the handler is None.
    """
    if not pattern:
        raise ValueError("route pattern must have at least one character")
    if not pattern.startswith("/"):
        raise ValueError(f"route pattern must starts with '/': {pattern}")
    if not is_valid_method(method):
        raise ValueError(f"invalid http method: {method}")
    if handler is None:
        raise ValueError(f"nil handler: {pattern}")
    return Route(method, pattern, handler, tuple(attrs))


def get(pattern: str, handler: Callable[..., Any], *attrs: Any) -> Route:
    """Create a GET route."""
    return handle("GET", pattern, handler, *attrs)


def post(pattern: str, handler: Callable[..., Any], *attrs: Any) -> Route:
    """Create a POST route."""
    return handle("POST", pattern, handler, *attrs)


def put(pattern: str, handler: Callable[..., Any], *attrs: Any) -> Route:
    """Create a PUT route."""
    return handle("PUT", pattern, handler, *attrs)


def delete(pattern: str, handler: Callable[..., Any], *attrs: Any) -> Route:
    """Create a DELETE route."""
    return handle("DELETE", pattern, handler, *attrs)


def options(pattern: str, handler: Callable[..., Any], *attrs: Any) -> Route:
    """Create an OPTIONS route."""
    return handle("OPTIONS", pattern, handler, *attrs)


def head(pattern: str, handler: Callable[..., Any], *attrs: Any) -> Route:
    """Create a HEAD route."""
    return handle("HEAD", pattern, handler, *attrs)


def connect(pattern: str, handler: Callable[..., Any], *attrs: Any) -> Route:
    """Create a CONNECT route."""
    return handle("CONNECT", pattern, handler, *attrs)


def patch(pattern: str, handler: Callable[..., Any], *attrs: Any) -> Route:
    """Create a PATCH route."""
    return handle("PATCH", pattern, handler, *attrs)


def trace(pattern: str, handler: Callable[..., Any], *attrs: Any) -> Route:
    """Create a TRACE route."""
    return handle("TRACE", pattern, handler, *attrs)