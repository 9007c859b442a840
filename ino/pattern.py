"""Route templates compiled into regular expressions with named parameters."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Optional

WILDCARD = "*"


class PatternError(ValueError):
    """Raised when a route template cannot be compiled."""


@dataclass(frozen=True)
class RoutePattern:
    """A compiled route template.

    ``original`` is the template as given, ``regex`` the compiled expression,
    ``param_names`` the parameter names in order of appearance and ``depth``
    the number of slashes in the template.
    """

    original: str
    regex: re.Pattern
    param_names: list[str] = field(default_factory=list)
    depth: int = 0

    def match(self, path: str) -> Optional[dict[str, str]]:
        """Return the parameters captured from ``path``, or None if it does not match.

        Both ``/path`` and ``/path/`` are accepted. The wildcard parameter
        never keeps a trailing slash.
        """
        found = self.regex.fullmatch(path)
        if found is None:
            return None
        groups = found.groups("")
        params: dict[str, str] = {}
        for name, value in zip(self.param_names, groups):
            if name == WILDCARD and value.endswith("/"):
                value = value[:-1]
            params[name] = value
        return params


def _find_placeholders(template: str) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` spans of balanced ``{...}`` placeholders."""
    depth = 0
    start = -1
    for index, char in enumerate(template):
        if char == "{":
            if depth == 0:
                start = index
            depth += 1
        elif char == "}" and depth > 0:
            depth -= 1
            if depth == 0 and start >= 0:
                yield start, index + 1
                start = -1


def parse_route_pattern(pattern: str) -> RoutePattern:
    """Compile a route template such as ``/posts/{year:\\d{4}}/{slug}``.

    Text outside placeholders is matched literally. A placeholder is
    ``{name}`` or ``{name:regex}``; ``{*}`` matches anything including
    slashes. A trailing slash in the template is ignored and an optional
    trailing slash is always accepted when matching.
    """
    if not pattern:
        raise PatternError("pattern cannot be empty")

    normalized = pattern[:-1] if pattern.endswith("/") else pattern

    param_names: list[str] = []
    pieces: list[str] = []
    last = 0

    for start, end in _find_placeholders(normalized):
        if start > last:
            pieces.append(re.escape(normalized[last:start]))
        name, sep, custom = normalized[start + 1 : end - 1].partition(":")
        name = name.strip()
        if not name:
            raise PatternError("parameter name cannot be empty")
        if name in param_names:
            raise PatternError(f"duplicate parameter name: {name}")
        param_names.append(name)

        if sep:
            expression = custom
        elif name == WILDCARD:
            # Non-greedy so an optional trailing slash is not swallowed.
            expression = ".*?"
        else:
            expression = "[^/]+"
        pieces.append(f"({expression})")
        last = end

    if last < len(normalized):
        pieces.append(re.escape(normalized[last:]))

    expression = "".join(pieces)
    if not expression.startswith("^"):
        expression = "^" + expression
    expression += "/?$"

    try:
        compiled = re.compile(expression)
    except re.error as exc:
        raise PatternError(f"failed to compile regex pattern: {exc}") from exc

    return RoutePattern(
        original=pattern,
        regex=compiled,
        param_names=param_names,
        depth=pattern.count("/"),
    )