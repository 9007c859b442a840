"""Mapping of column names to dataclass fields."""

from __future__ import annotations

import dataclasses
import threading
from types import MappingProxyType
from typing import Any, Mapping

TAG = "ino"
EMBEDDED = "ino_embedded"

_cache: dict[type, Mapping[str, tuple[str, ...]]] = {}
_lock = threading.Lock()


def _is_struct(cls: Any) -> bool:
    return isinstance(cls, type) and dataclasses.is_dataclass(cls)


def _embedded_type(f: dataclasses.Field) -> type | None:
    """Return the dataclass type held by an embedded field, if it can be found.

    The type is taken from the ``ino_embedded`` metadata when it is a
    dataclass, else from the field's annotation, its default factory or
    its default value.
    """
    marker = f.metadata.get(EMBEDDED)
    if _is_struct(marker):
        return marker
    if _is_struct(f.type):
        return f.type
    if _is_struct(f.default_factory):
        return f.default_factory
    default = f.default
    if dataclasses.is_dataclass(default) and not isinstance(default, type):
        return type(default)
    return None


def parse_struct_mapping(cls: type) -> dict[str, tuple[str, ...]]:
    """Return a map from column name to the attribute path that holds it.

    A field's column name is its ``ino`` metadata entry or else its name.
    Fields named ``-`` in metadata and fields starting with an underscore
    are skipped. A field marked with ``ino_embedded`` metadata whose type is
    a dataclass contributes the columns of that dataclass.
    """
    mapping: dict[str, tuple[str, ...]] = {}
    for f in dataclasses.fields(cls):
        name = f.metadata.get(TAG) or f.name
        embedded = bool(f.metadata.get(EMBEDDED))
        if name == "-" or (f.name.startswith("_") and not embedded):
            continue
        if embedded:
            inner = _embedded_type(f)
            if inner is not None:
                for key, path in parse_struct_mapping(inner).items():
                    mapping[key] = (f.name, *path)
        else:
            mapping[name] = (f.name,)
    return mapping


def get_struct_mapping(cls: type) -> Mapping[str, tuple[str, ...]]:
    """Return the cached, read-only column mapping of dataclass ``cls``.

    Raises TypeError when ``cls`` is not a dataclass.
    """
    if not _is_struct(cls):
        raise TypeError(f"mapper: expects type {cls!r} to be struct")
    with _lock:
        mapping = _cache.get(cls)
        if mapping is None:
            mapping = MappingProxyType(parse_struct_mapping(cls))
            _cache[cls] = mapping
    return mapping