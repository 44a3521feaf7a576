"""Reading and replacing values inside nested documents and arrays."""

from __future__ import annotations

import re
from typing import Any

from wiredoc.types import Array, Document

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


def _parse_index(part: str) -> int:
    if not _INDEX_RE.fullmatch(part):
        raise ValueError(f"invalid index: {part!r}")
    return int(part)


def get_by_path(comp: Document | Array, *path: str) -> Any:
    """Return the value found by a sequence of keys and indexes."""
    return comp.get_by_path(*path)


def set_by_path(comp: Document | Array, value: Any, *path: str) -> None:
    """Replace the value at an existing path with value."""
    if not path:
        raise ValueError("path is empty")

    current: Any = comp
    last = len(path) - 1
    for position, part in enumerate(path):
        if isinstance(current, Document):
            container, key = current, part
            current = container.get(key)
            if position == last:
                container.set(key, value)
        elif isinstance(current, Array):
            container, index = current, _parse_index(part)
            current = container.get(index)
            if position == last:
                container.set(index, value)
        else:
            raise TypeError(f"can't access {type(current).__name__} by path {part!r}")