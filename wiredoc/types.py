"""BSON value types: documents, arrays and scalar wrappers.

Supported values are:

* ``Document`` and ``Array`` (composite types);
* ``float``, ``str``, ``CString``, ``Binary``, ``ObjectID``, ``bool``,
  ``datetime.datetime``, ``Null``, ``Regex``, ``Int32``, ``Timestamp``
  and ``Int64`` (scalar types).

Plain ``int`` is rejected because its BSON width would be ambiguous.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator

MAX_DOCUMENT_LEN = 16777216

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class BinarySubtype(enum.IntEnum):
    """Subtype byte of a BSON binary value."""

    GENERIC = 0x00
    FUNCTION = 0x01
    GENERIC_OLD = 0x02
    UUID_OLD = 0x03
    UUID = 0x04
    MD5 = 0x05
    ENCRYPTED = 0x06
    USER = 0x80

    def __str__(self) -> str:
        return self.name.lower().replace("_", "-")


@dataclass(frozen=True)
class Binary:
    """BSON binary data with its subtype."""

    subtype: BinarySubtype
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "subtype", BinarySubtype(self.subtype))
        object.__setattr__(self, "data", bytes(self.data))


class ObjectID(bytes):
    """BSON ObjectId: exactly twelve bytes."""

    def __new__(cls, value: bytes | bytearray | list[int]) -> "ObjectID":
        raw = bytes(value)
        if len(raw) != 12:
            raise ValueError(f"ObjectID must be 12 bytes long, got {len(raw)}")
        return super().__new__(cls, raw)

    def __repr__(self) -> str:
        return f"ObjectID({self.hex()!r})"


@dataclass(frozen=True)
class Regex:
    """BSON regular expression: pattern and option letters."""

    pattern: str
    options: str = ""


class _BoundedInt(int):
    _min = 0
    _max = 0

    def __new__(cls, value: int = 0) -> "_BoundedInt":
        number = int(value)
        if not cls._min <= number <= cls._max:
            raise ValueError(f"{cls.__name__} value {number} is out of range [{cls._min}, {cls._max}]")
        return super().__new__(cls, number)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class Int32(_BoundedInt):
    """BSON 32-bit signed integer."""

    _min = -(2**31)
    _max = 2**31 - 1


class Int64(_BoundedInt):
    """BSON 64-bit signed integer."""

    _min = -(2**63)
    _max = 2**63 - 1


class Timestamp(_BoundedInt):
    """BSON timestamp: unsigned 64-bit value."""

    _min = 0
    _max = 2**64 - 1


class CString(str):
    """BSON zero-terminated UTF-8 string, as used for field names."""

    def __repr__(self) -> str:
        return f"CString({str.__repr__(self)})"


class NullType:
    """BSON null; use the ``Null`` singleton."""

    _instance: "NullType | None" = None

    def __new__(cls) -> "NullType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False


Null = NullType()

_SCALAR_TYPES = (
    float,
    str,
    Binary,
    ObjectID,
    bool,
    datetime,
    NullType,
    Regex,
    Int32,
    Timestamp,
    Int64,
)


def validate_value(value: Any) -> None:
    """Raise TypeError or ValueError if value is not a valid BSON value."""
    if isinstance(value, Document):
        value.validate()
        return
    if isinstance(value, Array):
        return
    if isinstance(value, _SCALAR_TYPES):
        return
    raise TypeError(f"unsupported type: {type(value).__name__} ({value!r})")


def _is_valid_key(key: str) -> bool:
    if not key:
        return False
    # keys like "$k" are reserved, but longer ones such as "$db" are allowed
    if key[0] == "$" and len(key) <= 2:
        return False
    try:
        key.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class Array:
    """BSON array."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *values: Any) -> None:
        for i, value in enumerate(values):
            try:
                validate_value(value)
            except (TypeError, ValueError) as err:
                raise type(err)(f"index {i}: {err}") from err
        self._items: list[Any] = list(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Array({', '.join(map(repr, self._items))})"

    def _check_index(self, index: int) -> None:
        size = len(self._items)
        if index < 0 or index >= size:
            raise IndexError(f"index {index} is out of bounds [0-{size})")

    def get(self, index: int) -> Any:
        """Return the value at index."""
        self._check_index(index)
        return self._items[index]

    def get_by_path(self, *path: str) -> Any:
        """Return a value by a sequence of indexes and keys."""
        return get_by_path(self, *path)

    def subslice(self, low: int, high: int) -> "Array":
        """Return a new array with the elements in [low, high)."""
        size = len(self._items)
        if low < 0 or low > size:
            raise IndexError(f"low index {low} is out of bounds [0-{size})")
        if high < 0 or high > size:
            raise IndexError(f"high index {high} is out of bounds [0-{size})")
        if high < low:
            raise IndexError(f"high index {high} is less low index {low}")
        return Array(*self._items[low:high])

    def set(self, index: int, value: Any) -> None:
        """Replace the value at index."""
        self._check_index(index)
        validate_value(value)
        self._items[index] = value

    def append(self, *values: Any) -> None:
        """Append values; nothing is appended if any value is invalid."""
        for value in values:
            validate_value(value)
        self._items.extend(values)


class Document:
    """BSON document: ordered fields with unique names."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *pairs: Any) -> None:
        if len(pairs) % 2 != 0:
            raise ValueError(f"invalid number of arguments: {len(pairs)}")
        self._values: dict[str, Any] = {}
        for key, value in zip(pairs[::2], pairs[1::2]):
            if not isinstance(key, str):
                raise TypeError(f"invalid key type: {type(key).__name__}")
            self._add(key, value)

    def _add(self, key: str, value: Any) -> None:
        if key in self._values:
            raise ValueError(f"key already present: {key!r}")
        if not _is_valid_key(key):
            raise ValueError(f"invalid key: {key!r}")
        validate_value(value)
        self._values[key] = value

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return list(self._values.items()) == list(other._values.items())

    def __repr__(self) -> str:
        fields = ", ".join(f"{k!r}, {v!r}" for k, v in self._values.items())
        return f"Document({fields})"

    def validate(self) -> None:
        """Raise if any key or value of the document is invalid."""
        for key, value in self._values.items():
            if not isinstance(key, str) or not _is_valid_key(key):
                raise ValueError(f"invalid key: {key!r}")
            validate_value(value)

    def keys(self) -> list[str]:
        """Return field names in order."""
        return list(self._values)

    def as_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the fields as a dict."""
        return dict(self._values)

    def command(self) -> str:
        """Return the first field name in lower case."""
        if not self._values:
            raise ValueError("document is empty")
        return next(iter(self._values)).lower()

    def get(self, key: str) -> Any:
        """Return the value of key."""
        try:
            return self._values[key]
        except KeyError:
            raise KeyError(f"key not found: {key!r}") from None

    def get_by_path(self, *path: str) -> Any:
        """Return a value by a sequence of indexes and keys."""
        return get_by_path(self, *path)

    def set(self, key: str, value: Any) -> None:
        """Set key to value, appending it if it is new."""
        if not _is_valid_key(key):
            raise ValueError(f"invalid key: {key!r}")
        validate_value(value)
        self._values[key] = value

    def remove(self, key: str) -> None:
        """Remove key; do nothing if it is absent."""
        self._values.pop(key, None)


def get_by_path(comp: Document | Array, *path: str) -> Any:
    """Walk a document or array by keys and decimal indexes."""
    current: Any = comp
    for part in path:
        if isinstance(current, Document):
            current = current.get(part)
        elif isinstance(current, Array):
            if not _INDEX_RE.fullmatch(part):
                raise ValueError(f"invalid index: {part!r}")
            current = current.get(int(part))
        else:
            raise TypeError(f"can't access {type(current).__name__} by path {part!r}")
    return current