"""The JSON value tree: a tagged value holding null, booleans, numbers,
strings, arrays and objects, with explicit capacity bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class JsonType(IntEnum):
    """The kind of a JSON value."""

    NULL = 0
    FALSE = 1
    TRUE = 2
    NUMBER = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


@dataclass
class _Member:
    key: str
    value: "JsonValue" = field(default_factory=lambda: JsonValue())


class JsonValue:
    """A mutable JSON value; starts out as null."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._type = JsonType.NULL
        self._data: Any = None
        self._capacity = 0

    def __repr__(self) -> str:
        if self._type in (JsonType.NULL, JsonType.TRUE, JsonType.FALSE):
            return f"JsonValue({self._type.name})"
        if self._type is JsonType.OBJECT:
            inner = ", ".join(f"{m.key!r}: {m.value!r}" for m in self._data)
            return f"JsonValue(OBJECT, {{{inner}}})"
        return f"JsonValue({self._type.name}, {self._data!r})"

    # -- helpers -----------------------------------------------------------

    def _require(self, *types: JsonType) -> None:
        if self._type not in types:
            expected = " or ".join(t.name for t in types)
            raise TypeError(f"expected {expected} value, got {self._type.name}")

    def _reset(self, kind: JsonType, data: Any = None, capacity: int = 0) -> None:
        self._type = kind
        self._data = data
        self._capacity = capacity

    def _state(self) -> tuple[JsonType, Any, int]:
        return self._type, self._data, self._capacity

    def _grow_if_full(self) -> None:
        if len(self._data) == self._capacity:
            self._capacity = 1 if self._capacity == 0 else self._capacity * 2

    @staticmethod
    def _check_capacity(capacity: int) -> int:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        return capacity

    # -- scalars -----------------------------------------------------------

    @property
    def type(self) -> JsonType:
        return self._type

    def set_null(self) -> None:
        self._reset(JsonType.NULL)

    @property
    def boolean(self) -> bool:
        self._require(JsonType.TRUE, JsonType.FALSE)
        return self._type is JsonType.TRUE

    @boolean.setter
    def boolean(self, flag: bool) -> None:
        self._reset(JsonType.TRUE if flag else JsonType.FALSE)

    @property
    def number(self) -> float:
        self._require(JsonType.NUMBER)
        return self._data

    @number.setter
    def number(self, n: float) -> None:
        self._reset(JsonType.NUMBER, float(n))

    @property
    def string(self) -> str:
        self._require(JsonType.STRING)
        return self._data

    @string.setter
    def string(self, s: str) -> None:
        if not isinstance(s, str):
            raise TypeError("string value must be a str")
        self._reset(JsonType.STRING, s)

    # -- sequence-like access ------------------------------------------------

    def __len__(self) -> int:
        self._require(JsonType.ARRAY, JsonType.OBJECT, JsonType.STRING)
        return len(self._data)

    def __getitem__(self, index: int | str) -> JsonValue:
        if self._type is JsonType.OBJECT and isinstance(index, str):
            found = self.find(index)
            if found is None:
                raise KeyError(index)
            return found
        self._require(JsonType.ARRAY)
        if not 0 <= index < len(self._data):
            raise IndexError("array index out of range")
        return self._data[index]

    # -- arrays --------------------------------------------------------------

    def set_array(self, capacity: int = 0) -> None:
        self._reset(JsonType.ARRAY, [], self._check_capacity(capacity))

    @property
    def array_capacity(self) -> int:
        self._require(JsonType.ARRAY)
        return self._capacity

    def reserve_array(self, capacity: int) -> None:
        self._require(JsonType.ARRAY)
        self._capacity = max(self._capacity, capacity)

    def shrink_array(self) -> None:
        self._require(JsonType.ARRAY)
        self._capacity = min(self._capacity, len(self._data))

    def clear_array(self) -> None:
        self._require(JsonType.ARRAY)
        self._data.clear()

    def push_back(self) -> JsonValue:
        """Append a null element and return it."""
        self._require(JsonType.ARRAY)
        self._grow_if_full()
        element = JsonValue()
        self._data.append(element)
        return element

    def pop_back(self) -> None:
        self._require(JsonType.ARRAY)
        if not self._data:
            raise IndexError("pop from empty array")
        self._data.pop()

    def insert(self, index: int) -> JsonValue:
        """Insert a null element before ``index`` and return it."""
        self._require(JsonType.ARRAY)
        if not 0 <= index <= len(self._data):
            raise IndexError("insert index out of range")
        self._grow_if_full()
        element = JsonValue()
        self._data.insert(index, element)
        return element

    def erase(self, index: int, count: int = 1) -> None:
        self._require(JsonType.ARRAY)
        if index < 0 or count < 0 or index + count > len(self._data):
            raise IndexError("erase range out of bounds")
        del self._data[index:index + count]

    # -- objects -------------------------------------------------------------

    def set_object(self, capacity: int = 0) -> None:
        self._reset(JsonType.OBJECT, [], self._check_capacity(capacity))

    @property
    def object_capacity(self) -> int:
        self._require(JsonType.OBJECT)
        return self._capacity

    def reserve_object(self, capacity: int) -> None:
        self._require(JsonType.OBJECT)
        self._capacity = max(self._capacity, capacity)

    def shrink_object(self) -> None:
        self._require(JsonType.OBJECT)
        self._capacity = min(self._capacity, len(self._data))

    def clear_object(self) -> None:
        self._require(JsonType.OBJECT)
        self._data.clear()

    def _member(self, index: int) -> _Member:
        self._require(JsonType.OBJECT)
        if not 0 <= index < len(self._data):
            raise IndexError("member index out of range")
        return self._data[index]

    def key_at(self, index: int) -> str:
        return self._member(index).key

    def value_at(self, index: int) -> JsonValue:
        return self._member(index).value

    def find_index(self, key: str) -> int | None:
        """Return the position of ``key``, or None when absent."""
        self._require(JsonType.OBJECT)
        return next(
            (i for i, member in enumerate(self._data) if member.key == key), None
        )

    def find(self, key: str) -> JsonValue | None:
        index = self.find_index(key)
        return None if index is None else self._data[index].value

    def set_member(self, key: str) -> JsonValue:
        """Return the value stored under ``key``, adding a null one if absent."""
        existing = self.find(key)
        if existing is not None:
            return existing
        self._grow_if_full()
        member = _Member(key)
        self._data.append(member)
        return member.value

    def remove_member(self, index: int) -> None:
        self._member(index)
        del self._data[index]

    # -- whole-value operations ------------------------------------------------

    def copy(self) -> JsonValue:
        """Return a deep copy of this value."""
        duplicate = JsonValue()
        if self._type is JsonType.ARRAY:
            duplicate._reset(
                JsonType.ARRAY, [e.copy() for e in self._data], len(self._data)
            )
        elif self._type is JsonType.OBJECT:
            duplicate._reset(
                JsonType.OBJECT,
                [_Member(m.key, m.value.copy()) for m in self._data],
                len(self._data),
            )
        else:
            duplicate._reset(self._type, self._data)
        return duplicate

    def move_from(self, other: JsonValue) -> None:
        """Take over the contents of ``other``, leaving it null."""
        if other is self:
            raise ValueError("cannot move a value into itself")
        self._reset(*other._state())
        other.set_null()

    def swap(self, other: JsonValue) -> None:
        if other is self:
            return
        mine, theirs = self._state(), other._state()
        self._reset(*theirs)
        other._reset(*mine)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        if self._type is not other._type:
            return False
        if self._type is JsonType.ARRAY:
            return len(self._data) == len(other._data) and all(
                a == b for a, b in zip(self._data, other._data)
            )
        if self._type is JsonType.OBJECT:
            if len(self._data) != len(other._data):
                return False
            for member in self._data:
                match = other.find(member.key)
                if match is None or not member.value == match:
                    return False
            return True
        return self._data == other._data