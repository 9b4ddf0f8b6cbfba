"""
Tagged-union representation of parsed JSON values.

Each JsonValue carries a ValueKind tag and exactly one meaningful payload;
accessors check the tag before handing the payload out.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any
from typing import TypeAlias

from ._object_map import ObjectMap

Payload: TypeAlias = ObjectMap | list["JsonValue"] | bytes | float | bool | None

# Native Python rendition of a tree
PythonValue: TypeAlias = (
    str
    | float
    | bool
    | None
    | dict[str, "PythonValue"]
    | list["PythonValue"]
)


class ValueKind(Enum):
    """Tag selecting which payload of a JsonValue is meaningful."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="surrogateescape")


_PAYLOAD_TYPES: dict[ValueKind, type | tuple[type, ...]] = {
    ValueKind.OBJECT: ObjectMap,
    ValueKind.ARRAY: list,
    ValueKind.STRING: bytes,
    ValueKind.NUMBER: float,
    ValueKind.BOOLEAN: bool,
    ValueKind.NULL: type(None),
}


@dataclass(slots=True)
class JsonValue:
    """
    One parsed JSON datum and its tag.

    Equality is structural: objects compare by key set and per-key value
    regardless of member order, arrays element by element.
    """

    kind: ValueKind
    payload: Payload = None

    def __post_init__(self) -> None:
        expected = _PAYLOAD_TYPES[self.kind]
        if not isinstance(self.payload, expected):
            raise TypeError(
                f"{self.kind.value} value cannot hold "
                f"{type(self.payload).__name__}"
            )

    @classmethod
    def of_object(cls, members: ObjectMap) -> JsonValue:
        return cls(ValueKind.OBJECT, members)

    @classmethod
    def of_array(cls, items: list[JsonValue]) -> JsonValue:
        return cls(ValueKind.ARRAY, items)

    @classmethod
    def of_string(cls, data: bytes) -> JsonValue:
        return cls(ValueKind.STRING, data)

    @classmethod
    def of_number(cls, number: float) -> JsonValue:
        return cls(ValueKind.NUMBER, float(number))

    @classmethod
    def of_boolean(cls, flag: bool) -> JsonValue:
        return cls(ValueKind.BOOLEAN, flag)

    @classmethod
    def null(cls) -> JsonValue:
        return cls(ValueKind.NULL, None)

    def _expect(self, kind: ValueKind) -> None:
        if self.kind is not kind:
            raise TypeError(
                f"value is {self.kind.value}, not {kind.value}"
            )

    def as_object(self) -> ObjectMap:
        self._expect(ValueKind.OBJECT)
        assert isinstance(self.payload, ObjectMap)
        return self.payload

    def as_array(self) -> list[JsonValue]:
        self._expect(ValueKind.ARRAY)
        assert isinstance(self.payload, list)
        return self.payload

    def as_bytes(self) -> bytes:
        self._expect(ValueKind.STRING)
        assert isinstance(self.payload, bytes)
        return self.payload

    def as_str(self) -> str:
        """String payload decoded as UTF-8; undecodable bytes round-trip."""
        return _decode(self.as_bytes())

    def as_number(self) -> float:
        self._expect(ValueKind.NUMBER)
        assert isinstance(self.payload, float)
        return self.payload

    def as_bool(self) -> bool:
        self._expect(ValueKind.BOOLEAN)
        assert isinstance(self.payload, bool)
        return self.payload

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def __getitem__(self, key: bytes | str | int) -> JsonValue:
        """Indexes into an object by key or into an array by position."""
        if self.kind is ValueKind.ARRAY:
            if not isinstance(key, int):
                raise TypeError("array indices must be integers")
            return self.as_array()[key]
        if isinstance(key, str):
            key = key.encode("utf-8", errors="surrogateescape")
        if not isinstance(key, bytes):
            raise TypeError("object keys must be bytes or str")
        return self.as_object()[key]

    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        if self.kind is ValueKind.ARRAY:
            return len(self.as_array())
        return len(self.as_object())

    def to_python(self) -> PythonValue:
        """Converts the tree to native dicts, lists, strs and floats."""
        match self.kind:
            case ValueKind.OBJECT:
                return {
                    _decode(key): value.to_python()
                    for key, value in self.as_object()
                }
            case ValueKind.ARRAY:
                return [item.to_python() for item in self.as_array()]
            case ValueKind.STRING:
                return self.as_str()
            case _:
                return self.payload  # type: ignore[return-value]

    def release(self) -> None:
        """
        Tears down an arena-less tree node by node.

        Trees owned by an arena are released with the arena instead.
        """
        if self.kind is ValueKind.OBJECT:
            self.as_object().delete()
        elif self.kind is ValueKind.ARRAY:
            items = self.as_array()
            for item in items:
                item.release()
            items.clear()


_CONTROL_LIMIT = 0x20
_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape_text(text: str) -> bytes:
    """Encodes native text as the undecoded source form a parse would hold."""
    result = []
    for char in text:
        if char in _SHORT_ESCAPES:
            result.append(_SHORT_ESCAPES[char])
        elif ord(char) < _CONTROL_LIMIT:
            result.append(f"\\u{ord(char):04x}")
        else:
            result.append(char)
    return "".join(result).encode("utf-8", errors="surrogateescape")


def from_python(obj: Any) -> JsonValue:
    """
    Builds a heap-owned tree from native Python data.

    `str` values and keys are escaped into source form so the tree prints
    as valid JSON; `bytes` are taken as source form already.
    """
    if obj is None:
        return JsonValue.null()
    if isinstance(obj, bool):
        return JsonValue.of_boolean(obj)
    if isinstance(obj, int | float):
        return JsonValue.of_number(float(obj))
    if isinstance(obj, str):
        return JsonValue.of_string(_escape_text(obj))
    if isinstance(obj, bytes):
        return JsonValue.of_string(obj)
    if isinstance(obj, dict):
        members = ObjectMap()
        for key, value in obj.items():
            if isinstance(key, str):
                key = _escape_text(key)
            if not isinstance(key, bytes):
                msg = f"keys must be str or bytes, not {type(key).__name__}"
                raise TypeError(msg)
            members.insert(key, from_python(value))
        return JsonValue.of_object(members)
    if isinstance(obj, list | tuple):
        return JsonValue.of_array([from_python(item) for item in obj])

    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)
