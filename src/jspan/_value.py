"""
Immutable tagged value tree produced by the parser.
"""

from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from jspan import ParseConfig

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ValueKind(Enum):
    """Variant tag of a JsonValue."""

    NULL = "null"
    BOOL = "bool"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True, slots=True)
class JsonValue:
    """
    A decoded JSON value.

    ``payload`` holds the variant data: ``None`` for null, ``bool``, ``int``
    (signed 64-bit range), ``float``, ``str``, a tuple of values for arrays
    and a read-only mapping of values for objects. Build instances with the
    factory classmethods rather than the constructor.
    """

    kind: ValueKind
    payload: Any = None

    @classmethod
    def null(cls) -> "JsonValue":
        return _NULL

    @classmethod
    def boolean(cls, value: bool) -> "JsonValue":
        return _TRUE if value else _FALSE

    @classmethod
    def integer(cls, value: int) -> "JsonValue":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, not {type(value).__name__}")
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"integer {value} is out of 64-bit range")
        return cls(ValueKind.INTEGER, value)

    @classmethod
    def float_(cls, value: float) -> "JsonValue":
        return cls(ValueKind.FLOAT, float(value))

    @classmethod
    def string(cls, value: str) -> "JsonValue":
        return cls(ValueKind.STRING, value)

    @classmethod
    def array(cls, items: Iterable["JsonValue"]) -> "JsonValue":
        return cls(ValueKind.ARRAY, tuple(items))

    @classmethod
    def object(cls, fields: Mapping[str, "JsonValue"]) -> "JsonValue":
        return cls(ValueKind.OBJECT, MappingProxyType(dict(fields)))

    @classmethod
    def from_python(cls, obj: Any) -> "JsonValue":  # noqa: PLR0911
        """
        Builds a value tree from native Python data.

        Accepts None, bool, int, float, str, lists/tuples and dicts with
        string keys, recursively.
        """
        if obj is None:
            return cls.null()
        elif isinstance(obj, JsonValue):
            return obj
        elif isinstance(obj, bool):
            return cls.boolean(obj)
        elif isinstance(obj, int):
            return cls.integer(obj)
        elif isinstance(obj, float):
            return cls.float_(obj)
        elif isinstance(obj, str):
            return cls.string(obj)
        elif isinstance(obj, list | tuple):
            return cls.array(cls.from_python(item) for item in obj)
        elif isinstance(obj, Mapping):
            fields = {}
            for key, value in obj.items():
                if not isinstance(key, str):
                    msg = f"keys must be str, not {type(key).__name__}"
                    raise TypeError(msg)
                fields[key] = cls.from_python(value)
            return cls.object(fields)
        else:
            msg = f"Object of type {type(obj).__name__} is not a JSON value"
            raise TypeError(msg)

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def as_bool(self) -> bool | None:
        return self.payload if self.kind is ValueKind.BOOL else None

    def as_integer(self) -> int | None:
        return self.payload if self.kind is ValueKind.INTEGER else None

    def as_float(self) -> float | None:
        return self.payload if self.kind is ValueKind.FLOAT else None

    def as_string(self) -> str | None:
        return self.payload if self.kind is ValueKind.STRING else None

    def as_array(self) -> tuple["JsonValue", ...] | None:
        return self.payload if self.kind is ValueKind.ARRAY else None

    def as_object(self) -> Mapping[str, "JsonValue"] | None:
        return self.payload if self.kind is ValueKind.OBJECT else None

    def to_python(self, config: "ParseConfig | None" = None) -> Any:
        """
        Converts the tree into plain Python objects.

        Hooks from ``config`` are applied the way ``json.loads`` applies
        them: number hooks receive the decimal text, object hooks receive the
        converted members.
        """
        if self.kind is ValueKind.INTEGER:
            if config is not None and config.parse_int:
                return config.parse_int(str(self.payload))
            return self.payload
        elif self.kind is ValueKind.FLOAT:
            if config is not None and config.parse_float:
                return config.parse_float(_float_text(self.payload))
            return self.payload
        elif self.kind is ValueKind.ARRAY:
            return [item.to_python(config) for item in self.payload]
        elif self.kind is ValueKind.OBJECT:
            pairs = [
                (key, value.to_python(config))
                for key, value in self.payload.items()
            ]
            return _apply_object_hooks(pairs, config)
        return self.payload

    def __repr__(self) -> str:
        if self.kind is ValueKind.NULL:
            return "JsonValue.null()"
        if self.kind is ValueKind.OBJECT:
            return f"JsonValue.object({dict(self.payload)!r})"
        if self.kind is ValueKind.ARRAY:
            return f"JsonValue.array({list(self.payload)!r})"
        return f"JsonValue.{_FACTORY_NAMES[self.kind]}({self.payload!r})"


_NULL = JsonValue(ValueKind.NULL)
_TRUE = JsonValue(ValueKind.BOOL, True)
_FALSE = JsonValue(ValueKind.BOOL, False)

_FACTORY_NAMES = {
    ValueKind.BOOL: "boolean",
    ValueKind.INTEGER: "integer",
    ValueKind.FLOAT: "float_",
    ValueKind.STRING: "string",
}


def _float_text(value: float) -> str:
    """Decimal text for a parsed float, never in exponent form."""
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def _apply_object_hooks(
    pairs: list[tuple[str, Any]], config: "ParseConfig | None"
) -> Any:
    """Applies object hooks to converted members."""
    if config is not None and config.object_pairs_hook:
        return config.object_pairs_hook(pairs)
    obj = dict(pairs)
    if config is not None and config.object_hook:
        return config.object_hook(obj)
    return obj

