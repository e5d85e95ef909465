"""Schema types for query parameter binding."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pyquery2msg._utils import camel_from_snake, pascal_from_snake


class Kind(enum.StrEnum):
    """Field value kinds."""

    BOOL = "bool"
    INT32 = "int32"
    INT64 = "int64"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    MESSAGE = "message"
    # Declared so schemas can describe them; never bound from a query.
    BYTES = "bytes"
    MAP = "map"


class FieldNaming(enum.StrEnum):
    """Naming convention used by a schema's field names."""

    SNAKE = "snake"
    PASCAL = "pascal"
    CAMEL = "camel"

    def from_snake(self, segment: str) -> str:
        """Translate a lower_snake path segment to this convention."""
        if self is FieldNaming.PASCAL:
            return pascal_from_snake(segment)
        if self is FieldNaming.CAMEL:
            return camel_from_snake(segment)
        return segment


@dataclass(frozen=True)
class FieldDescriptor:
    """Schema for a single message field."""

    name: str
    kind: Kind = Kind.STRING
    repeated: bool = False
    message_schema: Schema | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("field name cannot be empty")
        if self.kind is Kind.MESSAGE and self.message_schema is None:
            raise ValueError(f"message field {self.name!r} requires message_schema")


class Schema:
    """Message schema with O(1) field lookup."""

    def __init__(
        self,
        fields: list[FieldDescriptor],
        *,
        name: str = "",
        naming: FieldNaming = FieldNaming.SNAKE,
    ) -> None:
        self._fields = list(fields)
        self._index: dict[str, FieldDescriptor] = {f.name: f for f in fields}
        self.name = name
        self.naming = naming

    @property
    def fields(self) -> list[FieldDescriptor]:
        return list(self._fields)

    def find_field(self, name: str) -> FieldDescriptor | None:
        return self._index.get(name)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Schema(name={self.name!r}, fields={[f.name for f in self._fields]!r})"
