"""Message protocol and a schema-backed message implementation."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pyquery2msg.schema import FieldDescriptor, FieldNaming, Kind, Schema

_ZERO_VALUES: dict[Kind, Any] = {
    Kind.BOOL: False,
    Kind.INT32: 0,
    Kind.INT64: 0,
    Kind.UINT32: 0,
    Kind.UINT64: 0,
    Kind.FLOAT32: 0.0,
    Kind.FLOAT64: 0.0,
    Kind.STRING: "",
    Kind.BYTES: b"",
}


def zero_value(kind: Kind) -> Any:
    """Return the value an unset singular field of ``kind`` reads as."""
    return _ZERO_VALUES.get(kind)


@runtime_checkable
class Message(Protocol):
    """Field access capability every bindable message provides."""

    @property
    def field_naming(self) -> FieldNaming: ...

    def list_fields(self) -> list[FieldDescriptor]: ...
    def get_field(self, name: str) -> Any: ...
    def set_field(self, name: str, value: Any) -> None: ...
    def new_nested_instance(self, name: str) -> Message: ...


class DynamicMessage:
    """Message whose shape is defined entirely by a :class:`Schema`.

    Unset singular scalars read as their kind's zero value, unset nested
    messages as ``None`` and unset repeated fields as an empty list.
    """

    def __init__(self, schema: Schema, **values: Any) -> None:
        self._schema = schema
        self._values: dict[str, Any] = {}
        for name, value in values.items():
            self.set_field(name, value)

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def field_naming(self) -> FieldNaming:
        return self._schema.naming

    def list_fields(self) -> list[FieldDescriptor]:
        return self._schema.fields

    def get_field(self, name: str) -> Any:
        descriptor = self._descriptor(name)
        if name in self._values:
            return self._values[name]
        if descriptor.repeated:
            return []
        return zero_value(descriptor.kind)

    def set_field(self, name: str, value: Any) -> None:
        self._descriptor(name)
        self._values[name] = value

    def new_nested_instance(self, name: str) -> DynamicMessage:
        descriptor = self._descriptor(name)
        if descriptor.kind is not Kind.MESSAGE or descriptor.message_schema is None:
            raise TypeError(f"field {name!r} of {self._schema.name or 'message'} is not a message")
        return DynamicMessage(descriptor.message_schema)

    def has_field(self, name: str) -> bool:
        self._descriptor(name)
        return name in self._values

    def to_dict(self) -> dict[str, Any]:
        """Return the set fields as plain values, nested messages included."""
        result: dict[str, Any] = {}
        for name, value in self._values.items():
            if isinstance(value, DynamicMessage):
                value = value.to_dict()
            elif isinstance(value, list):
                value = [v.to_dict() if isinstance(v, DynamicMessage) else v for v in value]
            result[name] = value
        return result

    def _descriptor(self, name: str) -> FieldDescriptor:
        descriptor = self._schema.find_field(name)
        if descriptor is None:
            raise KeyError(f"no field {name!r} in {self._schema.name or 'message'}")
        return descriptor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicMessage):
            return NotImplemented
        return self._schema is other._schema and self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DynamicMessage({self._schema.name or 'message'}, {self.to_dict()!r})"
