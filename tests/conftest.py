"""Shared test fixtures."""

import pytest

from pyquery2msg.message import DynamicMessage
from pyquery2msg.schema import FieldDescriptor, FieldNaming, Kind, Schema

NESTED_SCHEMA = Schema(
    [
        FieldDescriptor(name="name", kind=Kind.STRING),
        FieldDescriptor(name="amount", kind=Kind.UINT32),
        FieldDescriptor(name="value", kind=Kind.INT32),
    ],
    name="Nested",
)

SIMPLE_SCHEMA = Schema(
    [
        FieldDescriptor(name="bool_value", kind=Kind.BOOL),
        FieldDescriptor(name="int32_value", kind=Kind.INT32),
        FieldDescriptor(name="int64_value", kind=Kind.INT64),
        FieldDescriptor(name="uint32_value", kind=Kind.UINT32),
        FieldDescriptor(name="uint64_value", kind=Kind.UINT64),
        FieldDescriptor(name="float_value", kind=Kind.FLOAT32),
        FieldDescriptor(name="double_value", kind=Kind.FLOAT64),
        FieldDescriptor(name="string_value", kind=Kind.STRING),
        FieldDescriptor(name="bytes_value", kind=Kind.BYTES),
        FieldDescriptor(name="map_value", kind=Kind.MAP),
        FieldDescriptor(name="nested", kind=Kind.MESSAGE, message_schema=NESTED_SCHEMA),
        FieldDescriptor(name="id", kind=Kind.INT32, repeated=True),
        FieldDescriptor(name="tags", kind=Kind.STRING, repeated=True),
        FieldDescriptor(name="blobs", kind=Kind.BYTES, repeated=True),
        FieldDescriptor(
            name="nested_list",
            kind=Kind.MESSAGE,
            repeated=True,
            message_schema=NESTED_SCHEMA,
        ),
    ],
    name="SimpleMessage",
)

PASCAL_NESTED_SCHEMA = Schema(
    [FieldDescriptor(name="DisplayName", kind=Kind.STRING)],
    name="PascalNested",
    naming=FieldNaming.PASCAL,
)

PASCAL_SCHEMA = Schema(
    [
        FieldDescriptor(name="PageSize", kind=Kind.INT32),
        FieldDescriptor(name="Owner", kind=Kind.MESSAGE, message_schema=PASCAL_NESTED_SCHEMA),
    ],
    name="PascalMessage",
    naming=FieldNaming.PASCAL,
)


@pytest.fixture
def msg():
    return DynamicMessage(SIMPLE_SCHEMA)


@pytest.fixture
def pascal_msg():
    return DynamicMessage(PASCAL_SCHEMA)
