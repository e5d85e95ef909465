"""Field path resolution against a message's schema."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pyquery2msg._constants import PATH_SEPARATOR
from pyquery2msg._converters import CONVERTERS
from pyquery2msg._errors import (
    ERR_MSG_INVALID_KEY,
    ERR_MSG_NON_AGGREGATE,
    ERR_MSG_REPEATED_IN_PATH,
    ERR_MSG_UNSUPPORTED_TYPE,
    InvalidQueryKeyError,
    NonAggregatePathError,
    UnsupportedFieldTypeError,
)
from pyquery2msg.message import Message
from pyquery2msg.schema import FieldDescriptor, Kind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldTarget:
    """The field a query key addresses, and the message that owns it."""

    message: Message
    field: FieldDescriptor
    path: str


def find_field(message: Message, segment: str) -> FieldDescriptor | None:
    """Look up a lower_snake path segment in ``message``'s fields."""
    name = message.field_naming.from_snake(segment)
    for descriptor in message.list_fields():
        if descriptor.name == name:
            return descriptor
    return None


def _describe(message: Message) -> str:
    schema = getattr(message, "schema", None)
    name = getattr(schema, "name", "")
    return name or type(message).__name__


def resolve_field_path(message: Message, path: Sequence[str]) -> FieldTarget | None:
    """Walk ``path`` from ``message`` down to the addressed field.

    Nested messages along the way are reused when already set. Unset ones
    are allocated, but attached to their parents only once the whole path
    resolves, so a key that is skipped or rejected leaves ``message``
    unchanged. Returns ``None`` when a segment names no field; the caller
    skips the key.

    Raises:
        InvalidQueryKeyError: ``path`` is empty.
        NonAggregatePathError: A scalar field appears before the last segment.
        UnsupportedFieldTypeError: A repeated field appears before the last
            segment, or the addressed field has no converter.
    """
    if not path:
        raise InvalidQueryKeyError(ERR_MSG_INVALID_KEY, "empty field path")
    dotted = PATH_SEPARATOR.join(path)

    current = message
    pending: list[tuple[Message, str, Message]] = []
    for segment in path[:-1]:
        descriptor = find_field(current, segment)
        if descriptor is None:
            logger.warning("field not found in %s: %s", _describe(current), dotted)
            return None
        if descriptor.repeated:
            raise UnsupportedFieldTypeError(
                ERR_MSG_REPEATED_IN_PATH,
                f"unexpected repeated field {descriptor.name!r} in {dotted}",
                path=dotted,
            )
        if descriptor.kind in CONVERTERS:
            raise NonAggregatePathError(
                ERR_MSG_NON_AGGREGATE,
                f"non-aggregate type in the middle of path: {dotted}",
                path=dotted,
            )
        if descriptor.kind is not Kind.MESSAGE:
            raise UnsupportedFieldTypeError(
                ERR_MSG_UNSUPPORTED_TYPE,
                f"unexpected type {descriptor.kind} of field {descriptor.name!r} in {dotted}",
                path=dotted,
            )
        nested = current.get_field(descriptor.name)
        if nested is None:
            nested = current.new_nested_instance(descriptor.name)
            pending.append((current, descriptor.name, nested))
        current = nested

    descriptor = find_field(current, path[-1])
    if descriptor is None:
        logger.warning("field not found in %s: %s", _describe(current), dotted)
        return None
    if not descriptor.repeated and descriptor.kind not in CONVERTERS:
        raise UnsupportedFieldTypeError(
            ERR_MSG_UNSUPPORTED_TYPE,
            f"unexpected type {descriptor.kind} of field {descriptor.name!r} in {dotted}",
            path=dotted,
        )
    for parent, name, nested in pending:
        parent.set_field(name, nested)
    return FieldTarget(current, descriptor, dotted)
