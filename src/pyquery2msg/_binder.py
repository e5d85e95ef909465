"""Binding of query parameter values into message fields."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from pyquery2msg._constants import DEFAULT_MAX_PATH_DEPTH
from pyquery2msg._converters import convert_value, get_converter
from pyquery2msg._errors import ERR_MSG_NO_VALUE, NoValueError
from pyquery2msg._resolver import FieldTarget, resolve_field_path
from pyquery2msg._utils import check_path_depth, split_field_path
from pyquery2msg.exclusion import ExclusionFilter
from pyquery2msg.message import Message, zero_value

logger = logging.getLogger(__name__)


def populate_query_parameters(
    message: Message,
    values: Mapping[str, Sequence[str]],
    exclusion: ExclusionFilter | None = None,
    *,
    max_path_depth: int | None = None,
) -> None:
    """Populate ``values`` into ``message``.

    A key is ignored if one of the prefixes in ``exclusion`` is a prefix of
    its path, or if its path names a field the message does not have. The
    first fatal error aborts the call; fields bound before it stay set.

    Args:
        message: The request message to fill in place.
        values: Decoded query parameters, each key mapped to its values.
        exclusion: Prefixes already bound by another source.
        max_path_depth: Maximum segments per key. Defaults to 100.

    Raises:
        BindingError: A key could not be bound. ``path`` names the key.
    """
    if not isinstance(message, Message):
        raise TypeError(f"unexpected type {type(message).__name__}: not a message")
    if max_path_depth is None:
        max_path_depth = DEFAULT_MAX_PATH_DEPTH

    for key, key_values in values.items():
        path = split_field_path(key)
        if exclusion is not None and exclusion.excludes(path):
            continue
        check_path_depth(path, max_path_depth)
        target = resolve_field_path(message, path)
        if target is None:
            continue
        if target.field.repeated:
            populate_repeated_field(target, key_values)
        else:
            populate_field(target, key_values)


def populate_field(target: FieldTarget, values: Sequence[str]) -> None:
    """Set a singular field from the first of ``values``."""
    if not values:
        raise NoValueError(
            ERR_MSG_NO_VALUE,
            f"no value of field: {target.path}",
            path=target.path,
        )
    if len(values) > 1:
        logger.warning("too many field values: %s", target.path)
    value = convert_value(target.field.kind, values[0], path=target.path)
    target.message.set_field(target.field.name, value)


def populate_repeated_field(target: FieldTarget, values: Sequence[str]) -> None:
    """Replace a repeated field with ``values`` converted in order.

    The field is replaced even when a value fails to convert: elements
    before the failing one hold their converted values, the rest hold the
    element kind's zero value.
    """
    kind = target.field.kind
    # unsupported element kinds leave the field untouched
    get_converter(kind, path=target.path)
    elements = [zero_value(kind)] * len(values)
    try:
        for i, raw in enumerate(values):
            elements[i] = convert_value(kind, raw, path=target.path)
    finally:
        target.message.set_field(target.field.name, elements)
