"""pyquery2msg - Bind URL query parameters into structured request messages."""

from __future__ import annotations

__version__ = "0.1.0"

from urllib.parse import parse_qs

from pyquery2msg._binder import populate_query_parameters
from pyquery2msg._errors import (
    BindingError,
    InvalidQueryKeyError,
    MaxPathDepthExceededError,
    NonAggregatePathError,
    NoValueError,
    UnsupportedFieldTypeError,
    ValueConversionError,
)
from pyquery2msg.exclusion import ExclusionFilter
from pyquery2msg.message import DynamicMessage, Message
from pyquery2msg.schema import FieldDescriptor, FieldNaming, Kind, Schema

__all__ = [
    "parse_query_string",
    "populate_query_parameters",
    "populate_query_string",
    "BindingError",
    "InvalidQueryKeyError",
    "MaxPathDepthExceededError",
    "NonAggregatePathError",
    "NoValueError",
    "UnsupportedFieldTypeError",
    "ValueConversionError",
    "DynamicMessage",
    "ExclusionFilter",
    "FieldDescriptor",
    "FieldNaming",
    "Kind",
    "Message",
    "Schema",
]


def parse_query_string(query: str) -> dict[str, list[str]]:
    """Decode a raw query string into keys mapped to their ordered values.

    Blank values are kept (``a=`` yields ``{"a": [""]}``) and a repeated key
    collects every value in order of appearance.
    """
    return parse_qs(query, keep_blank_values=True)


def populate_query_string(
    message: Message,
    query: str,
    exclusion: ExclusionFilter | None = None,
    *,
    max_path_depth: int | None = None,
) -> None:
    """Decode ``query`` and populate it into ``message``.

    Args:
        message: The request message to fill in place.
        query: Raw query string, without the leading ``?``.
        exclusion: Prefixes already bound by another source.
        max_path_depth: Maximum segments per key. Defaults to 100.

    Raises:
        BindingError: A key could not be bound.
    """
    populate_query_parameters(
        message,
        parse_query_string(query),
        exclusion,
        max_path_depth=max_path_depth,
    )
