"""Key splitting and field-name translation helpers."""

from __future__ import annotations

from pyquery2msg._constants import PATH_SEPARATOR
from pyquery2msg._errors import ERR_MSG_PATH_TOO_DEEP, MaxPathDepthExceededError


def split_field_path(key: str) -> list[str]:
    """Split a query key into its dot-path segments.

    Empty segments are kept; they name no field, so the resolver skips
    the key.
    """
    return key.split(PATH_SEPARATOR)


def check_path_depth(path: list[str], max_depth: int) -> None:
    """Reject a path with more than ``max_depth`` segments."""
    if len(path) > max_depth:
        raise MaxPathDepthExceededError(
            ERR_MSG_PATH_TOO_DEEP,
            f"key has {len(path)} segments, limit is {max_depth}",
            path=PATH_SEPARATOR.join(path),
        )


def pascal_from_snake(name: str) -> str:
    """Convert ``lower_snake`` to ``PascalCase``."""
    return "".join(
        part[:1].upper() + part[1:] for part in name.lower().split("_")
    )


def camel_from_snake(name: str) -> str:
    """Convert ``lower_snake`` to ``camelCase``."""
    pascal = pascal_from_snake(name)
    return pascal[:1].lower() + pascal[1:]
