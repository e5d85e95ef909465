"""Limits and separators for query parameter binding."""

PATH_SEPARATOR = "."
"""Separator between field-path segments in a query key."""

DEFAULT_MAX_PATH_DEPTH = 100
"""Maximum number of segments in a single query key (CWE-674 prevention)."""
