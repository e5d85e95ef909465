"""Exception hierarchy for query parameter binding."""


class BindingError(Exception):
    """Base exception for query-parameter-to-message binding errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging (CWE-209 prevention). ``path`` holds the
    dotted query key that failed, when known.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        path: str = "",
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped
        self.path = path

    def internal(self) -> str:
        return self.internal_details


class NonAggregatePathError(BindingError):
    """Raised when a non-message field appears in the middle of a path."""


class UnsupportedFieldTypeError(BindingError):
    """Raised when a field kind cannot be bound from a query parameter."""


class ValueConversionError(BindingError):
    """Raised when a raw string cannot be parsed as the field's kind."""


class NoValueError(BindingError):
    """Raised when a singular field is given no value."""


class InvalidQueryKeyError(BindingError):
    """Raised when a field path has no segments at all."""


class MaxPathDepthExceededError(BindingError):
    """Raised when a query key has more segments than allowed."""


# Sanitized user-facing error message constants
ERR_MSG_NON_AGGREGATE = "non-aggregate type in the middle of path"
ERR_MSG_UNSUPPORTED_TYPE = "unsupported field type"
ERR_MSG_REPEATED_IN_PATH = "unexpected repeated field in path"
ERR_MSG_INVALID_VALUE = "invalid value for field"
ERR_MSG_NO_VALUE = "no value of field"
ERR_MSG_INVALID_KEY = "invalid query parameter name"
ERR_MSG_PATH_TOO_DEEP = "query parameter path too deep"
