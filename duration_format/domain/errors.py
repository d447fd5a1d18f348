"""Duration error hierarchy

Every error raised on purpose by duration_format inherits from DurationError.
Each error also carries a ``kind`` tag and the ``operation`` that raised it so
callers can branch on the category without isinstance chains.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Category of a duration error"""

    DURATION = "duration"
    NEGATIVE_VALUE = "negative_value"
    NON_INTEGER_VALUE = "non_integer_value"
    EMPTY_DURATION = "empty_duration"
    INVALID_OPTION = "invalid_option"


class DurationError(Exception):
    """Base exception for all duration errors"""

    kind: ErrorKind = ErrorKind.DURATION
    operation: Optional[str] = None


class NegativeValueError(DurationError):
    """A duration field was given a negative value"""

    kind = ErrorKind.NEGATIVE_VALUE

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Duration cannot be negative, got {field}: {value}")


class NonIntegerValueError(DurationError):
    """A present duration field is not a whole number"""

    kind = ErrorKind.NON_INTEGER_VALUE

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Given number must be an integer, got {field}: {value}")


class NormalizeDurationError(DurationError):
    """Error raised by normalize_duration()"""

    operation = "normalize"


class NormalizeNonIntegerDurationError(NormalizeDurationError, NonIntegerValueError):
    """normalize_duration() was given a duration holding non-integers"""


class FormatDurationError(DurationError):
    """Error raised by format_duration()"""

    operation = "format"


class FormatNonIntegerDurationError(FormatDurationError, NonIntegerValueError):
    """format_duration() was given a duration holding non-integers"""


class FormatEmptyDurationError(FormatDurationError):
    """format_duration() was given a duration with no present fields"""

    kind = ErrorKind.EMPTY_DURATION

    def __init__(self, message: str = "Cannot format empty duration"):
        super().__init__(message)


class InvalidOptionError(FormatDurationError):
    """format_duration() was given an invalid option

    Raised for a max_entries that is not a positive integer, and for any other
    option that fails validation.
    """

    kind = ErrorKind.INVALID_OPTION

    def __init__(self, option: Optional[str], message: str):
        self.option = option
        super().__init__(message)


EmptyDurationError = FormatEmptyDurationError


__all__ = [
    "ErrorKind",
    "DurationError",
    "NegativeValueError",
    "NonIntegerValueError",
    "NormalizeDurationError",
    "NormalizeNonIntegerDurationError",
    "FormatDurationError",
    "FormatNonIntegerDurationError",
    "FormatEmptyDurationError",
    "EmptyDurationError",
    "InvalidOptionError",
]
