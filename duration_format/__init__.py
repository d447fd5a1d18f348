"""duration-format - normalize and format durations of time

Basic usage::

    from duration_format import Duration, format_duration, normalize_duration

    duration = normalize_duration(Duration(years=0, days=0, hours=0, milliseconds=1733140034227))
    # Duration(years=54, days=349, hours=11, minutes=None, seconds=None, milliseconds=2834227)
    format_duration(duration, max_entries=3)
    # '54 years, 349 days, 11 hours'
"""

import logging

from duration_format.application.formatting import format_duration, resolve_options
from duration_format.application.normalize import normalize_duration
from duration_format.core.config import Settings, settings
from duration_format.core.logging_config import configure_logging
from duration_format.domain.errors import (
    DurationError,
    EmptyDurationError,
    ErrorKind,
    FormatDurationError,
    FormatEmptyDurationError,
    FormatNonIntegerDurationError,
    InvalidOptionError,
    NegativeValueError,
    NonIntegerValueError,
    NormalizeDurationError,
    NormalizeNonIntegerDurationError,
)
from duration_format.domain.value_objects.duration import Duration, TimeUnit
from duration_format.schemas.format_options import FormatOptions

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Duration",
    "TimeUnit",
    "FormatOptions",
    "normalize_duration",
    "format_duration",
    "resolve_options",
    "Settings",
    "settings",
    "configure_logging",
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
