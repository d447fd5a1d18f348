"""Duration value object"""

import numbers
from dataclasses import asdict, dataclass, fields
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from duration_format.domain.errors import DurationError, NegativeValueError, NonIntegerValueError

MILLISECONDS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_YEAR = 365  # no leap years

MS_PER_SECOND = MILLISECONDS_PER_SECOND
MS_PER_MINUTE = SECONDS_PER_MINUTE * MS_PER_SECOND
MS_PER_HOUR = MINUTES_PER_HOUR * MS_PER_MINUTE
MS_PER_DAY = HOURS_PER_DAY * MS_PER_HOUR
MS_PER_YEAR = DAYS_PER_YEAR * MS_PER_DAY


class TimeUnit(Enum):
    """Units of a duration, largest first"""

    YEARS = ("years", "year", "years", MS_PER_YEAR)
    DAYS = ("days", "day", "days", MS_PER_DAY)
    HOURS = ("hours", "hour", "hours", MS_PER_HOUR)
    MINUTES = ("minutes", "minute", "minutes", MS_PER_MINUTE)
    SECONDS = ("seconds", "second", "seconds", MS_PER_SECOND)
    MILLISECONDS = ("milliseconds", "millisecond", "milliseconds", 1)

    def __init__(self, field_name: str, singular: str, plural: str, milliseconds: int):
        self.field_name = field_name
        self.singular = singular
        self.plural = plural
        self.milliseconds = milliseconds


def is_whole_number(value: Any) -> bool:
    """Check if value is a number int() converts exactly, bools excluded"""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Rational):
        return value.denominator == 1
    if isinstance(value, float):
        return value.is_integer()
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    return False


@dataclass(frozen=True)
class Duration:
    """Duration of time split into units

    Every field is optional. A field set to None is absent, which is not the
    same as a field set to 0: absent fields are skipped by both normalizing
    and formatting. Present values must be non-negative whole numbers:
    ints, or floats, Fractions and Decimals holding an integral value.

    Durations are immutable. normalized() and normalize_duration() return a
    new Duration rather than updating the original.
    """

    years: Optional[int] = None
    days: Optional[int] = None
    hours: Optional[int] = None
    minutes: Optional[int] = None
    seconds: Optional[int] = None
    milliseconds: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate duration"""
        for unit in TimeUnit:
            value = getattr(self, unit.field_name)
            if isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool) and value < 0:
                raise NegativeValueError(unit.field_name, value)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> "Duration":
        """Create duration with every unit present, holding only milliseconds"""
        return cls(years=0, days=0, hours=0, minutes=0, seconds=0, milliseconds=milliseconds)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Duration":
        """Create duration from a mapping of unit field names"""
        known = {unit.field_name for unit in TimeUnit}
        unknown = sorted(key for key in mapping if key not in known)
        if unknown:
            raise DurationError(f"Unknown duration fields: {', '.join(map(str, unknown))}")
        return cls(**{key: mapping[key] for key in mapping})

    @classmethod
    def coerce(cls, value: Union["Duration", Mapping[str, Any]]) -> "Duration":
        """Accept a Duration or a mapping of unit field names"""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        raise DurationError(f"Expected a Duration or a mapping, got {type(value).__name__}")

    def get(self, unit: TimeUnit) -> Optional[int]:
        """Get the value of a unit, None when absent"""
        return getattr(self, unit.field_name)

    def present_units(self) -> List[TimeUnit]:
        """Get the present units, largest first"""
        return [unit for unit in TimeUnit if self.get(unit) is not None]

    def is_empty(self) -> bool:
        """Check if no unit is present"""
        return not self.present_units()

    def non_integer_entry(self) -> Optional[Tuple[str, Any]]:
        """Get the first present non-zero (field, value) pair that is not a whole number"""
        for unit in TimeUnit:
            value = self.get(unit)
            if value is not None and value != 0 and not is_whole_number(value):
                return unit.field_name, value
        return None

    @property
    def total_milliseconds(self) -> int:
        """Get the whole duration in milliseconds, absent units counting as 0"""
        entry = self.non_integer_entry()
        if entry:
            raise NonIntegerValueError(*entry)
        return sum(int(self.get(unit) or 0) * unit.milliseconds for unit in TimeUnit)

    def to_dict(self, include_absent: bool = False) -> Dict[str, Optional[int]]:
        """Convert to dict, dropping absent units unless asked not to"""
        data = asdict(self)
        if include_absent:
            return data
        return {key: value for key, value in data.items() if value is not None}

    def normalized(self) -> "Duration":
        """Get a normalized copy of this duration"""
        from duration_format.application.normalize import normalize_duration

        return normalize_duration(self)

    def format(self, options: Optional[Any] = None, **overrides: Any) -> str:
        """Format this duration as a string"""
        from duration_format.application.formatting import format_duration

        return format_duration(self, options, **overrides)

    def __str__(self) -> str:
        """String representation"""
        if self.is_empty() or self.non_integer_entry():
            return repr(self)
        return self.format()

    def __add__(self, other: "Duration") -> "Duration":
        """Add two durations unit by unit"""
        if not isinstance(other, Duration):
            return NotImplemented

        values: Dict[str, Optional[int]] = {}
        for field in fields(self):
            left = getattr(self, field.name)
            right = getattr(other, field.name)
            if left is None and right is None:
                values[field.name] = None
            else:
                values[field.name] = (left or 0) + (right or 0)
        return Duration(**values)
