"""Duration formatting"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from duration_format.domain.errors import (
    FormatEmptyDurationError,
    FormatNonIntegerDurationError,
    InvalidOptionError,
)
from duration_format.domain.value_objects.duration import Duration, TimeUnit
from duration_format.schemas.format_options import FormatOptions

logger = logging.getLogger(__name__)

Entry = Tuple[TimeUnit, int]


def _field_names() -> Dict[str, str]:
    """Map option aliases to field names"""
    return {field.alias: name for name, field in FormatOptions.model_fields.items() if field.alias}


def _by_field_name(options: Mapping[str, Any]) -> Dict[str, Any]:
    names = _field_names()
    return {names.get(key, key): value for key, value in options.items()}


def resolve_options(
    options: Optional[Union[FormatOptions, Mapping[str, Any]]] = None, **overrides: Any
) -> FormatOptions:
    """Build FormatOptions from an instance, a mapping and keyword overrides

    Raises:
        InvalidOptionError: an option is unknown or has an invalid value
    """
    if options is None:
        data: Dict[str, Any] = {}
    elif isinstance(options, FormatOptions):
        if not overrides:
            return options
        data = options.model_dump()
    elif isinstance(options, Mapping):
        data = _by_field_name(options)
    else:
        raise InvalidOptionError(
            None, f"Expected FormatOptions or a mapping, got {type(options).__name__}"
        )

    data.update(_by_field_name(overrides))
    # None means "use the default"
    data = {key: value for key, value in data.items() if value is not None}
    try:
        return FormatOptions.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        loc = str(first["loc"][0]) if first["loc"] else ""
        option = _field_names().get(loc, loc) or None
        raise InvalidOptionError(option, f"Invalid option {option}: {first['msg']}") from e


def hide_zero_entries(entries: List[Entry], hide_zero: Union[bool, str]) -> List[Entry]:
    """Drop zero entries, all of them or only the leading run"""
    if hide_zero == "leading":
        for index, (_, value) in enumerate(entries):
            if value != 0:
                return entries[index:]
        return []
    if hide_zero:
        return [entry for entry in entries if entry[1] != 0]
    return entries


def format_duration(
    duration: Union[Duration, Mapping[str, Any]],
    options: Optional[Union[FormatOptions, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> str:
    """Format a duration as a string

    Each present unit becomes "<value> <unit>", largest unit first, joined by
    the separator. Options may be given as a FormatOptions, a mapping, keyword
    arguments, or any mix of those.

    Examples:
        >>> format_duration(Duration(years=54, days=349, hours=11))
        '54 years, 349 days, 11 hours'
        >>> format_duration({"days": 1, "hours": 2, "minutes": 3}, maxEntries=2)
        '1 day, 2 hours'

    Raises:
        FormatNonIntegerDurationError: a present value is not a whole number
        InvalidOptionError: max_entries is not a positive integer, or another
            option is invalid
        FormatEmptyDurationError: the duration has no present units
    """
    duration = Duration.coerce(duration)

    entry = duration.non_integer_entry()
    if entry:
        error = FormatNonIntegerDurationError(*entry)
        logger.debug(f"Cannot format {duration!r}: {error}")
        raise error

    resolved = resolve_options(options, **overrides)

    entries: List[Entry] = [(unit, int(duration.get(unit))) for unit in duration.present_units()]
    if not entries:
        error = FormatEmptyDurationError()
        logger.debug(f"Cannot format {duration!r}: {error}")
        raise error

    visible = hide_zero_entries(entries, resolved.hide_zero)
    if not visible:
        # Everything was zero, show the smallest present unit
        visible = [(entries[-1][0], 0)]

    if resolved.max_entries is not None:
        visible = visible[: resolved.max_entries]

    space = "" if resolved.no_space_before_unit else " "
    text = resolved.separator.join(
        f"{value}{space}{resolved.unit_name(unit, value)}" for unit, value in visible
    )
    logger.debug(f"Formatted {duration!r} as {text!r}")
    return text
