"""Duration normalization"""

import logging
from typing import Any, Dict, List, Mapping, Union

from duration_format.domain.errors import NormalizeNonIntegerDurationError
from duration_format.domain.value_objects.duration import Duration, TimeUnit

logger = logging.getLogger(__name__)

# Units from smallest to largest, the order overflow is carried in
CARRY_ORDER: List[TimeUnit] = list(reversed(TimeUnit))


def normalize_duration(duration: Union[Duration, Mapping[str, Any]]) -> Duration:
    """Carry overflow from smaller units into larger ones

    e.g. 120,000 milliseconds becomes 2 minutes. Every unit below the largest
    present unit ends up within its natural bound, and the largest present
    unit absorbs the rest. Absent units stay absent: whatever they would hold
    is folded back into the next smaller present unit.

    The given duration is not modified, a new Duration is returned.

    Raises:
        NormalizeNonIntegerDurationError: a present value is not a whole number
    """
    duration = Duration.coerce(duration)

    entry = duration.non_integer_entry()
    if entry:
        error = NormalizeNonIntegerDurationError(*entry)
        logger.debug(f"Cannot normalize {duration!r}: {error}")
        raise error

    # Absent units accumulate as 0
    values: Dict[TimeUnit, int] = {unit: int(duration.get(unit) or 0) for unit in TimeUnit}

    for smaller, larger in zip(CARRY_ORDER, CARRY_ORDER[1:]):
        factor = larger.milliseconds // smaller.milliseconds
        carried, values[smaller] = divmod(values[smaller], factor)
        values[larger] += carried

    # Top-down, so each fold lands on a unit that is still being examined
    result: Dict[str, Any] = {}
    units = list(TimeUnit)
    for index, unit in enumerate(units):
        if duration.get(unit) is not None:
            result[unit.field_name] = values[unit]
        elif index + 1 < len(units):
            smaller = units[index + 1]
            values[smaller] += values[unit] * (unit.milliseconds // smaller.milliseconds)

    normalized = Duration(**result)
    logger.debug(f"Normalized {duration!r} to {normalized!r}")
    return normalized
